"""A minimal HTTP/1.1 client over plain TCP sockets."""

from __future__ import annotations

import socket
from dataclasses import dataclass

from saba.errors import NetworkError
from saba.http import HttpResponse

_CHUNK_SIZE = 4096


def build_request(host: str, path: str) -> str:
    """Return the text of a GET request for ``path`` on ``host``."""
    return (
        f"GET /{path} HTTP/1.1\n"
        f"Host: {host}\n"
        "Accept: text/html\n"
        "Connection: close\n"
        "\n"
    )


@dataclass
class HttpClient:
    """Sends GET requests and parses the responses."""

    timeout: float | None = None

    def get(self, host: str, port: int, path: str) -> HttpResponse:
        """Fetch ``path`` from ``host``:``port`` and return the parsed response."""
        try:
            infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
        except OSError as exc:
            raise NetworkError(f"Failed to find IP addresses: {exc!r}") from exc

        if not infos:
            raise NetworkError("Failed to find IP addresses")

        address = infos[0][4][0]

        try:
            stream = socket.create_connection((address, port), timeout=self.timeout)
        except OSError as exc:
            raise NetworkError("Failed to connect to TCP stream") from exc

        with stream:
            try:
                stream.sendall(build_request(host, path).encode())
            except OSError as exc:
                raise NetworkError("Failed to send a request to TCP stream") from exc

            chunks = []
            while True:
                try:
                    chunk = stream.recv(_CHUNK_SIZE)
                except OSError as exc:
                    raise NetworkError(
                        "Failed to receive a request from TCP stream"
                    ) from exc
                if not chunk:
                    break
                chunks.append(chunk)

        try:
            text = b"".join(chunks).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise NetworkError(f"Invalid received response: {exc}") from exc

        return HttpResponse.parse(text)