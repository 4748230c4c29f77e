"""Parsing of raw HTTP responses."""

from __future__ import annotations

from dataclasses import dataclass, field

from saba.errors import NetworkError, UnexpectedInputError

_U32_MAX = 2**32 - 1
_DEFAULT_STATUS = 404


@dataclass(frozen=True)
class Header:
    """A single response header."""

    name: str
    value: str


def _parse_status_code(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return _DEFAULT_STATUS
    code = int(digits)
    return code if code <= _U32_MAX else _DEFAULT_STATUS


def _parse_header(line: str) -> Header:
    parts = line.split(":", 1)
    if len(parts) < 2:
        raise UnexpectedInputError(f"invalid header line: {line}")
    name, value = parts
    return Header(name.strip(), value.strip())


@dataclass(frozen=True)
class HttpResponse:
    """A parsed HTTP response: status line, headers and body."""

    version: str
    status_code: int
    reason: str
    headers: tuple[Header, ...] = field(default_factory=tuple)
    body: str = ""

    @classmethod
    def parse(cls, raw_response: str) -> HttpResponse:
        """Parse the text of a response as received from the wire."""
        text = raw_response.lstrip().replace("\r\n", "\n")

        status_line, sep, remaining = text.partition("\n")
        if not sep:
            raise NetworkError(f"invalid http response: {text}")

        head, sep, body = remaining.partition("\n\n")
        if sep:
            headers = tuple(_parse_header(line) for line in head.split("\n"))
        else:
            headers, body = (), remaining

        statuses = status_line.split(" ")
        if len(statuses) < 3:
            raise UnexpectedInputError(f"invalid status line: {status_line}")

        return cls(
            version=statuses[0],
            status_code=_parse_status_code(statuses[1]),
            reason=statuses[2],
            headers=headers,
            body=body,
        )

    def header_value(self, name: str) -> str:
        """Return the value of the first header called ``name``."""
        for header in self.headers:
            if header.name == name:
                return header.value
        raise KeyError(f"failed to find {name} in headers")