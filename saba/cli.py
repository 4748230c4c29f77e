"""Command that fetches one page and prints the parsed response."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from saba.client import HttpClient
from saba.errors import SabaError


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="saba", description="Fetch a page over HTTP and print the response."
    )
    parser.add_argument("host", nargs="?", default="host.test")
    parser.add_argument("port", nargs="?", type=int, default=8080)
    parser.add_argument("path", nargs="?", default="/")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch the page named on the command line and print the outcome."""
    args = _parser().parse_args(argv)
    client = HttpClient()
    try:
        response = client.get(args.host, args.port, args.path)
    except SabaError as exc:
        print(f"error:\n{exc!r}", end="")
    else:
        print(f"response:\n{response!r}", end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())