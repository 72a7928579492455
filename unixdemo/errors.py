"""Table of system error numbers and their messages."""

from __future__ import annotations

import argparse
import locale
import os
import sys
from collections.abc import Iterator


def error_messages(start: int = 0, stop: int = 255) -> Iterator[tuple[int, str]]:
    """Yield ``(number, message)`` for every error number from start to stop inclusive."""
    for number in range(start, stop + 1):
        yield number, os.strerror(number)


def format_error_table(start: int = 0, stop: int = 255) -> str:
    """Return one ``"<number> <message>"`` line per error number."""
    return "".join(f"{number} {message}\n" for number, message in error_messages(start, stop))


def main(argv: list[str] | None = None) -> int:
    """Print the message for every error number in the range."""
    parser = argparse.ArgumentParser(
        prog="unixdemo-errors", description="List error numbers with their messages."
    )
    parser.add_argument("--start", type=int, default=0, help="first error number")
    parser.add_argument("--stop", type=int, default=255, help="last error number")
    args = parser.parse_args(argv)
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass
    sys.stdout.write(format_error_table(args.start, args.stop))
    return 0


if __name__ == "__main__":
    sys.exit(main())