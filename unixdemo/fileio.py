"""Opening, reading and writing files through descriptors."""

from __future__ import annotations

import argparse
import functools
import os
import sys

CHUNK_SIZE = 1024
READ_SIZE = 4096
OPENAT_MESSAGE = b"This file was created using openat().\n"
HELLO = b"Hello\n"
_CREATE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_MODE = 0o666


def copy_file(
    source: str | os.PathLike[str] = "/etc/hosts",
    destination: str | os.PathLike[str] = "file.txt",
) -> int:
    """Copy source into destination, creating or truncating it; return the bytes copied."""
    copied = 0
    with open(source, "rb", buffering=0) as src, open(destination, "wb", buffering=0) as dst:
        for chunk in iter(functools.partial(src.read, CHUNK_SIZE), b""):
            written = dst.write(chunk)
            if written != len(chunk):
                raise OSError(f"short write to {os.fspath(destination)}")
            copied += written
    return copied


def write_at(
    directory: str | os.PathLike[str] = "/var/tmp",
    name: str = "file.txt",
    data: bytes = OPENAT_MESSAGE,
) -> int:
    """Create or truncate name relative to an open descriptor of directory and write data."""
    dir_fd = os.open(directory, os.O_RDONLY)
    try:
        fd = os.open(name, _CREATE_FLAGS, _MODE, dir_fd=dir_fd)
        try:
            return os.write(fd, data)
        finally:
            os.close(fd)
    finally:
        os.close(dir_fd)


def echo_once(source_fd: int = 0, dest_fd: int = 1, size: int = READ_SIZE) -> bytes:
    """Read once from source_fd, write what was read to dest_fd and return it."""
    data = os.read(source_fd, size)
    os.write(dest_fd, data)
    return data


def write_hello(fd: int = 1) -> int:
    """Write a greeting line to fd and return the number of bytes written."""
    return os.write(fd, HELLO)


def main(argv: list[str] | None = None) -> int:
    """Copy, create, echo or write through file descriptors."""
    parser = argparse.ArgumentParser(
        prog="unixdemo-fileio", description="File descriptor input and output."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    open_parser = sub.add_parser("open")
    open_parser.add_argument("--source", default="/etc/hosts")
    open_parser.add_argument("--destination", default="file.txt")
    openat_parser = sub.add_parser("openat")
    openat_parser.add_argument("--directory", default="/var/tmp")
    openat_parser.add_argument("--name", default="file.txt")
    sub.add_parser("read")
    sub.add_parser("write")
    args = parser.parse_args(argv)
    try:
        if args.command == "open":
            copy_file(args.source, args.destination)
        elif args.command == "openat":
            write_at(args.directory, args.name)
        elif args.command == "read":
            sys.stdout.flush()
            echo_once()
        else:
            sys.stdout.flush()
            write_hello()
    except OSError as exc:
        where = exc.filename if exc.filename is not None else args.command
        print(f"{where}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())