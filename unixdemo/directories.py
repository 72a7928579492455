"""Changing the working directory and the root directory."""

from __future__ import annotations

import argparse
import os
import sys
import time


def change_directory(path: str | os.PathLike[str] = "/tmp") -> str:
    """Change the working directory to path and return the new working directory."""
    os.chdir(path)
    return os.getcwd()


def change_directory_fd(path: str | os.PathLike[str] = "/usr/bin") -> str:
    """Change the working directory through an open descriptor of path."""
    fd = os.open(path, os.O_RDONLY)
    try:
        os.fchdir(fd)
    finally:
        os.close(fd)
    return os.getcwd()


def enter_chroot(path: str | os.PathLike[str] = "/mnt", pause: float = 10) -> int:
    """Make path the root directory, move into it, announce it and pause.

    Returns the process ID.
    """
    os.chroot(path)
    os.chdir("/")
    pid = os.getpid()
    if pause:
        print(f"chroot 成功 (PID: {pid})。{pause:g}秒間スリープ中...", flush=True)
        time.sleep(pause)
    return pid


def main(argv: list[str] | None = None) -> int:
    """Change directories and show the result."""
    parser = argparse.ArgumentParser(
        prog="unixdemo-directories", description="Change working or root directory."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    chdir = sub.add_parser("chdir")
    chdir.add_argument("path", nargs="?", default="/tmp")
    fchdir = sub.add_parser("fchdir")
    fchdir.add_argument("path", nargs="?", default="/usr/bin")
    chroot = sub.add_parser("chroot")
    chroot.add_argument("path", nargs="?", default="/mnt")
    chroot.add_argument("--pause", type=float, default=10)
    args = parser.parse_args(argv)
    try:
        if args.command == "chdir":
            print(change_directory(args.path))
        elif args.command == "fchdir":
            print(change_directory_fd(args.path))
        else:
            enter_chroot(args.path, args.pause)
    except OSError as exc:
        print(f"{args.command}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())