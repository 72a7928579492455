"""Scheduling priority, CPU time limits and resource usage of the running process."""

from __future__ import annotations

import argparse
import itertools
import os
import resource
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Limit:
    """A soft and hard resource limit; ``None`` means unlimited."""

    soft: int | None
    hard: int | None

    @classmethod
    def _from_raw(cls, pair: tuple[int, int]) -> Limit:
        soft, hard = pair
        return cls(
            None if soft == resource.RLIM_INFINITY else soft,
            None if hard == resource.RLIM_INFINITY else hard,
        )

    def _raw(self) -> tuple[int, int]:
        return (
            resource.RLIM_INFINITY if self.soft is None else self.soft,
            resource.RLIM_INFINITY if self.hard is None else self.hard,
        )


def get_priority() -> int:
    """Return the nice value of this process."""
    return os.getpriority(os.PRIO_PROCESS, 0)


def set_priority(value: int = 19, command: Sequence[str] | None = None) -> int:
    """Set the nice value of this process.

    With a command, the process is then replaced by it; otherwise the new
    nice value is returned.
    """
    os.setpriority(os.PRIO_PROCESS, 0, value)
    if command is not None:
        sys.stdout.flush()
        os.execv(command[0], list(command))
    return get_priority()


def cpu_limit() -> Limit:
    """Return the CPU time limit in seconds."""
    return Limit._from_raw(resource.getrlimit(resource.RLIMIT_CPU))


def format_limit(limit: Limit) -> str:
    """Return the soft and hard limit as two ``rlim_*`` lines."""

    def show(value: int | None) -> str:
        return "unlimited" if value is None else str(value)

    return f"rlim_cur = {show(limit.soft)}\nrlim_max = {show(limit.hard)}"


def set_cpu_limit(soft: int | None = 1, hard: int | None = 2) -> Limit:
    """Set the CPU time limit in seconds and return the limit now in force."""
    resource.setrlimit(resource.RLIMIT_CPU, Limit(soft, hard)._raw())
    return cpu_limit()


def burn_cpu(iterations: int | None = 1_000_000) -> int:
    """Spend CPU time on system calls and multiplication; ``None`` loops forever.

    Returns the final value of the running product.
    """
    if iterations is not None and iterations < 0:
        raise ValueError("iterations must not be negative")
    counter = itertools.count(1) if iterations is None else range(1, iterations + 1)
    product = 1
    for i in counter:
        os.chdir(".")
        product *= i
        if product > 1_000_000_000:
            product = 1
    return product


def self_usage() -> Any:
    """Return the resource usage of this process."""
    return resource.getrusage(resource.RUSAGE_SELF)


def _timeval(seconds: float) -> str:
    whole, micro = divmod(round(seconds * 1_000_000), 1_000_000)
    return f"{whole}.{micro:06d}"


def format_usage(usage: Any, unit: str = "seconds") -> str:
    """Return the user and system time of a usage record as two lines."""
    return (
        f"user time   = {_timeval(usage.ru_utime)} {unit}\n"
        f"system time = {_timeval(usage.ru_stime)} {unit}"
    )


_REPORTS = ("getpriority", "getrlimit")


def _report(command: str) -> str:
    """Return the text shown by one of the read-only commands."""
    if command == "getpriority":
        return str(get_priority())
    if command == "getrlimit":
        return format_limit(cpu_limit())
    raise KeyError(command)


def _run_setpriority(args: argparse.Namespace) -> None:
    set_priority(args.value, [sys.executable, "-m", "unixdemo.resources", "getpriority"])


def _run_setrlimit(args: argparse.Namespace) -> None:
    set_cpu_limit(args.soft, args.hard)
    burn_cpu(None)


def _run_getrusage(args: argparse.Namespace) -> None:
    burn_cpu()
    print(format_usage(self_usage()))


def main(argv: list[str] | None = None) -> int:
    """Show or change the priority and resource limits of this process."""
    parser = argparse.ArgumentParser(
        prog="unixdemo-resources", description="Priority, limits and usage."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("getpriority").set_defaults(handler=None)
    setpriority = sub.add_parser("setpriority")
    setpriority.add_argument("value", type=int, nargs="?", default=19)
    setpriority.set_defaults(handler=_run_setpriority)
    sub.add_parser("getrlimit").set_defaults(handler=None)
    setrlimit = sub.add_parser("setrlimit")
    setrlimit.add_argument("--soft", type=int, default=1)
    setrlimit.add_argument("--hard", type=int, default=2)
    setrlimit.set_defaults(handler=_run_setrlimit)
    sub.add_parser("getrusage").set_defaults(handler=_run_getrusage)
    args = parser.parse_args(argv)
    try:
        if args.command in _REPORTS:
            print(_report(args.command))
        else:
            args.handler(args)
    except OSError as exc:
        print(f"{args.command}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{args.command}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())