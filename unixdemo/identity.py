"""User, group, process-group and session identifiers of the running process."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

DEFAULT_GROUPS = (3000, 3001, 3002)


@dataclass(frozen=True)
class UserIds:
    """Real and effective user and group IDs."""

    uid: int
    euid: int
    gid: int
    egid: int

    def __str__(self) -> str:
        return f"uid = {self.uid}, euid = {self.euid}, gid = {self.gid}, egid = {self.egid}"


@dataclass(frozen=True)
class ProcessIds:
    """Process, parent, process-group and session IDs."""

    pid: int
    ppid: int
    pgid: int
    sid: int


def current_user_ids() -> UserIds:
    """Return the real and effective user and group IDs."""
    return UserIds(os.getuid(), os.geteuid(), os.getgid(), os.getegid())


def current_process_ids() -> ProcessIds:
    """Return the IDs describing this process's place in the process tree."""
    return ProcessIds(os.getpid(), os.getppid(), os.getpgid(0), os.getsid(0))


def supplementary_groups() -> list[int]:
    """Return the supplementary group IDs of this process."""
    return os.getgroups()


def format_groups(groups: Iterable[int]) -> str:
    """Return each group ID followed by a space."""
    return "".join(f"{gid} " for gid in groups)


def set_supplementary_groups(
    groups: Iterable[int], command: Sequence[str] | None = None
) -> list[int]:
    """Replace the supplementary groups.

    With a command, the process is then replaced by it; otherwise the new
    group list is returned.
    """
    os.setgroups(list(groups))
    if command is not None:
        sys.stdout.flush()
        os.execv(command[0], list(command))
    return supplementary_groups()


def become_group_leader() -> tuple[int, int]:
    """Move this process into a group of its own; return the group ID before and after."""
    before = os.getpgid(0)
    os.setpgid(0, 0)
    return before, os.getpgid(0)


def start_session() -> ProcessIds:
    """Start a new session led by this process and return its IDs."""
    os.setsid()
    return current_process_ids()


def _uid_pair() -> tuple[int, int]:
    return os.getuid(), os.geteuid()


def seteuid_round_trip() -> Iterator[tuple[int, int]]:
    """Drop the effective UID to the real UID and restore it, yielding (uid, euid) at each step."""
    uid, euid = _uid_pair()
    yield uid, euid
    os.seteuid(uid)
    yield _uid_pair()
    os.seteuid(euid)
    yield _uid_pair()


def setreuid_round_trip() -> Iterator[tuple[int, int]]:
    """Swap the real and effective UIDs and swap them back, yielding (uid, euid) at each step."""
    uid, euid = _uid_pair()
    yield uid, euid
    os.setreuid(euid, uid)
    yield _uid_pair()
    os.setreuid(uid, euid)
    yield _uid_pair()


def setuid_round_trip() -> Iterator[tuple[int, int]]:
    """Set the UID to the real UID and then to the original effective UID, yielding each state."""
    uid, euid = _uid_pair()
    yield uid, euid
    os.setuid(uid)
    yield _uid_pair()
    os.setuid(euid)
    yield _uid_pair()


def _print_uid_states(states: Iterable[tuple[int, int]], separator: str) -> None:
    for uid, euid in states:
        print(f"uid = {uid}{separator} euid = {euid}", flush=True)


_REPORTS = ("ids", "groups", "pid", "pgid", "sid")


def _report(command: str) -> str:
    """Return the text shown by one of the read-only commands."""
    if command == "ids":
        return str(current_user_ids())
    if command == "groups":
        return format_groups(supplementary_groups())
    if command == "pid":
        return f"pid = {os.getpid()}, ppid = {os.getppid()}"
    if command == "pgid":
        return f"pgid = {os.getpgid(0)}"
    if command == "sid":
        return f"sid = {os.getsid(0)}"
    raise KeyError(command)


def _run_seteuid(args: argparse.Namespace) -> None:
    _print_uid_states(seteuid_round_trip(), "")


def _run_setreuid(args: argparse.Namespace) -> None:
    _print_uid_states(setreuid_round_trip(), ",")


def _run_setuid(args: argparse.Namespace) -> None:
    _print_uid_states(setuid_round_trip(), ",")


def _run_setgroups(args: argparse.Namespace) -> None:
    command = [sys.executable, "-m", "unixdemo.identity", "groups"]
    set_supplementary_groups(args.gids, command)


def _run_setpgid(args: argparse.Namespace) -> None:
    pid = os.getpid()
    print(f"Before setpgid: PID = {pid}, PGID = {os.getpgid(0)}", flush=True)
    _, after = become_group_leader()
    print(f"After setpgid: PID = {pid}, PGID = {after}", flush=True)
    time.sleep(1)


def _run_setsid(args: argparse.Namespace) -> None:
    sys.stdout.flush()
    if os.fork() > 0:
        os._exit(0)
    ids = start_session()
    print(f"PID  = {ids.pid}")
    print(f"SID  = {ids.sid}")
    print(f"PGID = {ids.pgid}", flush=True)
    time.sleep(1)


_ACTIONS = {
    "seteuid": _run_seteuid,
    "setreuid": _run_setreuid,
    "setuid": _run_setuid,
    "setgroups": _run_setgroups,
    "setpgid": _run_setpgid,
    "setsid": _run_setsid,
}


def main(argv: list[str] | None = None) -> int:
    """Show or change the identifiers of this process."""
    parser = argparse.ArgumentParser(
        prog="unixdemo-identity", description="Show or change process identifiers."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name in (*_REPORTS, *_ACTIONS):
        command_parser = sub.add_parser(name)
        if name == "setgroups":
            command_parser.add_argument(
                "gids", nargs="*", type=int, default=list(DEFAULT_GROUPS)
            )
    args = parser.parse_args(argv)
    try:
        if args.command in _REPORTS:
            print(_report(args.command))
        else:
            _ACTIONS[args.command](args)
    except OSError as exc:
        print(f"{args.command}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())