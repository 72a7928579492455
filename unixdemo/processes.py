"""Creating child processes, replacing them with programs and waiting for them."""

from __future__ import annotations

import argparse
import enum
import os
import sys
from dataclasses import dataclass
from types import SimpleNamespace

from unixdemo.resources import format_usage

CHILD_MESSAGE = "child process\n"
PARENT_MESSAGE = "parent process\n"
CHILD_STATUS = 12
ECHO_PROGRAM = "/bin/echo"
ECHO_MESSAGE = "Hello, from child"
ECHO_PARENT_MESSAGE = "Hello, from parent\n"


class WaitMethod(enum.Enum):
    """The system call used to collect a finished child."""

    WAIT = "wait"
    WAITPID = "waitpid"
    WAIT4 = "wait4"
    WAITID = "waitid"


@dataclass(frozen=True)
class ChildResult:
    """How a child process ended.

    ``exit_status`` is set when the child exited normally, ``term_signal``
    when a signal ended it. The times are only filled in by ``wait4``.
    """

    pid: int
    exit_status: int | None
    user_time: float | None = None
    system_time: float | None = None
    term_signal: int | None = None

    @property
    def exited(self) -> bool:
        return self.exit_status is not None


def _as_bytes(data: str | bytes) -> bytes:
    return data.encode() if isinstance(data, str) else data


def spawn_child(message: str | bytes = CHILD_MESSAGE, status: int = 0) -> int:
    """Fork a child that writes message to standard output and exits with status.

    Returns the child's process ID in the parent.
    """
    payload = _as_bytes(message)
    sys.stdout.flush()
    sys.stderr.flush()
    pid = os.fork()
    if pid == 0:
        try:
            os.write(1, payload)
        finally:
            os._exit(status)
    return pid


def _from_status(pid: int, status: int, rusage: object | None = None) -> ChildResult:
    exit_status = os.WEXITSTATUS(status) if os.WIFEXITED(status) else None
    term_signal = os.WTERMSIG(status) if os.WIFSIGNALED(status) else None
    user = getattr(rusage, "ru_utime", None)
    system = getattr(rusage, "ru_stime", None)
    return ChildResult(pid, exit_status, user, system, term_signal)


def wait_for(pid: int, method: WaitMethod = WaitMethod.WAITPID) -> ChildResult:
    """Wait for a child to end using the chosen system call.

    ``WaitMethod.WAIT`` collects whichever child ends first.
    """
    method = WaitMethod(method)
    if method is WaitMethod.WAIT:
        done, status = os.wait()
        return _from_status(done, status)
    if method is WaitMethod.WAITPID:
        done, status = os.waitpid(pid, 0)
        return _from_status(done, status)
    if method is WaitMethod.WAIT4:
        done, status, usage = os.wait4(pid, 0)
        return _from_status(done, status, usage)
    info = os.waitid(os.P_PID, pid, os.WEXITED)
    if info is None:
        raise ChildProcessError(f"no state change reported for process {pid}")
    if info.si_code == os.CLD_EXITED:
        return ChildResult(info.si_pid, info.si_status)
    return ChildResult(info.si_pid, None, term_signal=info.si_status)


def run_echo(message: str = ECHO_MESSAGE) -> int:
    """Fork a child that runs the echo program with message; return its process ID."""
    sys.stdout.flush()
    sys.stderr.flush()
    pid = os.fork()
    if pid == 0:
        try:
            os.execve(ECHO_PROGRAM, ["echo", message], os.environ)
        except OSError as exc:
            os.write(2, f"execve: {exc.strerror or exc}\n".encode())
        finally:
            os._exit(1)
    return pid


def format_exit(result: ChildResult) -> str | None:
    """Describe a normal exit, or return None if the child did not exit normally."""
    if not result.exited:
        return None
    return f"pid = {result.pid} exited with status = {result.exit_status}"


def format_times(result: ChildResult) -> str:
    """Return the child's user and system time as two lines."""
    if result.user_time is None or result.system_time is None:
        raise ValueError("the result carries no resource usage")
    usage = SimpleNamespace(ru_utime=result.user_time, ru_stime=result.system_time)
    return format_usage(usage, "sec")


def _fork_and_wait(method: WaitMethod) -> None:
    pid = spawn_child(CHILD_MESSAGE, CHILD_STATUS)
    os.write(1, PARENT_MESSAGE.encode())
    result = wait_for(pid, method)
    line = format_exit(result)
    if line is not None:
        print(line, flush=True)
    if method is WaitMethod.WAIT4:
        print(format_times(result), flush=True)


def main(argv: list[str] | None = None) -> int:
    """Create, replace, end and wait for processes."""
    parser = argparse.ArgumentParser(
        prog="unixdemo-processes", description="Fork, exec, exit and wait."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name in ("fork", "execve", "exit"):
        sub.add_parser(name)
    for method in WaitMethod:
        sub.add_parser(method.value)
    args = parser.parse_args(argv)
    try:
        if args.command == "fork":
            spawn_child(CHILD_MESSAGE, 0)
            os.write(1, PARENT_MESSAGE.encode())
        elif args.command == "execve":
            run_echo()
            os.write(1, ECHO_PARENT_MESSAGE.encode())
        elif args.command == "exit":
            os._exit(0)
        else:
            _fork_and_wait(WaitMethod(args.command))
    except OSError as exc:
        print(f"{args.command}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())