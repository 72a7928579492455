# unixdemo

Small, self-contained demonstrations of the classic UNIX system calls:
error numbers, process and user identity, priorities and resource limits,
the working and root directory, creating and reaping child processes, and
plain file-descriptor I/O.

Each topic is a module you can import and call from Python, and each one
also has a command that runs the demonstration and prints what it finds.
The package uses only the Python standard library and runs on POSIX
systems (Linux, macOS, the BSDs); it does not work on Windows.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

Every command takes a subcommand (except `unixdemo-errors`); run any of
them with `--help` to see what it accepts.

| Command                | Subcommands / options                                                  |
|------------------------|------------------------------------------------------------------------|
| `unixdemo-errors`      | `--start N --stop N` (default 0 to 255): each error number and message |
| `unixdemo-identity`    | `ids`, `groups`, `pid`, `pgid`, `sid`, `seteuid`, `setreuid`, `setuid`, `setgroups [GID ...]`, `setpgid`, `setsid` |
| `unixdemo-resources`   | `getpriority`, `setpriority [VALUE]`, `getrlimit`, `setrlimit --soft N --hard N`, `getrusage` |
| `unixdemo-directories` | `chdir [PATH]`, `fchdir [PATH]`, `chroot [PATH] --pause SECONDS`       |
| `unixdemo-processes`   | `fork`, `execve`, `exit`, `wait`, `waitpid`, `wait4`, `waitid`         |
| `unixdemo-fileio`      | `open --source --destination`, `openat --directory --name`, `read`, `write` |

A few details worth knowing:

- `unixdemo-identity setgroups` sets the supplementary groups (3000, 3001
  and 3002 unless others are given) and then replaces itself with
  `unixdemo-identity groups` to show the result.
- `unixdemo-resources setpriority` sets the nice value (19 by default) and
  then replaces itself with `unixdemo-resources getpriority`.
- `unixdemo-resources setrlimit` sets the CPU-time limit (1 s soft, 2 s
  hard by default) and then spins until the system stops the process.
- `unixdemo-identity setsid` forks; the parent exits at once and the child
  starts a new session and prints its IDs.
- The `wait*` subcommands of `unixdemo-processes` fork a child that prints
  `child process` and exits with status 12, then collect it with the named
  call; `wait4` also prints the child's user and system time.
- `unixdemo-fileio open` copies `/etc/hosts` to `file.txt` by default;
  `openat` writes a line to `file.txt` inside `/var/tmp`; `read` copies
  one read of standard input to standard output; `write` prints `Hello`.

Some demonstrations need extra privileges: setting supplementary groups,
switching user IDs back and forth, and `chroot` need a privileged or
set-user-ID process. Without them the call fails, and the command reports
the system error on standard error and exits with status 1.

## Using it from Python

```python
from unixdemo.errors import error_messages
from unixdemo.identity import current_user_ids, current_process_ids, supplementary_groups
from unixdemo.resources import get_priority, cpu_limit, format_limit
from unixdemo.processes import WaitMethod, spawn_child, wait_for, format_exit

print(current_user_ids())
print(current_process_ids())
print(supplementary_groups())

print(get_priority())
print(format_limit(cpu_limit()))

pid = spawn_child("child process\n", 12)
result = wait_for(pid, WaitMethod.WAIT4)
print(format_exit(result))   # pid = ... exited with status = 12
```

Failures of the underlying calls are raised as `OSError`, carrying the
error number and message the system reported.

## Modules

- `unixdemo.errors` – `error_messages(start, stop)` yields
  `(number, message)` pairs; `format_error_table` renders them as lines.
- `unixdemo.identity` – `UserIds`, `ProcessIds`, `current_user_ids`,
  `current_process_ids`, `supplementary_groups`, `format_groups`,
  `set_supplementary_groups`, `become_group_leader`, `start_session`, and
  the generators `seteuid_round_trip`, `setreuid_round_trip` and
  `setuid_round_trip`, which yield `(uid, euid)` at each step.
- `unixdemo.resources` – `Limit` (with `None` meaning unlimited),
  `get_priority`, `set_priority`, `cpu_limit`, `set_cpu_limit`,
  `format_limit`, `burn_cpu`, `self_usage`, `format_usage`.
- `unixdemo.directories` – `change_directory`, `change_directory_fd`,
  `enter_chroot`.
- `unixdemo.processes` – `WaitMethod`, `ChildResult`, `spawn_child`,
  `wait_for`, `run_echo`, `format_exit`, `format_times`.
- `unixdemo.fileio` – `copy_file`, `write_at`, `echo_once`, `write_hello`.