"""SSH argument building and terminal allocation policy."""

from __future__ import annotations

import enum
from typing import Callable

from ..system import is_interactive

STANDARD_FDS = (0, 1, 2)

_DEFAULT_SSH_OPTIONS: list[str] = ["-o", "LogLevel=QUIET"]


class TtyPolicy(str, enum.Enum):
    """Whether ssh(1) should allocate a pseudo-terminal."""

    FORCE_TTY = "force-tty"
    NO_TTY = "no-tty"


def tty_policy(isatty: Callable[[int], bool] = is_interactive) -> TtyPolicy:
    """Force a pseudo-terminal if any standard stream is a terminal."""
    if any(isatty(fd) for fd in STANDARD_FDS):
        return TtyPolicy.FORCE_TTY
    else:
        return TtyPolicy.NO_TTY


def tty_flags(policy: TtyPolicy) -> list[str]:
    """Translate a policy into ssh(1) flags.

    Without a terminal, the escape character is disabled as well so
    binary data on stdin passes through untouched.
    """
    match policy:
        case TtyPolicy.FORCE_TTY:
            return ["-tt"]
        case TtyPolicy.NO_TTY:
            return ["-e", "none", "-T"]


def build_ssh_args(
    login: str,
    remote_command: str,
    policy: TtyPolicy,
    ssh_args: list[str] | None = None,
    ssh_program: str = "ssh",
) -> list[str]:
    """Build the full ssh(1) argument vector.

    Returns args like:
        ssh -o LogLevel=QUIET -tt host '{ cd ~/src && make; }'

    *ssh_args*, when given, replaces the default options entirely.
    """
    args = [ssh_program]
    if ssh_args is not None:
        args.extend(ssh_args)
    else:
        args.extend(_DEFAULT_SSH_OPTIONS)
    args.extend(tty_flags(policy))
    args.append(login)
    args.append(remote_command)
    return args
