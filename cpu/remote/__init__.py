"""Remote target resolution and SSH command building."""

from .command import (
    build_remote_command,
    make_environment,
    make_shell_wrapper,
    quote_command,
)
from .ssh import TtyPolicy, build_ssh_args, tty_flags, tty_policy
from .target import Target, parse_target, relativize_home_dir

__all__ = [
    "Target",
    "TtyPolicy",
    "build_remote_command",
    "build_ssh_args",
    "make_environment",
    "make_shell_wrapper",
    "parse_target",
    "quote_command",
    "relativize_home_dir",
    "tty_flags",
    "tty_policy",
]
