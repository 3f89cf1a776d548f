"""Remote shell command building."""

from __future__ import annotations

import posixpath
import re
from collections.abc import Mapping

from ..output import print_verbose

FORWARDED_ENV = ("TERM", "PAGER")

_find_unsafe = re.compile(r"[^\w@%+=:,./-]", re.ASCII).search
_find_escaped = re.compile(r'([\\"$`])')


def make_environment(environ: Mapping[str, str]) -> str:
    """Build ``KEY=VALUE`` assignments for the forwarded variables.

    Only ``TERM`` and ``PAGER`` cross over; entries keep the order
    they have in *environ*.
    """
    return " ".join(
        f"{key}={value}"
        for key, value in environ.items()
        if key in FORWARDED_ENV
    )


def quote_command(cmd: str) -> str:
    """Quote *cmd* as a single double-quoted shell word.

    Words made only of safe characters are returned as is.
    """
    if cmd and _find_unsafe(cmd) is None:
        return cmd
    return '"' + _find_escaped.sub(r"\\\1", cmd) + '"'


def make_shell_wrapper(shell: str, cmd: str, verbose: bool = False) -> str:
    """Re-invoke the local shell on the remote, if it is known.

    Running bash interactively sources its startup files, so
    aliases and functions behave as they do locally.
    """
    match posixpath.basename(shell.rstrip("/")):
        case "bash":
            return f"bash -ci {quote_command(cmd)}"
        case _:
            if verbose:
                print_verbose(f"unknown shell: {shell}")
            return quote_command(cmd)


def build_remote_command(
    path: str,
    command: list[str],
    shell: str,
    environ: Mapping[str, str],
    verbose: bool = False,
) -> str:
    """Craft the full command line executed by the remote shell.

    Arguments are joined without quoting so the remote shell expands
    globs and variables. The group aborts if ``cd`` fails.
    """
    cmd = " ".join(command)
    env = make_environment(environ)
    wrapper = make_shell_wrapper(shell, cmd, verbose=verbose)
    body = f"{env} {wrapper}" if env else wrapper
    return f"{{ cd {path} && {body}; }}"
