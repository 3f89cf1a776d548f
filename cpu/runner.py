"""Remote invocation: target -> remote command -> ssh(1) -> exit code."""

from __future__ import annotations

import os
import shlex
import signal
import subprocess
from typing import Callable

import typer

from .config import Invocation, Settings
from .errors import LocalFatalError, SpawnError
from .output import print_invocation
from .remote import (
    build_remote_command,
    build_ssh_args,
    parse_target,
    relativize_home_dir,
    tty_policy,
)
from .system import current_user_home, is_interactive

Spawn = Callable[[list[str]], int]


def spawn(args: list[str]) -> int:
    """Run *args* attached to this process's stdin, stdout and stderr.

    Returns the raw ``Popen`` return code, negative when the child was
    killed by a signal.
    """
    try:
        proc = subprocess.Popen(args)
    except OSError as e:
        raise SpawnError(str(e)) from e

    # An interrupt from the terminal reaches the child as well;
    # its exit status decides ours.
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            continue


def exit_code_for(returncode: int, program: str = "ssh") -> int:
    """Map a child return code to this process's exit code."""
    if returncode >= 0:
        return returncode
    try:
        name = signal.Signals(-returncode).name
    except ValueError:
        name = f"signal {-returncode}"
    raise LocalFatalError(f"{program} terminated by {name}")


def build_invocation_args(
    settings: Settings,
    invocation: Invocation,
    isatty: Callable[[int], bool] = is_interactive,
    home_dir: Callable[[], str] = current_user_home,
    getcwd: Callable[[], str] = os.getcwd,
) -> list[str]:
    """Build the ssh(1) argument vector for one invocation."""
    target = parse_target(settings.remote, getcwd=getcwd)
    path = relativize_home_dir(target.path, home_dir=home_dir)
    remote_command = build_remote_command(
        path,
        invocation.command,
        settings.shell,
        invocation.environ,
        verbose=settings.verbose,
    )
    return build_ssh_args(
        target.login,
        remote_command,
        tty_policy(isatty),
        ssh_args=settings.ssh_args,
        ssh_program=settings.ssh_program,
    )


def run_remote(
    settings: Settings,
    invocation: Invocation,
    isatty: Callable[[int], bool] = is_interactive,
    home_dir: Callable[[], str] = current_user_home,
    spawn: Spawn = spawn,
    getcwd: Callable[[], str] = os.getcwd,
) -> int:
    """Run the user's command remotely and return the exit code to use.

    Exactly one child is spawned, unless *settings* asks for a dry
    run, in which case the command line is printed instead.
    """
    args = build_invocation_args(
        settings,
        invocation,
        isatty=isatty,
        home_dir=home_dir,
        getcwd=getcwd,
    )

    if settings.verbose:
        print_invocation(args)

    if settings.dry_run:
        typer.echo(shlex.join(args))
        return 0
    else:
        return exit_code_for(spawn(args), program=settings.ssh_program)
