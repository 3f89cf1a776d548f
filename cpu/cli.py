"""Typer CLI: run a command on the remote machine."""

from __future__ import annotations

import os
from typing import Annotated, Optional

import typer

from .config import (
    ConfigError,
    Invocation,
    build_settings,
    load_file_config,
)
from .errors import EX_CONFIG, CpuError, UsageError
from .output import print_config_error, print_error
from .runner import run_remote, spawn
from .system import current_user_home, is_interactive

app = typer.Typer(
    name="cpu",
    help="Run shell commands on a remote system preserving the local"
    " environment.",
    add_completion=False,
)


@app.command(
    context_settings={
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    }
)
def run(
    ctx: typer.Context,
    command: Annotated[
        Optional[list[str]],
        typer.Argument(
            help="Command and arguments to run on the remote",
            show_default=False,
        ),
    ] = None,
    remote: Annotated[
        Optional[str],
        typer.Option(
            "--remote",
            "-r",
            envvar="CPU_REMOTE",
            help=(
                "Remote compute machine, [user@]host[:path],"
                " with an optional path overriding the cwd"
            ),
        ),
    ] = None,
    shell: Annotated[
        Optional[str],
        typer.Option(
            "--shell",
            "-s",
            envvar="SHELL",
            help="Override shell to use on remote",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Increase verbosity"),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Print the ssh command instead of running it",
        ),
    ] = False,
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to config file"),
    ] = None,
) -> None:
    """Run COMMAND on the remote machine in the matching directory.

    The local terminal is attached to the remote one when any of
    stdin, stdout or stderr is a terminal. The exit status is the
    remote command's.
    """
    try:
        if not command:
            raise UsageError(
                "missing command" if remote else "missing remote machine"
            )

        try:
            file_config = load_file_config(config)
        except ConfigError as e:
            print_config_error(e)
            raise typer.Exit(EX_CONFIG)
        if not (remote or file_config.remote):
            raise UsageError("missing remote machine")

        environ = dict(os.environ)
        settings = build_settings(
            file_config,
            environ,
            remote=remote,
            shell=shell,
            verbose=verbose,
            dry_run=dry_run,
        )
        code = run_remote(
            settings,
            Invocation(command=command, environ=environ),
            isatty=is_interactive,
            home_dir=current_user_home,
            spawn=spawn,
        )
    except UsageError as e:
        print_error(str(e))
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(e.exit_code)
    except CpuError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code)

    raise typer.Exit(code)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
