"""Diagnostics written to stderr."""

from __future__ import annotations

import shlex

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .config import ConfigError

PROG = "cpu"


def _print_line(text: Text, console: Console | None) -> None:
    if console is None:
        console = Console(stderr=True)
    console.print(text, soft_wrap=True)


def print_error(message: str, *, console: Console | None = None) -> None:
    """Print a fatal error message."""
    _print_line(Text(f"{PROG}: {message}", style="red"), console)


def print_warning(message: str, *, console: Console | None = None) -> None:
    """Print a non-fatal note."""
    _print_line(Text(f"{PROG}: {message}", style="yellow"), console)


def print_verbose(message: str, *, console: Console | None = None) -> None:
    """Print a diagnostic shown only with --verbose."""
    _print_line(Text(f"{PROG}: {message}", style="dim"), console)


def print_invocation(
    args: list[str], *, console: Console | None = None
) -> None:
    """Print the ssh(1) command line about to be executed."""
    _print_line(Text(shlex.join(args), style="dim"), console)


def print_config_error(
    e: ConfigError,
    *,
    console: Console | None = None,
) -> None:
    """Print a ConfigError as a Rich panel to stderr."""
    if console is None:
        console = Console(stderr=True)
    cause = e.__cause__
    match cause:
        case ValidationError():
            lines: list[str] = []
            for err in cause.errors():
                loc = " → ".join(str(p) for p in err["loc"])
                msg = err["msg"]
                if loc:
                    lines.append(f"{loc}: {msg}")
                else:
                    lines.append(msg)
            body = "\n".join(lines)
        case _:
            body = str(e)
    console.print(Panel(Text(body), title="Config error", style="red"))
