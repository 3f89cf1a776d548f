"""Target parsing and local-to-remote path mapping."""

from __future__ import annotations

import os
from typing import Callable

from pydantic import ConfigDict, Field

from ..config.protocol import _BaseModel
from ..output import print_warning
from ..system import current_user_home


class Target(_BaseModel):
    """Login and working directory on the remote machine."""

    model_config = ConfigDict(frozen=True)
    # Passed to ssh(1) verbatim, e.g. user@host or a Host alias
    login: str
    path: str = Field(..., min_length=1)


def parse_target(
    remote: str,
    getcwd: Callable[[], str] = os.getcwd,
) -> Target:
    """Split ``[<user>@]<host>[:<path>]`` into login and path.

    Only the first ``:`` separates the two, so the path may itself
    contain colons. Without a path, the local working directory is
    used.
    """
    login, _, path = remote.partition(":")
    return Target(login=login, path=path or getcwd())


def relativize_home_dir(
    path: str,
    home_dir: Callable[[], str] = current_user_home,
) -> str:
    """Replace a leading home directory in *path* with ``~``.

    The remote shell expands ``~`` against the remote account, so the
    same path works when home directories differ between machines.
    The match is a plain string prefix; symlinks are not resolved.
    """
    try:
        home = home_dir()
    except (KeyError, OSError) as e:
        print_warning(f"cannot determine home directory: {e}")
        return path
    if not home:
        print_warning("cannot determine home directory: empty")
        return path
    if path.startswith(home):
        return "~" + path[len(home) :]
    else:
        return path
