"""OS queries: terminal detection and home directory lookup."""

from __future__ import annotations

import os
import pwd


def is_interactive(fd: int) -> bool:
    """Return whether *fd* refers to a terminal."""
    return os.isatty(fd)


def current_user_home() -> str:
    """Return the home directory of the current user.

    Looked up in the password database rather than ``$HOME``.
    Raises ``KeyError`` if the user has no entry.
    """
    return pwd.getpwuid(os.getuid()).pw_dir
