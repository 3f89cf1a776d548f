"""Errors surfaced at the CLI boundary, each with its own exit code."""

from __future__ import annotations

# sysexits(3)
EX_USAGE = 64
EX_SOFTWARE = 70
EX_CONFIG = 78
EX_CMDNFOUND = 127


class CpuError(Exception):
    """Base class for errors that terminate the invocation."""

    exit_code: int = 1


class UsageError(CpuError):
    """Raised when the target or the command is missing."""

    exit_code = EX_USAGE


class SpawnError(CpuError):
    """Raised when the transport binary cannot be started."""

    exit_code = EX_CMDNFOUND


class LocalFatalError(CpuError):
    """Raised when the transport's exit status cannot be recovered."""

    exit_code = EX_SOFTWARE
