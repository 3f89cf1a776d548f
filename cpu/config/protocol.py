from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _to_kebab(name: str) -> str:
    return name.replace("_", "-")


class _BaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_kebab,
        populate_by_name=True,
    )


def _split_ssh_args(v: Any) -> Any:
    match v:
        case str():
            return v.split() or None
        case _:
            return v


class FileConfig(_BaseModel):
    """Defaults read from the optional YAML config file.

    Flags and environment variables take precedence, so ``shell``
    only applies when neither ``-s`` nor ``$SHELL`` is given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
    remote: Optional[str] = None
    shell: Optional[str] = None
    ssh_args: Optional[List[str]] = None
    ssh_program: str = Field(default="ssh", min_length=1)

    @field_validator("ssh_args", mode="before")
    @classmethod
    def normalize_ssh_args(cls, v: Any) -> Any:
        return _split_ssh_args(v)


class Settings(_BaseModel):
    """Process-wide configuration, resolved once at startup."""

    model_config = ConfigDict(frozen=True)
    remote: str = Field(..., min_length=1)
    shell: str = ""
    verbose: bool = False
    dry_run: bool = False
    # Replaces the default ssh(1) options when set
    ssh_args: Optional[List[str]] = None
    ssh_program: str = Field(default="ssh", min_length=1)

    @field_validator("ssh_args", mode="before")
    @classmethod
    def normalize_ssh_args(cls, v: Any) -> Any:
        return _split_ssh_args(v)


class Invocation(_BaseModel):
    """The user's command and the environment it was launched from."""

    model_config = ConfigDict(frozen=True)
    command: List[str] = Field(..., min_length=1)
    environ: Dict[str, str] = Field(default_factory=dict)
