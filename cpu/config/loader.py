"""YAML config file loading and settings resolution."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from .protocol import FileConfig, Settings

SSH_ARGS_ENVVAR = "CPU_SSH_ARGS"


class ConfigError(Exception):
    """Raised when configuration is invalid."""


def find_config_file(config_path: str | None = None) -> Path | None:
    """Find the configuration file using search order.

    Order: explicit path > XDG_CONFIG_HOME > /etc/cpu/

    An explicit path must exist. Without one, ``None`` is returned
    when neither default location holds a file.
    """
    if config_path is not None:
        p = Path(config_path)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        else:
            return p
    else:
        xdg = os.environ.get(
            "XDG_CONFIG_HOME",
            os.path.expanduser("~/.config"),
        )
        xdg_path = Path(xdg) / "cpu" / "config.yaml"
        etc_path = Path("/etc/cpu/config.yaml")
        if xdg_path.is_file():
            return xdg_path
        elif etc_path.is_file():
            return etc_path
        else:
            return None


def load_file_config(config_path: str | None = None) -> FileConfig:
    """Load and validate the config file, or return empty defaults."""
    path = find_config_file(config_path)
    if path is None:
        return FileConfig()
    try:
        with open(path, "rb") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return FileConfig()
    elif not isinstance(raw, dict):
        raise ConfigError("Config file must be a YAML mapping")
    else:
        try:
            return FileConfig.model_validate(raw)
        except Exception as e:
            raise ConfigError(str(e)) from e


def ssh_args_from_env(environ: Mapping[str, str]) -> list[str] | None:
    """Split ``CPU_SSH_ARGS`` on whitespace; ``None`` if unset or blank."""
    return environ.get(SSH_ARGS_ENVVAR, "").split() or None


def build_settings(
    file_config: FileConfig,
    environ: Mapping[str, str],
    *,
    remote: str | None = None,
    shell: str | None = None,
    verbose: bool = False,
    dry_run: bool = False,
) -> Settings:
    """Merge flags, environment and config file into one ``Settings``.

    *remote* and *shell* already carry the flag-or-environment value
    (``CPU_REMOTE``, ``SHELL``); the config file only fills the gaps.
    Raises ``pydantic.ValidationError`` when no remote is known.
    """
    ssh_args = ssh_args_from_env(environ)
    return Settings(
        remote=remote or file_config.remote or "",
        shell=shell or file_config.shell or "",
        verbose=verbose,
        dry_run=dry_run,
        ssh_args=ssh_args if ssh_args is not None else file_config.ssh_args,
        ssh_program=file_config.ssh_program,
    )
