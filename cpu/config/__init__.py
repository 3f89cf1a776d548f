"""Configuration types and loading."""

from .loader import (
    ConfigError,
    build_settings,
    find_config_file,
    load_file_config,
    ssh_args_from_env,
)
from .protocol import FileConfig, Invocation, Settings

__all__ = [
    "ConfigError",
    "FileConfig",
    "Invocation",
    "Settings",
    "build_settings",
    "find_config_file",
    "load_file_config",
    "ssh_args_from_env",
]
