"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from cpu.config import Invocation, Settings

HOME = "/home/alice"

SAMPLE_YAML = """\
remote: box:/srv/build
shell: /bin/bash
ssh-args: -p 2222 -A
"""


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment and config file out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in ("CPU_REMOTE", "CPU_SSH_ARGS", "SHELL", "TERM", "PAGER"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def home_dir() -> Callable[[], str]:
    return lambda: HOME


@pytest.fixture()
def no_tty() -> Callable[[int], bool]:
    return lambda fd: False


@pytest.fixture()
def settings() -> Settings:
    return Settings(remote="box:/home/alice/proj", shell="/bin/zsh")


@pytest.fixture()
def invocation() -> Invocation:
    return Invocation(command=["make"], environ={"TERM": "xterm"})


@pytest.fixture()
def sample_config_file(tmp_path: Path) -> Path:
    """Write sample YAML config to a temp file."""
    p = tmp_path / "config.yaml"
    p.write_text(SAMPLE_YAML)
    return p
