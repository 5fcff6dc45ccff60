"""Shared fixtures for laraboot tests."""

import subprocess
from pathlib import Path
from typing import Dict, List

import pytest
from click.testing import CliRunner

ENV_EXAMPLE = "APP_NAME=Laravel\nAPP_ENV=local\nAPP_INSTALLED=false\n"
ENV = "APP_NAME=Laravel\nAPP_ENV=local\nAPP_INSTALLED=true\nDB_HOST=127.0.0.1\n"

OVERRIDE_VARS = (
    "LARABOOT_MARKER_FILE",
    "LARABOOT_ENV_FILE",
    "LARABOOT_ENV_EXAMPLE",
    "LARABOOT_INSTALLED_KEY",
    "LARABOOT_LOG_LEVEL",
)


class CommandRecorder:
    """Stand-in for subprocess.run that records shell commands."""

    def __init__(self):
        self.commands: List[str] = []
        self.returncodes: Dict[str, int] = {}

    def __call__(self, command, shell=False, cwd=None, check=False, **kwargs):
        self.commands.append(command)
        return subprocess.CompletedProcess(command, self.returncodes.get(command, 0))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's LARABOOT_* variables out of the tests."""
    for var in OVERRIDE_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def project(tmp_path: Path, monkeypatch) -> Path:
    """A minimal Laravel checkout, used as the working directory."""
    (tmp_path / "composer.json").write_text("{}\n")
    (tmp_path / ".env.example").write_text(ENV_EXAMPLE)
    (tmp_path / ".env").write_text(ENV)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def recorder(monkeypatch) -> CommandRecorder:
    """Capture every command instead of running it."""
    rec = CommandRecorder()
    monkeypatch.setattr("laraboot.installer.bootstrap.subprocess.run", rec)
    return rec


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create CLI runner for testing Click commands."""
    return CliRunner()
