"""Pytest fixtures for ngcli tests."""

import json
import logging
from pathlib import Path

import pytest

from ngcli import terminal
from ngcli.logger import ROOT_LOGGER_NAME, CliHandler

MINIMAL_WORKSPACE = {
    "version": 1,
    "newProjectRoot": "projects",
    "projects": {
        "app": {
            "root": "",
            "sourceRoot": "src",
            "projectType": "application",
            "architect": {"build": {"options": {"outputPath": "dist/app"}}},
        },
    },
    "defaultProject": "app",
}


@pytest.fixture(autouse=True)
def plain_output():
    """Disable colors and undo any logging setup done by the CLI."""
    terminal.set_colors_enabled(False)
    yield
    terminal.set_colors_enabled(None)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if isinstance(handler, CliHandler):
            root.removeHandler(handler)
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch) -> Path:
    """A working directory that stops workspace and settings lookups at itself."""
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("ngcli.config.USER_CONFIG_PATH", tmp_path / "no-user-config.toml")
    monkeypatch.setattr(
        "ngcli.cli.commands.settings.USER_CONFIG_PATH", tmp_path / "no-user-config.toml"
    )
    return tmp_path


@pytest.fixture
def project_dir(isolated_dir: Path) -> Path:
    """An isolated directory containing a valid angular.json."""
    (isolated_dir / "angular.json").write_text(json.dumps(MINIMAL_WORKSPACE, indent=2))
    return isolated_dir
