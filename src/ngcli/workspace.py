"""
Project workspace detection.

A directory is inside a project when a workspace file (``angular.json``
or ``.angular.json``) exists in it or in one of its parents. The search
stops at a ``.git`` directory or the filesystem root.

Usage:
    from ngcli.workspace import get_workspace, resolve_workspace

    workspace = resolve_workspace()        # CommandWorkspace
    if workspace.config_file:
        local = get_workspace("local")     # Workspace or None
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ngcli.exceptions import WorkspaceError
from ngcli.models.interface import CommandWorkspace

logger = logging.getLogger(__name__)

# Workspace file names, in order of preference
CONFIG_NAMES = ("angular.json", ".angular.json")

# User-wide workspace settings
GLOBAL_CONFIG_PATH = Path.home() / ".angular-config.json"

WORKSPACE_LEVELS = ("local", "global")


@dataclass
class Workspace:
    """A parsed workspace file."""

    path: Path
    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str) -> Any:
        """
        Look up a value by dotted path, e.g. ``projects.app.root``.

        Raises:
            WorkspaceError: If any segment of the path does not exist
        """
        value: Any = self.data
        for segment in key.split("."):
            if isinstance(value, dict) and segment in value:
                value = value[segment]
            elif isinstance(value, list) and segment.isdigit() and int(segment) < len(value):
                value = value[int(segment)]
            else:
                raise WorkspaceError(
                    f"Key '{key}' not found in workspace",
                    context={"file": str(self.path), "missing": segment},
                )
        return value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """
    Find the workspace file by walking up the directory tree.

    Stops at a .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from (default: current directory)

    Returns:
        Path to the workspace file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_NAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def resolve_workspace(start_dir: Path | None = None) -> CommandWorkspace:
    """Detect the project workspace for ``start_dir``."""
    if start_dir is None:
        start_dir = Path.cwd()
    config_file = find_config_file(start_dir)
    if config_file:
        logger.debug("Found workspace file %s", config_file)
    return CommandWorkspace(config_file=config_file, root=start_dir)


def load_workspace(path: Path) -> Workspace:
    """
    Read and parse a workspace file.

    Raises:
        WorkspaceError: If the file cannot be read or is not a JSON object
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise WorkspaceError(
            f"Invalid JSON in {path}: {e.msg}",
            context={"file": str(path), "line": e.lineno, "column": e.colno},
        ) from e
    except UnicodeDecodeError as e:
        raise WorkspaceError(
            f"Workspace file {path} is not valid UTF-8",
            context={"file": str(path), "position": e.start},
        ) from e
    except OSError as e:
        raise WorkspaceError(f"Cannot read workspace file {path}: {e}") from e

    if not isinstance(data, dict):
        raise WorkspaceError(
            f"Workspace file {path} must contain a JSON object",
            context={"file": str(path), "got": type(data).__name__},
        )
    return Workspace(path=path, data=data)


class WorkspaceResolver:
    """Load and cache the local and global workspaces."""

    def __init__(self, start_dir: Path | None = None, global_path: Path | None = None):
        self.start_dir = start_dir
        self.global_path = global_path or GLOBAL_CONFIG_PATH
        self._cache: dict[str, Workspace | None] = {}

    def get_workspace(self, level: str = "local") -> Workspace | None:
        """
        Return the workspace for ``level`` ("local" or "global").

        Returns None when no file exists or when it cannot be parsed; the
        parse failure is logged as a warning.
        """
        if level not in WORKSPACE_LEVELS:
            raise ValueError(f"Unknown workspace level: {level!r}")

        if level in self._cache:
            return self._cache[level]

        if level == "local":
            path = find_config_file(self.start_dir)
        else:
            path = self.global_path if self.global_path.is_file() else None

        workspace = None
        if path is not None:
            try:
                workspace = load_workspace(path)
            except WorkspaceError as e:
                logger.warning(e.message)

        self._cache[level] = workspace
        return workspace

    def clear_cache(self) -> None:
        self._cache.clear()


def get_workspace(level: str = "local") -> Workspace | None:
    """Resolve ``level`` from the current directory without caching."""
    return WorkspaceResolver().get_workspace(level)
