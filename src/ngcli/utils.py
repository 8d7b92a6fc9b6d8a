"""
Small filesystem helpers shared by commands.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def ensure_parent_dir(path: Path) -> Path:
    """
    Ensure the parent directory of a path exists.

    Returns:
        The original path, unchanged. This allows chaining like:
            ensure_parent_dir(output_path).write_text(content)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def write_json(path: Path, data: Any) -> Path:
    """Write ``data`` as two-space indented JSON with a trailing newline."""
    ensure_parent_dir(path).write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


__all__ = ["ensure_parent_dir", "write_json"]
