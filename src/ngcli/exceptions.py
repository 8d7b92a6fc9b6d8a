"""
Exception hierarchy for ngcli.

Two families of errors live here:

- ``NgCliError`` and its subclasses carry a message plus optional context
  and suggestions, formatted for display by the CLI harness.
- ``FatalExit`` is a control-flow signal that ends the current invocation
  with a specific process exit code. It deliberately does not derive from
  ``NgCliError`` so that generic error handling never absorbs it.

Example::

    from ngcli.exceptions import WorkspaceError

    raise WorkspaceError(
        "Workspace file is not valid JSON",
        context={"file": "angular.json", "line": 12},
        suggestions=["Check for a trailing comma"],
    )
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class NgCliError(Exception):
    """
    Base exception for all ngcli errors.

    Attributes:
        context: Dictionary of contextual information (file, key, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ConfigError(NgCliError):
    """
    CLI settings could not be read.

    Raised for unreadable or syntactically invalid ``.ngcli.toml`` files.
    """

    pass


class WorkspaceError(NgCliError):
    """
    Project workspace could not be used.

    Example::

        raise WorkspaceError(
            "Key not found in workspace",
            context={"file": "angular.json", "key": "projects.app.root"},
        )
    """

    pass


class RegistryError(NgCliError):
    """
    Command registration or lookup failed.

    Raised for duplicate command names or aliases, and when asked to
    create a command that was never registered.
    """

    pass


class ArgumentError(NgCliError):
    """Command-line arguments did not match the command description."""

    pass


class FatalExit(Exception):
    """
    Terminate the current invocation with a process exit code.

    The harness catches this and returns ``exit_code`` from ``main()``.
    Nothing else is expected to catch it.
    """

    def __init__(self, exit_code: int = 1, message: str = ""):
        self.exit_code = exit_code
        super().__init__(message or f"Fatal exit with code {exit_code}")


class ScopeViolation(FatalExit):
    """A command was invoked from a location its scope does not allow."""

    def __init__(self, command_name: str, scope: Any, message: str = ""):
        self.command_name = command_name
        self.scope = scope
        super().__init__(1, message or f"The {command_name} command cannot run here")


__all__ = [
    "NgCliError",
    "ConfigError",
    "WorkspaceError",
    "RegistryError",
    "ArgumentError",
    "FatalExit",
    "ScopeViolation",
]
