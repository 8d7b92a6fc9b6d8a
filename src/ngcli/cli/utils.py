"""Shared utilities for the CLI harness."""

from __future__ import annotations

import sys
import traceback
from typing import TYPE_CHECKING

from ngcli.exceptions import NgCliError

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["format_error", "print_error", "get_error_console"]

# Module-level console for error output, created lazily
_error_console: Console | None = None


def get_error_console() -> Console:
    """Get or create the Rich console for error output."""
    global _error_console
    if _error_console is None:
        from rich.console import Console

        _error_console = Console(stderr=True, force_terminal=None)
    return _error_console


def print_error(e: Exception, verbose: bool = False) -> None:
    """
    Print an exception to stderr, in red when stderr is a terminal.

    Args:
        e: The exception to print
        verbose: Also print the active traceback
    """
    console = get_error_console()
    if console.is_terminal:
        console.print(format_error(e), style="red", markup=False, highlight=False)
    else:
        print(format_error(e), file=sys.stderr)

    if verbose:
        print(traceback.format_exc(), file=sys.stderr, end="")


def format_error(e: Exception) -> str:
    """Format an exception for display as ``Error: <message>``."""
    if isinstance(e, NgCliError):
        return f"Error: {e}"

    return f"Error: {type(e).__name__}: {e}"
