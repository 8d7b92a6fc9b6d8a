"""Terminal color helpers.

Styles are rendered to ANSI escape sequences through Rich so the result is
a plain ``str`` that can travel through ``logging`` unchanged. When colors
are disabled every helper returns its input untouched.

Usage:
    from ngcli import terminal

    logger.info(f"  {terminal.cyan('--dry-run')}")
"""

import os
import sys

_colors_override: bool | None = None
_render_console = None


def set_colors_enabled(enabled: bool | None) -> None:
    """Force colors on or off. ``None`` restores automatic detection."""
    global _colors_override
    _colors_override = enabled


def colors_enabled() -> bool:
    """Check whether styled output should be produced.

    An explicit ``set_colors_enabled()`` wins, then the ``NO_COLOR``
    environment variable, then whether stdout is attached to a terminal.
    """
    if _colors_override is not None:
        return _colors_override
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def style(text: str, style_name: str) -> str:
    """Apply a Rich style (e.g. ``"bold cyan"``) to ``text``."""
    if not colors_enabled():
        return text

    from rich.text import Text

    console = _get_render_console()
    with console.capture() as capture:
        console.print(Text(text, style=style_name), end="")
    return capture.get()


def cyan(text: str) -> str:
    return style(text, "cyan")


def yellow(text: str) -> str:
    return style(text, "yellow")


def _get_render_console():
    """Get a Rich Console that renders ANSI into a capture buffer."""
    global _render_console
    if _render_console is None:
        from rich.console import Console

        _render_console = Console(
            force_terminal=True,
            color_system="standard",
            no_color=False,
            highlight=False,
            soft_wrap=True,
        )
    return _render_console
