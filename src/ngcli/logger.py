"""Logging setup for the ng command line.

Commands never write to stdout/stderr themselves. They log, and the
``CliHandler`` installed by ``setup_logging()`` turns records into terminal
output:

- DEBUG and INFO go to stdout as bare lines (help text, command output).
- WARNING goes to stderr with a ``WARNING:`` prefix.
- ERROR and CRITICAL go to stderr in red.

ANSI sequences already present in a message (see ``ngcli.terminal``) are
parsed by Rich, so they are kept on a terminal and dropped when the stream
is redirected.
"""

from __future__ import annotations

import logging

from ngcli import terminal

ROOT_LOGGER_NAME = "ngcli"


class CliHandler(logging.Handler):
    """Route log records to stdout/stderr Rich consoles by severity."""

    def __init__(self, level: int = logging.NOTSET):
        super().__init__(level)
        self._stdout = None
        self._stderr = None

    def emit(self, record: logging.LogRecord) -> None:
        try:
            from rich.text import Text

            message = self.format(record)
            if logging.WARNING <= record.levelno < logging.ERROR:
                message = terminal.yellow("WARNING: ") + message
            text = Text.from_ansi(message)

            if record.levelno >= logging.ERROR:
                text.stylize("red")

            console = self._get_console(stderr=record.levelno >= logging.WARNING)
            console.print(text, soft_wrap=True, highlight=False)
        except Exception:
            self.handleError(record)

    def _get_console(self, stderr: bool):
        from rich.console import Console

        if stderr:
            if self._stderr is None:
                self._stderr = Console(stderr=True, force_terminal=None)
            return self._stderr
        if self._stdout is None:
            self._stdout = Console(force_terminal=None)
        return self._stdout


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the ``ngcli`` logger for CLI use.

    Calling this more than once replaces the previously installed handler
    instead of stacking a second one.

    Args:
        verbose: Emit DEBUG records
        quiet: Only emit WARNING and above (ignored when ``verbose`` is set)

    Returns:
        The configured ``ngcli`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        if isinstance(handler, CliHandler):
            logger.removeHandler(handler)

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = CliHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
