"""Command model: metadata types and the abstract command lifecycle."""

from .command import Command
from .interface import (
    Arguments,
    CommandContext,
    CommandDescription,
    CommandScope,
    CommandWorkspace,
    Option,
    OptionType,
)

__all__ = [
    "Arguments",
    "Command",
    "CommandContext",
    "CommandDescription",
    "CommandScope",
    "CommandWorkspace",
    "Option",
    "OptionType",
]
