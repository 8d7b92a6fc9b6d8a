"""Argument parsing driven by a CommandDescription.

Each command's options become an argparse parser on the fly, so commands
never declare arguments twice. Help is not handled by argparse: the
reserved ``--help``/``-h`` and ``--help-json`` flags are parsed like any
other boolean and the command renders help itself.

Usage:
    from ngcli.parser import parse_arguments

    options = parse_arguments(description, ["my-app", "--dry-run"])
    # {"help": False, "help_json": False, "name": "my-app", "dryRun": True}
"""

from __future__ import annotations

import argparse
from typing import Any, Sequence

from ngcli.exceptions import ArgumentError
from ngcli.models.interface import Arguments, CommandDescription, Option, OptionType
from ngcli.strings import dasherize

# Option names that every command understands; descriptions cannot redefine them
RESERVED_OPTIONS = {"help", "helpJson"}


class _CommandArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting the interpreter."""

    def error(self, message: str):  # type: ignore[override]
        raise ArgumentError(
            message,
            context={"command": self.prog},
            suggestions=[f"Run '{self.prog} --help' for available options"],
        )


def _number(value: str) -> int | float:
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None


def _add_positional(parser: argparse.ArgumentParser, option: Option) -> None:
    kwargs: dict[str, Any] = {
        "metavar": option.name,
        "help": argparse.SUPPRESS if option.hidden else option.description,
    }
    if option.type == OptionType.ARRAY:
        kwargs["nargs"] = "*"
        kwargs["default"] = list(option.default or [])
    else:
        kwargs["nargs"] = "?"
        kwargs["default"] = option.default
        if option.type == OptionType.NUMBER:
            kwargs["type"] = _number
    parser.add_argument(option.name, **kwargs)


def _add_flag(parser: argparse.ArgumentParser, option: Option) -> None:
    flags = [f"--{dasherize(option.name)}"]
    flags.extend(f"-{alias}" for alias in option.aliases)

    kwargs: dict[str, Any] = {
        "dest": option.name,
        "help": argparse.SUPPRESS if option.hidden else option.description,
    }
    if option.type == OptionType.BOOLEAN:
        if option.default:
            kwargs["action"] = argparse.BooleanOptionalAction
            kwargs["default"] = True
        else:
            kwargs["action"] = "store_true"
            kwargs["default"] = False
    elif option.type == OptionType.ARRAY:
        kwargs["action"] = "append"
        kwargs["default"] = None
    else:
        kwargs["default"] = option.default
        if option.type == OptionType.NUMBER:
            kwargs["type"] = _number
    parser.add_argument(*flags, **kwargs)


def build_parser(description: CommandDescription, tool_name: str = "ng") -> argparse.ArgumentParser:
    """Create a parser for ``description``'s options.

    Args:
        description: Command metadata
        tool_name: Executable name used in error messages

    Returns:
        Parser whose namespace uses option names as attribute names
    """
    parser = _CommandArgumentParser(
        prog=f"{tool_name} {description.name}",
        description=description.description,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", dest="help", action="store_true", default=False)
    parser.add_argument("--help-json", dest="help_json", action="store_true", default=False)

    for option in description.positional_options:
        if option.name not in RESERVED_OPTIONS:
            _add_positional(parser, option)
    for option in description.named_options:
        if option.name not in RESERVED_OPTIONS:
            _add_flag(parser, option)

    return parser


def parse_arguments(
    description: CommandDescription,
    argv: Sequence[str],
    tool_name: str = "ng",
) -> Arguments:
    """Parse ``argv`` into an Arguments dict.

    Raises:
        ArgumentError: For unknown flags, missing values or bad numbers
    """
    parser = build_parser(description, tool_name)
    namespace = parser.parse_args(list(argv))
    arguments: Arguments = vars(namespace)

    for option in description.named_options:
        if option.type == OptionType.ARRAY and arguments.get(option.name) is None:
            arguments[option.name] = list(option.default or [])

    arguments["help"] = bool(arguments.get("help"))
    arguments["help_json"] = bool(arguments.get("help_json"))
    return arguments
