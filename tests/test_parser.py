"""Tests for description-driven argument parsing."""

import pytest

from ngcli.exceptions import ArgumentError
from ngcli.models.interface import CommandDescription, Option, OptionType
from ngcli.parser import build_parser, parse_arguments

DESCRIPTION = CommandDescription(
    name="generate",
    description="Generates files.",
    options=(
        Option("schematic", "What to generate.", positional=0),
        Option("name", "Name of the file.", positional=1),
        Option("dryRun", aliases=("d",), type=OptionType.BOOLEAN),
        Option("port", type=OptionType.NUMBER, default=4200),
        Option("include", type=OptionType.ARRAY),
        Option("lintFix", type=OptionType.BOOLEAN, default=True),
        Option("style", default="css"),
        Option("secret", hidden=True),
    ),
)


class TestParseArguments:
    """Tests for parse_arguments."""

    def test_reserved_keys_always_present(self):
        """help and help_json are always in the result."""
        result = parse_arguments(DESCRIPTION, [])
        assert result["help"] is False
        assert result["help_json"] is False

    def test_defaults(self):
        """Unspecified options take their defaults."""
        result = parse_arguments(DESCRIPTION, [])
        assert result["schematic"] is None
        assert result["dryRun"] is False
        assert result["port"] == 4200
        assert result["include"] == []
        assert result["lintFix"] is True
        assert result["style"] == "css"

    def test_positionals_and_flags(self):
        """Positionals fill in order; flags use dasherized names and aliases."""
        result = parse_arguments(
            DESCRIPTION,
            ["component", "header", "-d", "--port", "8080", "--include", "a", "--include", "b"],
        )
        assert result["schematic"] == "component"
        assert result["name"] == "header"
        assert result["dryRun"] is True
        assert result["port"] == 8080
        assert result["include"] == ["a", "b"]

    def test_negated_boolean(self):
        """Booleans defaulting to True accept --no-<name>."""
        result = parse_arguments(DESCRIPTION, ["--no-lint-fix"])
        assert result["lintFix"] is False

    def test_float_number(self):
        """Non-integer numbers are parsed as floats."""
        assert parse_arguments(DESCRIPTION, ["--port", "1.5"])["port"] == 1.5

    @pytest.mark.parametrize(
        "argv,key",
        [(["--help"], "help"), (["-h"], "help"), (["--help-json"], "help_json")],
    )
    def test_help_flags(self, argv, key):
        """Reserved help flags are parsed as booleans."""
        assert parse_arguments(DESCRIPTION, argv)[key] is True

    def test_hidden_option_still_accepted(self):
        """Hidden options are parsed even though help does not list them."""
        assert parse_arguments(DESCRIPTION, ["--secret", "x"])["secret"] == "x"

    def test_unknown_flag(self):
        """Unknown flags raise ArgumentError instead of exiting."""
        with pytest.raises(ArgumentError, match="unrecognized arguments"):
            parse_arguments(DESCRIPTION, ["--bogus"])

    def test_bad_number(self):
        """Invalid numbers raise ArgumentError."""
        with pytest.raises(ArgumentError):
            parse_arguments(DESCRIPTION, ["--port", "eighty"])

    def test_error_suggests_help(self):
        """Argument errors point at --help."""
        with pytest.raises(ArgumentError) as exc_info:
            parse_arguments(DESCRIPTION, ["--bogus"], tool_name="mytool")
        assert "mytool generate --help" in str(exc_info.value)


class TestBuildParser:
    """Tests for build_parser."""

    def test_prog_name(self):
        """The parser is named after the tool and command."""
        assert build_parser(DESCRIPTION).prog == "ng generate"

    def test_reserved_names_skipped(self):
        """Options named like reserved flags do not conflict."""
        description = CommandDescription("x", options=(Option("help", type=OptionType.BOOLEAN),))
        parser = build_parser(description)
        assert parser.parse_args(["--help"]).help is True
