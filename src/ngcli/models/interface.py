"""
Static command metadata and invocation context.

A ``CommandDescription`` is everything the CLI knows about a command
before running it: its name, prose, where it may run (``CommandScope``)
and the options it accepts. Descriptions are immutable and serialize to
plain dicts for ``--help-json``.

Example::

    from ngcli.models.interface import (
        CommandDescription,
        CommandScope,
        Option,
        OptionType,
    )

    description = CommandDescription(
        name="new",
        description="Creates a new workspace.",
        scope=CommandScope.OUT_PROJECT,
        options=[
            Option("name", "The name of the workspace.", positional=0),
            Option("dryRun", "Run without writing files.", aliases=["d"], type=OptionType.BOOLEAN),
        ],
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

if TYPE_CHECKING:
    from ngcli.config import Config
    from ngcli.registry import CommandRegistry

# Parsed command-line values keyed by option name. Always carries the
# reserved boolean keys "help" and "help_json".
Arguments = Dict[str, Any]


class CommandScope(Enum):
    """Where a command is allowed to run relative to a project workspace."""

    OUT_PROJECT = "out"
    IN_PROJECT = "in"
    EVERYWHERE = "all"


class OptionType(Enum):
    """Value type of an option, used when building the argument parser."""

    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ARRAY = "array"


@dataclass(frozen=True)
class Option:
    """A single argument accepted by a command.

    Attributes:
        name: camelCase option name; shown dasherized as ``--my-option``
        description: One-line help text
        positional: Index of the positional slot, None for flags
        aliases: Short flags, without the leading dash
        hidden: Left out of the help listing
        type: Value type for parsing
        default: Value used when the option is not given
    """

    name: str
    description: Optional[str] = None
    positional: Optional[int] = None
    aliases: Tuple[str, ...] = ()
    hidden: bool = False
    type: OptionType = OptionType.STRING
    default: Any = None

    def __post_init__(self):
        object.__setattr__(self, "aliases", tuple(self.aliases))
        if not isinstance(self.type, OptionType):
            object.__setattr__(self, "type", OptionType(self.type))

    @property
    def is_positional(self) -> bool:
        return self.positional is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting unset fields."""
        data: Dict[str, Any] = {"name": self.name}
        if self.description is not None:
            data["description"] = self.description
        if self.positional is not None:
            data["positional"] = self.positional
        data["aliases"] = list(self.aliases)
        data["hidden"] = self.hidden
        data["type"] = self.type.value
        if self.default is not None:
            data["default"] = self.default
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Option":
        return cls(
            name=data["name"],
            description=data.get("description"),
            positional=data.get("positional"),
            aliases=tuple(data.get("aliases", ())),
            hidden=data.get("hidden", False),
            type=OptionType(data.get("type", OptionType.STRING.value)),
            default=data.get("default"),
        )


@dataclass(frozen=True)
class CommandDescription:
    """Immutable metadata for one command."""

    name: str
    description: str = ""
    scope: CommandScope = CommandScope.EVERYWHERE
    options: Tuple[Option, ...] = ()
    aliases: Tuple[str, ...] = ()
    hidden: bool = False

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "aliases", tuple(self.aliases))
        if not isinstance(self.scope, CommandScope):
            object.__setattr__(self, "scope", CommandScope(self.scope))

        # Usage text lists positionals as declared; parsing binds them by index
        indexes = [o.positional for o in self.options if o.is_positional]
        if indexes != sorted(set(indexes)):
            raise ValueError(
                f"Positional options of '{self.name}' must be declared in index order, "
                f"got {indexes}"
            )

    @property
    def positional_options(self) -> Tuple[Option, ...]:
        """Positional options ordered by their slot index."""
        return tuple(
            sorted((o for o in self.options if o.is_positional), key=lambda o: o.positional)
        )

    @property
    def named_options(self) -> Tuple[Option, ...]:
        """Flag options in declared order."""
        return tuple(o for o in self.options if not o.is_positional)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "name": self.name,
            "description": self.description,
            "scope": self.scope.value,
            "options": [o.to_dict() for o in self.options],
            "aliases": list(self.aliases),
            "hidden": self.hidden,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CommandDescription":
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            scope=CommandScope(data.get("scope", CommandScope.EVERYWHERE.value)),
            options=tuple(Option.from_dict(o) for o in data.get("options", ())),
            aliases=tuple(data.get("aliases", ())),
            hidden=data.get("hidden", False),
        )


@dataclass(frozen=True)
class CommandWorkspace:
    """Result of project detection for the current directory.

    Attributes:
        config_file: Workspace file found above the start directory, if any
        root: Directory the search started from
    """

    config_file: Optional[Path] = None
    root: Optional[Path] = None


@dataclass
class CommandContext:
    """Everything a command receives from the harness besides its arguments."""

    workspace: CommandWorkspace = field(default_factory=CommandWorkspace)
    registry: Optional["CommandRegistry"] = None
    settings: Optional["Config"] = None
