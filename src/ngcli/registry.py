"""Command registry for the ng CLI.

The registry is an ordinary object created once by the harness before any
command is instantiated, then handed to whatever needs lookups (through
``CommandContext.registry``). There is no module-level registry.

Usage:
    from ngcli.registry import CommandRegistry

    registry = CommandRegistry()
    registry.discover()                    # built-ins from ngcli.cli.commands
    registry.register(MyCommand)           # extra commands

    command = registry.create("new", context, logger)
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from typing import TYPE_CHECKING, Iterator

from ngcli.exceptions import RegistryError
from ngcli.models.command import Command
from ngcli.models.interface import CommandContext, CommandDescription

if TYPE_CHECKING:
    from ngcli.workspace import WorkspaceResolver

logger = logging.getLogger(__name__)

BUILTIN_COMMANDS_PACKAGE = "ngcli.cli.commands"


class CommandRegistry:
    """Maps command names and aliases to command classes."""

    def __init__(self) -> None:
        self._commands: dict[str, type[Command]] = {}
        self._aliases: dict[str, str] = {}

    def register(self, command_class: type[Command]) -> type[Command]:
        """
        Add a command class.

        The class must declare a ``description`` attribute. Returns the
        class so this can be used as a decorator.

        Raises:
            RegistryError: If the class has no description, or its name or
                one of its aliases is already taken
        """
        description = getattr(command_class, "description", None)
        if not isinstance(description, CommandDescription):
            raise RegistryError(
                f"{command_class.__name__} has no CommandDescription",
                suggestions=["Declare a class-level 'description = CommandDescription(...)'"],
            )

        for key in (description.name, *description.aliases):
            if key in self._commands or key in self._aliases:
                owner = self._aliases.get(key, key)
                raise RegistryError(
                    f"Command name '{key}' is already registered",
                    context={"command": description.name, "registered_by": owner},
                )

        self._commands[description.name] = command_class
        for alias in description.aliases:
            self._aliases[alias] = description.name

        logger.debug("Registered command %s", description.name)
        return command_class

    def get(self, name: str) -> type[Command] | None:
        """Look up a command class by name or alias."""
        if name in self._commands:
            return self._commands[name]
        canonical = self._aliases.get(name)
        if canonical is not None:
            return self._commands[canonical]
        return None

    def get_description(self, name: str) -> CommandDescription | None:
        command_class = self.get(name)
        return command_class.description if command_class else None

    def names(self) -> list[str]:
        """Canonical command names, sorted."""
        return sorted(self._commands)

    def descriptions(self) -> list[CommandDescription]:
        """Descriptions of all registered commands, sorted by name."""
        return [self._commands[name].description for name in self.names()]

    def create(
        self,
        name: str,
        context: CommandContext,
        logger: logging.Logger,
        workspace_resolver: WorkspaceResolver | None = None,
    ) -> Command:
        """
        Instantiate the command registered under ``name``.

        Raises:
            RegistryError: If no command has that name or alias
        """
        command_class = self.get(name)
        if command_class is None:
            raise RegistryError(f"Unknown command: {name}", context={"available": self.names()})
        return command_class(
            context,
            command_class.description,
            logger,
            workspace_resolver=workspace_resolver,
        )

    def discover(self, package: str = BUILTIN_COMMANDS_PACKAGE) -> list[type[Command]]:
        """Register every Command subclass defined in ``package``'s modules.

        Modules whose name starts with an underscore are skipped. Only
        classes defined in the scanned module itself are considered, so
        re-exported imports are not registered twice.

        Returns:
            The newly registered classes
        """
        pkg = importlib.import_module(package)
        found: list[type[Command]] = []

        for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
            if modname.startswith("_"):
                continue
            module = importlib.import_module(f"{package}.{modname}")

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if (
                    issubclass(obj, Command)
                    and obj is not Command
                    and not inspect.isabstract(obj)
                    and obj.__module__ == module.__name__
                ):
                    found.append(self.register(obj))

        return found

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[type[Command]]:
        return (self._commands[name] for name in self.names())
