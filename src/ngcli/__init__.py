"""
ngcli: command lifecycle core for the ``ng`` project CLI.

Modules:
    models: Command metadata types and the abstract Command lifecycle
    registry: Explicit registry of command classes
    workspace: Project workspace detection
    parser: Argument parsing driven by command descriptions
    config: TOML settings for the CLI itself
    cli: The ``ng`` entry point and built-in commands

Quick Start::

    import logging

    from ngcli import Command, CommandContext, CommandDescription, CommandScope
    from ngcli.workspace import resolve_workspace

    class HelloCommand(Command):
        description = CommandDescription(
            name="hello",
            description="Says hello.",
            scope=CommandScope.EVERYWHERE,
        )

        def run(self, options):
            self.logger.info("hello")

    context = CommandContext(workspace=resolve_workspace())
    command = HelloCommand(context, HelloCommand.description, logging.getLogger("ngcli"))
    command.validate_and_run({"help": False, "help_json": False})
"""

__version__ = "0.1.0"

from .exceptions import (
    ArgumentError,
    ConfigError,
    FatalExit,
    NgCliError,
    RegistryError,
    ScopeViolation,
    WorkspaceError,
)
from .models import (
    Arguments,
    Command,
    CommandContext,
    CommandDescription,
    CommandScope,
    CommandWorkspace,
    Option,
    OptionType,
)

__all__ = [
    "__version__",
    "Arguments",
    "Command",
    "CommandContext",
    "CommandDescription",
    "CommandScope",
    "CommandWorkspace",
    "Option",
    "OptionType",
    "NgCliError",
    "ConfigError",
    "WorkspaceError",
    "RegistryError",
    "ArgumentError",
    "FatalExit",
    "ScopeViolation",
]
