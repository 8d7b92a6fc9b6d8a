"""
Base class for ng commands.

Every command goes through the same lifecycle, driven by
``validate_and_run()``:

1. ``validate_scope()`` unless help was requested
2. ``initialize()``
3. exactly one of ``print_help()``, ``print_json_help()`` or ``run()``

Subclasses implement ``run()`` and optionally override ``initialize()``.

Usage:
    from ngcli.models.command import Command
    from ngcli.models.interface import CommandDescription, CommandScope

    class LintCommand(Command):
        description = CommandDescription(
            name="lint",
            description="Runs linting tools on the project.",
            scope=CommandScope.IN_PROJECT,
        )

        def run(self, options):
            self.logger.info("All files pass linting.")
            return 0
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ngcli import terminal
from ngcli.exceptions import ScopeViolation
from ngcli.models.interface import (
    Arguments,
    CommandContext,
    CommandDescription,
    CommandScope,
    Option,
)
from ngcli.strings import dasherize
from ngcli.workspace import WorkspaceResolver


class Command(ABC):
    """Abstract command with scope checks and help rendering.

    Attributes:
        tool_name: Executable name shown in usage lines
        allow_missing_workspace: Hint for subclasses that can work without
            a parsed workspace file
        description: Static metadata; concrete commands declare it at
            class level so the registry can discover them
    """

    tool_name = "ng"
    allow_missing_workspace = False
    description: CommandDescription

    def __init__(
        self,
        context: CommandContext,
        description: CommandDescription,
        logger: logging.Logger,
        workspace_resolver: Optional[WorkspaceResolver] = None,
    ):
        self.context = context
        self.workspace = context.workspace
        self.description = description
        self.logger = logger
        self.workspace_resolver = workspace_resolver or WorkspaceResolver(
            start_dir=context.workspace.root
        )
        if context.settings is not None:
            self.tool_name = context.settings.help.tool_name

    def initialize(self, options: Arguments) -> None:
        """Prepare for ``run()``. Called in help mode too."""
        return None

    def print_help(self, options: Arguments) -> int:
        self.print_help_usage()
        self.print_help_options()
        return 0

    def print_json_help(self, options: Arguments) -> int:
        self.logger.info(json.dumps(self.description.to_dict()))
        return 0

    def print_help_usage(self) -> None:
        self.logger.info(self.description.description)

        name = self.description.name
        args = [o for o in self.description.options if o.positional is not None]
        opts = [o for o in self.description.options if o.positional is None]

        arg_display = " " + " ".join(f"<{a.name}>" for a in args) if args else ""
        options_display = " [options]" if opts else ""

        self.logger.info(f"usage: {self.tool_name} {name}{arg_display}{options_display}")
        self.logger.info("")

    def print_help_options(self, options: Optional[Sequence[Option]] = None) -> None:
        """Log the ``arguments:`` and ``options:`` sections.

        Flags are sorted by raw name in code-point order, so upper-case
        names come before lower-case ones. Hidden flags are skipped.
        """
        if options is None:
            options = self.description.options

        args = [o for o in options if o.positional is not None]
        opts = [o for o in options if o.positional is None]

        if args:
            self.logger.info("arguments:")
            for o in args:
                self.logger.info(f"  {terminal.cyan(o.name)}")
                if o.description:
                    self.logger.info(f"    {o.description}")

        if options:
            if args:
                self.logger.info("")
            self.logger.info("options:")
            for o in sorted((o for o in opts if not o.hidden), key=lambda o: o.name):
                line = f"  {terminal.cyan('--' + dasherize(o.name))}"
                if o.aliases:
                    line += " (" + " ".join(f"-{a}" for a in o.aliases) + ")"
                self.logger.info(line)
                if o.description:
                    self.logger.info(f"    {o.description}")

    def validate_scope(self) -> None:
        """
        Check that the command runs where its scope allows.

        Raises:
            ScopeViolation: Out-of-project command inside a project, or
                in-project command without a usable workspace
        """
        scope = self.description.scope
        name = self.description.name

        if scope == CommandScope.OUT_PROJECT:
            if self.workspace.config_file:
                self.logger.critical(
                    f"The {name} command requires to be run outside of a project, but a "
                    f'project definition was found at "{self.workspace.config_file}".'
                )
                raise ScopeViolation(name, scope)
        elif scope == CommandScope.IN_PROJECT:
            if (
                not self.workspace.config_file
                or self.workspace_resolver.get_workspace("local") is None
            ):
                self.logger.critical(
                    f"The {name} command requires to be run in a project, but a "
                    "project definition could not be found."
                )
                raise ScopeViolation(name, scope)
        # CommandScope.EVERYWHERE: nothing to check

    @abstractmethod
    def run(self, options: Arguments) -> Optional[int]:
        """Execute the command. ``None`` means success."""

    def validate_and_run(self, options: Arguments) -> Optional[int]:
        if not options.get("help") and not options.get("help_json"):
            self.validate_scope()
        self.initialize(options)

        if options.get("help"):
            return self.print_help(options)
        elif options.get("help_json"):
            return self.print_json_help(options)
        else:
            return self.run(options)
