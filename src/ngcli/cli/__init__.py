"""
Command-line interface for ngcli, installed as ``ng``.

    ng help                     - List available commands
    ng version                  - Show version information
    ng new <name>               - Create a workspace (outside a project)
    ng config [jsonPath]        - Read the workspace file (inside a project)
    ng settings                 - Show or create ngcli settings

Every command accepts --help and --help-json.

Examples:
    ng new my-app --dry-run
    ng config projects.my-app.root
    ng new --help-json
"""

import difflib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ngcli import terminal
from ngcli.cli.utils import print_error
from ngcli.config import Config
from ngcli.exceptions import ConfigError, FatalExit, NgCliError
from ngcli.logger import setup_logging
from ngcli.models.interface import CommandContext
from ngcli.parser import parse_arguments
from ngcli.registry import CommandRegistry
from ngcli.workspace import WorkspaceResolver, resolve_workspace

__all__ = ["main", "run_command"]

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ng CLI."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        settings = Config.load()
    except ConfigError as e:
        print_error(e)
        return 1

    terminal.set_colors_enabled(settings.defaults.color_enabled)
    setup_logging(verbose=settings.defaults.verbose, quiet=settings.defaults.quiet)

    registry = CommandRegistry()
    registry.discover()

    if not argv or argv[0] in ("-h", "--help"):
        name, rest = "help", []
    elif argv[0] == "--version":
        name, rest = "version", []
    else:
        name, rest = argv[0], argv[1:]

    if name not in registry:
        tool_name = settings.help.tool_name
        logger.error(
            f'The specified command ("{name}") is invalid. For a list of available '
            f'options, run "{tool_name} help".'
        )
        matches = difflib.get_close_matches(name, registry.names(), n=3)
        if matches:
            logger.error(f"Did you mean: {', '.join(matches)}?")
        return 1

    return run_command(registry, name, rest, settings=settings)


def run_command(
    registry: CommandRegistry,
    name: str,
    argv: List[str],
    settings: Optional[Config] = None,
    cwd: Optional[Path] = None,
) -> int:
    """
    Parse arguments, build the command and run its lifecycle.

    Args:
        registry: Registry holding the command
        name: Command name or alias
        argv: Arguments after the command name
        settings: Loaded CLI settings (defaults when None)
        cwd: Directory used for workspace detection (default: current directory)

    Returns:
        Process exit code
    """
    if settings is None:
        settings = Config()

    description = registry.get_description(name)
    if description is None:
        logger.error(f"Unknown command: {name}")
        return 1

    command_logger = logging.getLogger(f"ngcli.commands.{description.name}")

    try:
        options = parse_arguments(description, argv, tool_name=settings.help.tool_name)

        workspace = resolve_workspace(cwd)
        context = CommandContext(workspace=workspace, registry=registry, settings=settings)
        command = registry.create(
            name,
            context,
            command_logger,
            workspace_resolver=WorkspaceResolver(start_dir=workspace.root),
        )
        result = command.validate_and_run(options)
    except FatalExit as e:
        return e.exit_code
    except NgCliError as e:
        print_error(e, verbose=settings.defaults.verbose)
        return 1

    return 0 if result is None else result


if __name__ == "__main__":
    sys.exit(main())
