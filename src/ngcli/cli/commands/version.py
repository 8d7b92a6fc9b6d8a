"""Show version information."""

import platform

from ngcli import __version__
from ngcli.models.command import Command
from ngcli.models.interface import Arguments, CommandDescription, CommandScope


class VersionCommand(Command):
    description = CommandDescription(
        name="version",
        description="Outputs ngcli version.",
        scope=CommandScope.EVERYWHERE,
        aliases=("v",),
    )

    def run(self, options: Arguments) -> int:
        self.logger.info(f"ngcli {__version__}")
        self.logger.info(f"Python: {platform.python_version()}")
        self.logger.info(f"OS: {platform.system().lower()} {platform.machine()}")
        if self.workspace.config_file:
            self.logger.info(f"Workspace: {self.workspace.config_file}")
        return 0
