"""Read values from the workspace file."""

import json
from typing import Optional

from ngcli.exceptions import WorkspaceError
from ngcli.models.command import Command
from ngcli.models.interface import (
    Arguments,
    CommandDescription,
    CommandScope,
    Option,
)
from ngcli.workspace import Workspace


class ConfigCommand(Command):
    """Print a value from the local workspace by dotted path."""

    description = CommandDescription(
        name="config",
        description="Retrieves a value from the workspace file.",
        scope=CommandScope.IN_PROJECT,
        options=(
            Option(
                "jsonPath",
                "The configuration key, in dotted form. For example: projects.my-app.root",
                positional=0,
            ),
        ),
    )

    local_workspace: Optional[Workspace] = None

    def initialize(self, options: Arguments) -> None:
        self.local_workspace = self.workspace_resolver.get_workspace("local")

    def run(self, options: Arguments) -> int:
        if self.local_workspace is None:
            self.logger.error("No workspace file could be loaded.")
            return 1

        json_path = options.get("jsonPath")
        if not json_path:
            self.logger.info(json.dumps(self.local_workspace.data, indent=2))
            return 0

        try:
            value = self.local_workspace.get(json_path)
        except WorkspaceError as e:
            self.logger.error(e.message)
            return 1

        if isinstance(value, str):
            self.logger.info(value)
        else:
            self.logger.info(json.dumps(value, indent=2))
        return 0
