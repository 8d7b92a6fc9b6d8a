"""Create a new workspace."""

import re
from pathlib import Path
from typing import Any, Dict

from ngcli.models.command import Command
from ngcli.models.interface import (
    Arguments,
    CommandDescription,
    CommandScope,
    Option,
    OptionType,
)
from ngcli.strings import dasherize
from ngcli.utils import write_json
from ngcli.workspace import CONFIG_NAMES

# Letters, digits and dots, in dash-separated groups, starting with a letter
PROJECT_NAME_RE = re.compile(r"^[a-zA-Z][.0-9a-zA-Z]*(-[.0-9a-zA-Z]*)*$")


def build_workspace_document(name: str, new_project_root: str = "projects") -> Dict[str, Any]:
    """Return the initial workspace file contents for a project called ``name``."""
    return {
        "version": 1,
        "newProjectRoot": new_project_root,
        "projects": {
            name: {
                "root": "",
                "sourceRoot": "src",
                "projectType": "application",
            },
        },
        "defaultProject": name,
    }


class NewCommand(Command):
    description = CommandDescription(
        name="new",
        description="Creates a new workspace.",
        scope=CommandScope.OUT_PROJECT,
        aliases=("n",),
        options=(
            Option("name", "The name of the workspace.", positional=0),
            Option("directory", "The directory name to create the workspace in."),
            Option(
                "dryRun",
                "Run through without making any changes.",
                aliases=("d",),
                type=OptionType.BOOLEAN,
            ),
        ),
    )

    def run(self, options: Arguments) -> int:
        name = options.get("name")
        if not name:
            self.logger.error(f"The {self.description.name} command requires a name argument.")
            return 1
        if not PROJECT_NAME_RE.match(name):
            self.logger.error(f'Project name "{name}" is not valid.')
            return 1

        base = self.workspace.root or Path.cwd()
        directory = Path(base) / (options.get("directory") or dasherize(name))
        target = directory / CONFIG_NAMES[0]

        if target.exists():
            self.logger.error(f"Workspace file already exists: {target}")
            return 1

        if options.get("dryRun"):
            self.logger.info(f"CREATE {target} (dry run)")
            return 0

        try:
            write_json(target, build_workspace_document(name))
        except OSError as e:
            self.logger.error(f"Error writing workspace file: {e}")
            return 1

        self.logger.info(f"CREATE {target}")
        return 0
