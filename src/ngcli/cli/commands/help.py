"""List the available commands."""

from ngcli import terminal
from ngcli.models.command import Command
from ngcli.models.interface import Arguments, CommandDescription, CommandScope


class HelpCommand(Command):
    description = CommandDescription(
        name="help",
        description="Lists available commands and their short descriptions.",
        scope=CommandScope.EVERYWHERE,
        aliases=("h",),
    )

    def run(self, options: Arguments) -> int:
        registry = self.context.registry
        if registry is None:
            self.logger.error("No command registry is available.")
            return 1

        self.logger.info("Available Commands:")
        for description in registry.descriptions():
            if description.hidden:
                continue
            alias_info = f" ({', '.join(description.aliases)})" if description.aliases else ""
            self.logger.info(
                f"  {terminal.cyan(description.name)}{alias_info} {description.description}"
            )

        self.logger.info("")
        self.logger.info(
            f'For more detailed help run "{self.tool_name} [command name] --help"'
        )
        return 0
