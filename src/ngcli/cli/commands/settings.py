"""View and create ngcli settings files."""

from pathlib import Path
from typing import Any

from ngcli.config import (
    CONFIG_FILENAMES,
    USER_CONFIG_PATH,
    Config,
    generate_template,
    get_config_paths,
)
from ngcli.models.command import Command
from ngcli.models.interface import (
    Arguments,
    CommandDescription,
    CommandScope,
    Option,
    OptionType,
)
from ngcli.utils import ensure_parent_dir


def format_value(value: Any) -> str:
    """Render a setting the way it would be written in TOML."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "# not set"
    return str(value)


class SettingsCommand(Command):
    description = CommandDescription(
        name="settings",
        description="Shows the effective ngcli settings or creates a settings file.",
        scope=CommandScope.EVERYWHERE,
        options=(
            Option("init", "Create a template settings file.", type=OptionType.BOOLEAN),
            Option("paths", "Show settings file paths.", type=OptionType.BOOLEAN),
            Option(
                "user",
                "Use the user settings file for --init.",
                type=OptionType.BOOLEAN,
            ),
        ),
    )

    def run(self, options: Arguments) -> int:
        if options.get("init"):
            return self._init(bool(options.get("user")))
        if options.get("paths"):
            return self._show_paths()
        return self._show()

    def _show(self) -> int:
        config = self.context.settings or Config.load()

        self.logger.info("# Effective ngcli settings")
        self.logger.info("")
        self.logger.info("[defaults]")
        for key in ("verbose", "quiet", "color"):
            self._log_value(config, "defaults", key, getattr(config.defaults, key))
        self.logger.info("")
        self.logger.info("[help]")
        self._log_value(config, "help", "tool_name", config.help.tool_name)
        return 0

    def _log_value(self, config: Config, section: str, key: str, value: Any) -> None:
        source = config.get_source(f"{section}.{key}")
        source_display = Path(source).name if source != "default" else source
        self.logger.info(f"{key} = {format_value(value)}  # from: {source_display}")

    def _show_paths(self) -> int:
        paths = get_config_paths()

        self.logger.info(f"User settings: {USER_CONFIG_PATH}")
        self.logger.info("  Status: exists" if paths["user"] else "  Status: not found")
        self.logger.info("")
        self.logger.info(f"Project settings search: {', '.join(CONFIG_FILENAMES)}")
        if paths["project"]:
            self.logger.info(f"  Found: {paths['project']}")
        else:
            self.logger.info("  Status: not found")
        return 0

    def _init(self, user: bool) -> int:
        if user:
            target = USER_CONFIG_PATH
        else:
            target = Path(self.workspace.root or Path.cwd()) / CONFIG_FILENAMES[0]

        if target.exists():
            self.logger.error(f"Settings file already exists: {target}")
            return 1

        try:
            ensure_parent_dir(target).write_text(generate_template(), encoding="utf-8")
        except OSError as e:
            self.logger.error(f"Error writing settings file: {e}")
            return 1

        self.logger.info(f"Created settings template: {target}")
        return 0
