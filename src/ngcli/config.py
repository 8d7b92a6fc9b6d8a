"""
Configuration file support for ngcli.

Settings for the CLI itself (not the project workspace) are loaded from:
1. Project config: .ngcli.toml or ngcli.toml in the project tree
2. User config: ~/.config/ngcli/config.toml

Project config overrides user config, which overrides built-in defaults.
"""

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from ngcli.exceptions import ConfigError

# Config file names to search for in project directories
CONFIG_FILENAMES = [".ngcli.toml", "ngcli.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "ngcli" / "config.toml"

COLOR_MODES = ("auto", "always", "never")

# All known config keys for validation
KNOWN_KEYS = {
    "defaults": {"verbose", "quiet", "color"},
    "help": {"tool_name"},
}


@dataclass
class DefaultsConfig:
    """Default behaviour for every command."""

    verbose: bool = False
    quiet: bool = False
    color: str = "auto"

    @property
    def color_enabled(self) -> bool | None:
        """True/False when forced, None for terminal auto-detection."""
        if self.color == "always":
            return True
        if self.color == "never":
            return False
        return None


@dataclass
class HelpConfig:
    """Help rendering configuration."""

    tool_name: str = "ng"


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    help: HelpConfig = field(default_factory=HelpConfig)

    # Track which file each setting came from
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object

        Raises:
            ConfigError: If a config file exists but cannot be parsed
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        if USER_CONFIG_PATH.exists():
            user_data = _load_toml_file(USER_CONFIG_PATH)
            _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML file.

    Raises:
        ConfigError: If TOML is invalid or the file cannot be read
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """Merge loaded TOML data into ``config``, recording where each key came from."""
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    for section in KNOWN_KEYS:
        if section in data and not isinstance(data[section], dict):
            raise ConfigError(
                f"Config section '{section}' in {source} must be a table",
                context={"got": type(data[section]).__name__},
                suggestions=[f"Write the section as [{section}]"],
            )

    if "defaults" in data:
        defaults_data = data["defaults"]
        _warn_unknown_keys(defaults_data, KNOWN_KEYS["defaults"], "defaults", source)

        if "verbose" in defaults_data:
            config.defaults.verbose = bool(defaults_data["verbose"])
            sources["defaults.verbose"] = source
        if "quiet" in defaults_data:
            config.defaults.quiet = bool(defaults_data["quiet"])
            sources["defaults.quiet"] = source
        if "color" in defaults_data:
            color = defaults_data["color"]
            if color not in COLOR_MODES:
                raise ConfigError(
                    f"Invalid value for defaults.color in {source}: {color!r}",
                    suggestions=[f"Use one of: {', '.join(COLOR_MODES)}"],
                )
            config.defaults.color = color
            sources["defaults.color"] = source

    if "help" in data:
        help_data = data["help"]
        _warn_unknown_keys(help_data, KNOWN_KEYS["help"], "help", source)

        if "tool_name" in help_data:
            config.help.tool_name = str(help_data["tool_name"])
            sources["help.tool_name"] = source


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """Generate a template config file with all options documented."""
    return """# ngcli configuration file
# Place as .ngcli.toml in project root or ~/.config/ngcli/config.toml for user defaults

[defaults]
# Enable debug output by default
# verbose = false

# Only show warnings and errors
# quiet = false

# Colored output: auto, always, never
# color = "auto"

[help]
# Executable name shown in usage lines
# tool_name = "ng"
"""


def get_config_paths() -> dict[str, Path | None]:
    """Get paths to config files that would be loaded."""
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
