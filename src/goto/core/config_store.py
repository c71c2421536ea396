"""Loading of the shortcut configuration file.

The file lives at `~/.goto.toml` unless overridden:

    name = "/some/path"              # 'goto name' takes you here
    othername = "~/some/other/path"  # $HOME expansion will happen

    ["/somewhere/specific"]          # Only in effect when in this location
    "*" = "default/under/specific"   # With no arguments, this is used
    name = "somewhere/else"          # Overshadows the one above
"""

import logging
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from goto.core.config_model import ShortcutConfig
from goto.core.errors import ConfigParseError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".goto.toml"


class ConfigStore(ABC):
    """Abstract source of the shortcut configuration.

    Lets tests provide configuration in memory instead of writing files
    under the real home directory.
    """

    @abstractmethod
    def load(self) -> ShortcutConfig:
        """Load and validate the configuration.

        Raises:
            ConfigParseError: If the file is missing, unreadable, or malformed
            InvalidContextBase: If a context header is a relative path
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Location of the configuration, for error messages."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads a TOML file."""

    def __init__(self, config_path: Path) -> None:
        self._config_path = config_path

    def load(self) -> ShortcutConfig:
        config_path = self._config_path
        logger.debug("Loading configuration from %s", config_path)

        try:
            text = config_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigParseError(config_path, "file not found") from None
        except UnicodeDecodeError as e:
            raise ConfigParseError(config_path, f"file is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigParseError(config_path, f"unable to read file: {e}") from e

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(config_path, f"failed to parse TOML: {e}") from e

        config = parse_config(data, config_path)
        logger.debug(
            "Loaded %d global shortcut(s) and %d context(s)",
            len(config.global_shortcuts),
            len(config.contexts),
        )
        return config

    def path(self) -> Path:
        return self._config_path


def default_config_path(home: Path) -> Path:
    return home / CONFIG_FILENAME


def parse_config(data: dict[str, Any], config_path: Path) -> ShortcutConfig:
    """Convert a parsed TOML document into a ShortcutConfig.

    Top-level strings are global shortcuts; top-level tables are contexts
    keyed by their base path. Table order is preserved for tie-breaking.

    Raises:
        ConfigParseError: If a name is empty or a value has the wrong type
        InvalidContextBase: If a context header is a relative path
    """
    global_shortcuts: dict[str, str] = {}
    contexts: list[tuple[str, dict[str, str]]] = []

    for key, value in data.items():
        if isinstance(value, dict):
            contexts.append((key, _parse_context(key, value, config_path)))
        elif isinstance(value, str):
            _check_name(key, config_path, location=key)
            global_shortcuts[key] = value
        else:
            raise ConfigParseError(
                config_path,
                f"error at {key}: expected a table or a path string, "
                f"not {type(value).__name__}",
            )

    return ShortcutConfig.build(global_shortcuts, contexts)


def _parse_context(base: str, table: dict[str, Any], config_path: Path) -> dict[str, str]:
    shortcuts: dict[str, str] = {}
    for name, value in table.items():
        location = f"{base!r}.{name}"
        _check_name(name, config_path, location=location)
        if not isinstance(value, str):
            raise ConfigParseError(
                config_path,
                f"error at {location}: expected a path string, not {type(value).__name__}",
            )
        shortcuts[name] = value
    return shortcuts


def _check_name(name: str, config_path: Path, *, location: str) -> None:
    if not name:
        raise ConfigParseError(config_path, f"error at {location}: empty shortcut name")
