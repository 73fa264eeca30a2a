"""Global INI settings (``~/.config/jayson/settings.conf``)."""

import configparser
from pathlib import Path
from typing import TypedDict

from jayson.config.paths import Paths
from jayson.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    SETTINGS_FILE_NAME,
)
from jayson.exceptions import ConfigError
from jayson.logger import get_logger

logger = get_logger(__name__)

SECTION_DEFAULT = "DEFAULT"
KEY_LOG_LEVEL = "log_level"
KEY_CONSOLE_LOG_LEVEL = "console_log_level"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

SETTINGS_HEADER = """\
# jayson settings
# log_level:         level written to the log file
# console_log_level: level shown on the terminal

"""


class GlobalSettings(TypedDict):
    log_level: str
    console_log_level: str


class GlobalSettingsManager:
    """Read and write the user's INI settings file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the settings manager.

        Args:
            config_dir: Configuration directory (defaults to
                Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / SETTINGS_FILE_NAME

    @staticmethod
    def defaults() -> GlobalSettings:
        return GlobalSettings(
            log_level=DEFAULT_LOG_LEVEL,
            console_log_level=DEFAULT_CONSOLE_LOG_LEVEL,
        )

    @staticmethod
    def _parser() -> configparser.ConfigParser:
        return configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

    def load(self) -> GlobalSettings:
        """Load settings, falling back to defaults for missing keys.

        A missing file is not an error. Unknown log levels are replaced by
        the default with a warning.

        Raises:
            ConfigError: If the file cannot be parsed

        """
        settings = self.defaults()
        if not self.settings_file.exists():
            return settings

        config = self._parser()
        try:
            config.read(self.settings_file, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigError(str(e), target=str(self.settings_file)) from e

        section = config[SECTION_DEFAULT]
        for key in (KEY_LOG_LEVEL, KEY_CONSOLE_LOG_LEVEL):
            value = section.get(key, settings[key]).strip().upper()
            if value not in VALID_LOG_LEVELS:
                logger.warning(
                    "Ignoring invalid %s '%s' in %s",
                    key,
                    value,
                    self.settings_file,
                )
                continue
            settings[key] = value
        return settings

    def save(self, settings: GlobalSettings) -> Path:
        """Write ``settings`` to the settings file with a comment header."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config = self._parser()
        config.read_dict({SECTION_DEFAULT: dict(settings)})
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(SETTINGS_HEADER)
            config.write(f)
        logger.debug("Saved settings to %s", self.settings_file)
        return self.settings_file
