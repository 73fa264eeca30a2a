"""Locations of user-level jayson files."""

from pathlib import Path

from jayson.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    PROJECT_CONFIG_FILE_NAME,
    SETTINGS_FILE_NAME,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / DEFAULT_CONFIG_SUBDIR / CONFIG_DIR_NAME
    LOGS_DIR = CONFIG_DIR / "logs"
    SETTINGS_FILE = CONFIG_DIR / SETTINGS_FILE_NAME

    # Bundled with the package
    PACKAGE_CONFIG_DIR = Path(__file__).parent
    PROJECT_SCHEMA_FILE = PACKAGE_CONFIG_DIR / "project.schema.json"

    @classmethod
    def project_config_path(cls, directory: Path | str) -> Path:
        """Return the ``jayson.json`` path inside ``directory``."""
        return Path(directory) / PROJECT_CONFIG_FILE_NAME

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ``~`` and resolve ``path_str`` without requiring it."""
        return Path(path_str).expanduser().resolve(strict=False)
