"""Configuration management.

This package provides:
- GlobalSettingsManager: user INI settings (settings.py)
- ProjectConfig: per-project ``jayson.json`` (project.py)
- Paths: path constants (paths.py)
"""

from jayson.config.paths import Paths
from jayson.config.project import (
    ProjectConfig,
    load_project_config,
    validate_project_config,
    write_project_config,
)
from jayson.config.settings import GlobalSettings, GlobalSettingsManager

__all__ = [
    "GlobalSettings",
    "GlobalSettingsManager",
    "Paths",
    "ProjectConfig",
    "load_project_config",
    "validate_project_config",
    "write_project_config",
]
