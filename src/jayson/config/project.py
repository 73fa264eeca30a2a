"""Project configuration (``jayson.json``).

The file is validated against the bundled ``project.schema.json`` with
``jsonschema`` before use; keys that are absent take their defaults.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import orjson
from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from jayson.config.paths import Paths
from jayson.constants import DEFAULT_OUTPUT_DIR, DEFAULT_SCHEMA_DIR
from jayson.exceptions import ConfigError
from jayson.logger import get_logger

logger = get_logger(__name__)

_validator: Draft7Validator | None = None


def _get_validator() -> Draft7Validator:
    global _validator  # noqa: PLW0603
    if _validator is None:
        with Paths.PROJECT_SCHEMA_FILE.open("rb") as f:
            _validator = Draft7Validator(orjson.loads(f.read()))
    return _validator


@dataclass(frozen=True)
class ProjectConfig:
    """Settings from ``jayson.json``; directories are kept as written."""

    schema_dir: str = DEFAULT_SCHEMA_DIR
    output_dir: str = DEFAULT_OUTPUT_DIR
    default_format: str = "terminal"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectConfig":
        defaults = cls()
        return cls(
            schema_dir=data.get("schemaDir", defaults.schema_dir),
            output_dir=data.get("outputDir", defaults.output_dir),
            default_format=data.get("defaultFormat", defaults.default_format),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "$schema": "https://json-schema.org/draft-07/schema",
            "schemaDir": self.schema_dir,
            "outputDir": self.output_dir,
            "defaultFormat": self.default_format,
        }


def validate_project_config(data: Any, source: str | None = None) -> None:
    """Check decoded ``jayson.json`` content against the bundled schema.

    Raises:
        ConfigError: With the most relevant violation and its location

    """
    error = best_match(_get_validator().iter_errors(data))
    if error is None:
        return
    location = (
        ".".join(str(p) for p in error.absolute_path)
        if error.absolute_path
        else "root"
    )
    msg = f"at '{location}': {error.message}"
    raise ConfigError(msg, target=source)


def load_project_config(directory: Path | str = ".") -> ProjectConfig:
    """Load ``jayson.json`` from ``directory``, or defaults if absent.

    Raises:
        ConfigError: If the file is not valid JSON or fails validation

    """
    config_path = Paths.project_config_path(directory)
    if not config_path.is_file():
        logger.debug("No project config at %s, using defaults", config_path)
        return ProjectConfig()

    try:
        with config_path.open("rb") as f:
            data = orjson.loads(f.read())
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise ConfigError(msg, target=str(config_path)) from e

    validate_project_config(data, str(config_path))
    return ProjectConfig.from_dict(data)


def write_project_config(
    directory: Path | str,
    config: ProjectConfig | None = None,
    force: bool = False,
) -> Path:
    """Write ``jayson.json`` into ``directory``.

    Raises:
        ConfigError: If the file exists and ``force`` is False

    """
    config_path = Paths.project_config_path(directory)
    if config_path.exists() and not force:
        msg = "already initialized; use --force to overwrite"
        raise ConfigError(msg, target=str(config_path))

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("wb") as f:
        f.write(
            orjson.dumps(
                (config or ProjectConfig()).to_dict(),
                option=orjson.OPT_INDENT_2,
            )
        )
    logger.debug("Wrote project config %s", config_path)
    return config_path
