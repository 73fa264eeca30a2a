"""Detect which JSON Schema draft a schema declares via ``$schema``."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import orjson

from jayson.constants import JSON_SCHEMA_VERSIONS
from jayson.logger import get_logger

logger = get_logger(__name__)

SCHEMA_URL_TO_VERSION: dict[str, str] = {}
for _version, _url in JSON_SCHEMA_VERSIONS.items():
    _bare = _url.rstrip("#")
    SCHEMA_URL_TO_VERSION[_bare] = _version
    SCHEMA_URL_TO_VERSION[f"{_bare}#"] = _version


@dataclass(frozen=True)
class DetectedStandard:
    """Result of standard detection."""

    version: str | None
    schema_url: str | None
    is_official: bool
    description: str


def _unknown(description: str) -> DetectedStandard:
    return DetectedStandard(None, None, False, description)


def detect_standard(schema_or_path: Any) -> DetectedStandard:
    """Identify the JSON Schema version of a schema object or file.

    Problems with the input are reported in ``description`` rather than
    raised.

    Args:
        schema_or_path: Decoded schema mapping, or a path to a schema file

    Returns:
        DetectedStandard describing the declared ``$schema``

    """
    if isinstance(schema_or_path, str | Path):
        path = Path(schema_or_path)
        if not path.is_file():
            return _unknown("File not found")
        try:
            with path.open("rb") as f:
                schema = orjson.loads(f.read())
        except orjson.JSONDecodeError:
            logger.debug("Could not parse %s for standard detection", path)
            return _unknown("Failed to parse schema file")
    else:
        schema = schema_or_path

    if not isinstance(schema, dict):
        return _unknown("Invalid input: expected object or file path")

    schema_url = schema.get("$schema")
    if not isinstance(schema_url, str) or not schema_url:
        return _unknown("No $schema property found - standard unknown")

    version = SCHEMA_URL_TO_VERSION.get(schema_url)
    if version is not None:
        return DetectedStandard(
            version, schema_url, True, f"JSON Schema {version}"
        )
    return DetectedStandard(
        None, schema_url, False, f"Custom schema: {schema_url}"
    )
