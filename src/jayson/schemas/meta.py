"""Meta-validation of schema documents with ``jsonschema``."""

from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError as MetaSchemaError
from jsonschema.exceptions import best_match

from jayson.exceptions import SchemaError
from jayson.logger import get_logger

logger = get_logger(__name__)


def _format_path(parts: Any) -> str:
    return ".".join(str(p) for p in parts) if parts else "root"


def check_schema(schema: Any, name: str | None = None) -> None:
    """Check a schema document against the draft-07 meta-schema.

    Args:
        schema: Decoded schema document
        name: Label used in the error message, such as a file name

    Raises:
        SchemaError: With the most relevant meta-schema violation

    """
    try:
        Draft7Validator.check_schema(schema)
    except MetaSchemaError as e:
        # check_schema raises the first error; best_match picks the most
        # relevant one across all violations
        meta_validator = Draft7Validator(Draft7Validator.META_SCHEMA)
        error = best_match(meta_validator.iter_errors(schema)) or e
        msg = f"at '{_format_path(error.absolute_path)}': {error.message}"
        raise SchemaError(msg, target=name) from e
    logger.debug("Schema %s passed meta-validation", name or "<inline>")


def schema_problems(schema: Any) -> list[str]:
    """Return every meta-schema violation as ``path: message`` strings."""
    meta_validator = Draft7Validator(Draft7Validator.META_SCHEMA)
    return [
        f"{_format_path(error.absolute_path)}: {error.message}"
        for error in meta_validator.iter_errors(schema)
    ]
