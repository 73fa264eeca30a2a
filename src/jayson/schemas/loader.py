"""Load JSON Schema files from disk."""

from pathlib import Path
from typing import Any

import orjson

from jayson.exceptions import SchemaNotFoundError, SchemaParseError
from jayson.logger import get_logger
from jayson.models import SchemaInfo, SchemaNode, SchemaType
from jayson.schemas.cache import CachedSchema, SchemaCache

logger = get_logger(__name__)


class SchemaLoader:
    """Resolve, read and cache schema files.

    Relative schema paths are resolved against ``schema_dir``; absolute
    paths are used as given.
    """

    def __init__(
        self,
        schema_dir: Path | str,
        cache: SchemaCache | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            schema_dir: Directory that relative schema paths refer to
            cache: Shared cache; a private one is created when omitted

        """
        self.schema_dir = Path(schema_dir)
        self.cache = cache if cache is not None else SchemaCache()

    def resolve_path(self, schema_path: Path | str) -> Path:
        path = Path(schema_path).expanduser()
        if path.is_absolute():
            return path
        return self.schema_dir / path

    def read(self, schema_path: Path | str) -> dict[str, Any]:
        """Decode the schema file without parsing or caching it.

        Raises:
            SchemaNotFoundError: If the file does not exist
            SchemaParseError: If the file is not a JSON object

        """
        full_path = self.resolve_path(schema_path)
        if not full_path.is_file():
            msg = f"Schema file not found: {full_path}"
            raise SchemaNotFoundError(msg, target=str(schema_path))

        try:
            with full_path.open("rb") as f:
                document = orjson.loads(f.read())
        except orjson.JSONDecodeError as e:
            msg = f"Invalid JSON in schema file {full_path}: {e}"
            raise SchemaParseError(msg, target=str(schema_path)) from e

        if not isinstance(document, dict):
            msg = "Schema root must be a JSON object"
            raise SchemaParseError(msg, target=str(schema_path))
        return document

    def _load_entry(self, schema_path: Path | str) -> CachedSchema:
        full_path = self.resolve_path(schema_path)
        cached = self.cache.get(full_path)
        if cached is not None:
            return cached

        document = self.read(schema_path)
        logger.debug("Loaded schema %s", full_path)
        return self.cache.put(full_path, document)

    def load(self, schema_path: Path | str) -> dict[str, Any]:
        """Return the decoded schema document at ``schema_path``.

        Raises:
            SchemaNotFoundError: If the file does not exist
            SchemaParseError: If the file is not a JSON object
            SchemaError: If the schema is malformed

        """
        return self._load_entry(schema_path).document

    def load_node(self, schema_path: Path | str) -> SchemaNode:
        """Return the parsed node tree for the schema at ``schema_path``."""
        return self._load_entry(schema_path).node

    def list_schemas(self) -> list[Path]:
        return list_schemas(self.schema_dir)


def get_schema_info(schema: Any) -> SchemaInfo:
    """Summarize a schema's title, root type and top-level fields.

    For an array root the item schema's properties are reported.

    Args:
        schema: Schema mapping or parsed SchemaNode

    Returns:
        SchemaInfo summary

    """
    node = SchemaNode.from_dict(schema)
    fields_from: SchemaNode | None = None
    if node.declares(SchemaType.OBJECT):
        fields_from = node
    elif node.declares(SchemaType.ARRAY):
        fields_from = node.items

    properties: list[str] = []
    required: list[str] = []
    if fields_from is not None and fields_from.properties:
        properties = list(fields_from.properties)
        required = list(fields_from.required)

    return SchemaInfo(
        title=node.title or "Untitled Schema",
        description=node.description or "",
        root_type=" | ".join(t.value for t in node.types or ()),
        required_fields=required,
        properties=properties,
    )


def list_schemas(schema_dir: Path | str) -> list[Path]:
    """Return the ``*.json`` files in ``schema_dir``, sorted by name.

    A missing directory yields an empty list.
    """
    directory = Path(schema_dir)
    if not directory.is_dir():
        return []
    return sorted(
        path for path in directory.glob("*.json") if path.is_file()
    )
