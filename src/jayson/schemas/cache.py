"""In-memory schema cache keyed by resolved file path.

The cache is an explicit object passed to loaders rather than module
state, so separate loaders can share one cache or keep their own.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jayson.logger import get_logger
from jayson.models import SchemaNode

logger = get_logger(__name__)


@dataclass(frozen=True)
class CachedSchema:
    """A decoded schema document and its parsed node tree."""

    document: dict[str, Any]
    node: SchemaNode


class SchemaCache:
    """Cache of loaded schemas."""

    def __init__(self) -> None:
        self._entries: dict[Path, CachedSchema] = {}

    @staticmethod
    def _key(path: Path | str) -> Path:
        return Path(path).expanduser().resolve(strict=False)

    def get(self, path: Path | str) -> CachedSchema | None:
        """Return the cached entry for ``path`` or None."""
        entry = self._entries.get(self._key(path))
        if entry is not None:
            logger.debug("Schema cache hit: %s", path)
        return entry

    def put(self, path: Path | str, document: dict[str, Any]) -> CachedSchema:
        """Parse ``document`` and store it under ``path``.

        Raises:
            SchemaError: If the document is not a well-formed schema

        """
        entry = CachedSchema(document, SchemaNode.from_dict(document))
        self._entries[self._key(path)] = entry
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, Path | str):
            return False
        return self._key(path) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
