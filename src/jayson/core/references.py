"""Local ``$ref`` resolution against a root schema.

Only same-document references are supported: ``#``, ``#/definitions/X``,
``#/$defs/X`` and general JSON pointers into the root document. Remote
references resolve to ``None`` and are reported by the caller.
"""

from collections.abc import Mapping
from urllib.parse import unquote

from jayson.logger import get_logger
from jayson.models import SchemaNode

logger = get_logger(__name__)


def ref_name(ref: str) -> str:
    """Return the last segment of a reference, e.g. ``Address``."""
    return ref.rstrip("/").split("/")[-1] or "unknown"


def _pointer_tokens(pointer: str) -> list[str]:
    return [
        unquote(token).replace("~1", "/").replace("~0", "~")
        for token in pointer.lstrip("/").split("/")
    ]


class ReferenceResolver:
    """Resolve local references for one root schema.

    Resolved targets are memoized per reference string so a recursive
    schema parses each referenced node once.
    """

    def __init__(self, root: SchemaNode) -> None:
        self.root = root
        self._resolved: dict[str, SchemaNode | None] = {}

    def resolve(self, ref: str) -> SchemaNode | None:
        """Return the node ``ref`` points to, or None if it can't be found."""
        if ref in self._resolved:
            return self._resolved[ref]

        target = self._lookup(ref)
        if target is None:
            logger.debug("Unresolved reference %s", ref)
        self._resolved[ref] = target
        return target

    def _lookup(self, ref: str) -> SchemaNode | None:
        if not ref.startswith("#"):
            return None

        pointer = ref[1:]
        if pointer in ("", "/"):
            return self.root

        tokens = _pointer_tokens(pointer)
        if len(tokens) == 2 and tokens[0] == "definitions":
            return self.root.definitions.get(tokens[1])
        if len(tokens) == 2 and tokens[0] == "$defs":
            return self.root.defs.get(tokens[1])

        current: object = self.root.raw
        for token in tokens:
            if isinstance(current, Mapping) and token in current:
                current = current[token]
            elif isinstance(current, list) and token.isdigit():
                index = int(token)
                if index >= len(current):
                    return None
                current = current[index]
            else:
                return None

        if not isinstance(current, Mapping):
            return None
        return SchemaNode.from_dict(current)
