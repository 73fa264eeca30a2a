"""Read and write JSON documents.

All output is UTF-8 JSON encoded with orjson; pretty output uses
two-space indentation.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import orjson

from jayson.exceptions import DataSourceError
from jayson.logger import get_logger

logger = get_logger(__name__)

_UNSET_DATA = object()


class SourceKind(str, Enum):
    FILE = "file"
    OBJECT = "object"
    URL = "url"


@dataclass(frozen=True)
class DataSource:
    """Where a document comes from.

    Attributes:
        kind: "file", "object" or "url"
        path: File path for file sources
        data: In-memory document for object sources
        url: Address for url sources (not fetched by this module)

    """

    kind: SourceKind
    path: Path | None = None
    data: Any = _UNSET_DATA
    url: str | None = None

    @classmethod
    def from_file(cls, path: Path | str) -> "DataSource":
        return cls(SourceKind.FILE, path=Path(path))

    @classmethod
    def from_object(cls, data: Any) -> "DataSource":
        return cls(SourceKind.OBJECT, data=data)


def load_json_file(path: Path | str) -> Any:
    """Decode the JSON file at ``path``.

    Raises:
        DataSourceError: If the file is missing or is not valid JSON

    """
    path = Path(path)
    if not path.is_file():
        msg = f"File not found: {path}"
        raise DataSourceError(msg, target=str(path))
    try:
        with path.open("rb") as f:
            return orjson.loads(f.read())
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise DataSourceError(msg, target=str(path)) from e


def read_data(source: DataSource) -> Any:
    """Return the document described by ``source``.

    Raises:
        DataSourceError: For a missing path or data, an unreadable file,
            or a url source

    """
    if source.kind == SourceKind.FILE:
        if source.path is None:
            msg = "File path is required for file data source"
            raise DataSourceError(msg)
        return load_json_file(source.path)

    if source.kind == SourceKind.OBJECT:
        if source.data is _UNSET_DATA:
            msg = "Data is required for object data source"
            raise DataSourceError(msg)
        return source.data

    msg = "URL data sources are not supported; fetch the document first"
    raise DataSourceError(msg, target=source.url)


def dumps(data: Any, pretty: bool = True) -> bytes:
    """Encode ``data`` as JSON bytes."""
    option = orjson.OPT_INDENT_2 if pretty else 0
    return orjson.dumps(data, option=option)


def write_json(
    data: Any,
    output_path: Path | str,
    pretty: bool = True,
    include_schema: bool = False,
    schema_url: str | None = None,
) -> Path:
    """Write ``data`` as JSON, creating parent directories.

    Args:
        data: Document to write
        output_path: Destination file
        pretty: Indent the output
        include_schema: Prepend a ``$schema`` key to object documents
        schema_url: Value for ``$schema``

    Returns:
        Path of the written file

    """
    output_path = Path(output_path)
    if include_schema and schema_url and isinstance(data, dict):
        data = {"$schema": schema_url, **data}

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("wb") as f:
        f.write(dumps(data, pretty))
    logger.debug("Wrote JSON to %s", output_path)
    return output_path


def merge_json_files(
    file_paths: Iterable[Path | str], output_path: Path | str
) -> Path:
    """Merge several JSON files into one array.

    Arrays are concatenated and other documents appended; files that do
    not exist are skipped.
    """
    merged: list[Any] = []
    for file_path in file_paths:
        path = Path(file_path)
        if not path.is_file():
            logger.warning("Skipping missing file: %s", path)
            continue
        data = load_json_file(path)
        if isinstance(data, list):
            merged.extend(data)
        else:
            merged.append(data)
    return write_json(merged, output_path)


def _group_key(value: Any) -> str:
    if value is None or value == "":
        return "unknown"
    if isinstance(value, str):
        return value
    return orjson.dumps(value).decode()


def split_json_file(
    input_path: Path | str,
    output_dir: Path | str,
    split_by: str,
    file_name_pattern: Callable[[str], str] | None = None,
) -> list[Path]:
    """Split a JSON array into one file per value of ``split_by``.

    Records without the field are grouped under "unknown".

    Args:
        input_path: File holding a JSON array of objects
        output_dir: Directory for the group files
        split_by: Field to group records by
        file_name_pattern: Maps a group key to a file name; defaults to
            ``<key>.json``

    Returns:
        Paths of the created files, in first-seen group order

    Raises:
        DataSourceError: If the input is not an array of objects, or a
            group file would land outside ``output_dir``

    """
    data = load_json_file(input_path)
    if not isinstance(data, list):
        msg = "Expected a JSON array to split"
        raise DataSourceError(msg, target=str(input_path))

    name_for = file_name_pattern or (lambda key: f"{key}.json")
    groups: dict[str, list[Any]] = {}
    for item in data:
        if not isinstance(item, dict):
            msg = "Every record must be a JSON object"
            raise DataSourceError(msg, target=str(input_path))
        groups.setdefault(_group_key(item.get(split_by)), []).append(item)

    output_dir = Path(output_dir)
    root = output_dir.resolve()
    targets = {key: output_dir / name_for(key) for key in groups}
    for key, target in targets.items():
        if root not in target.resolve().parents:
            msg = f"Group file for {key!r} escapes the output directory"
            raise DataSourceError(msg, target=str(target))

    created = [
        write_json(items, targets[key]) for key, items in groups.items()
    ]
    logger.info("Split %s into %d file(s)", input_path, len(created))
    return created
