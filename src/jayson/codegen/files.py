"""Write generated sources to disk."""

from pathlib import Path
from typing import Any

from jayson.codegen.javascript import generate_javascript
from jayson.codegen.options import GenerateOptions
from jayson.codegen.typescript import generate_typescript
from jayson.logger import get_logger

logger = get_logger(__name__)


def _write_source(path: Path, source: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    logger.debug("Wrote %d bytes to %s", len(source), path)
    return path


def write_typescript_file(
    schema: Any,
    output_path: Path,
    options: GenerateOptions | None = None,
) -> Path:
    """Generate TypeScript declarations and write them to ``output_path``.

    Returns:
        Path of the written file

    """
    return _write_source(
        Path(output_path), generate_typescript(schema, options)
    )


def write_javascript_file(
    schema: Any,
    output_path: Path,
    options: GenerateOptions | None = None,
) -> Path:
    """Generate a JavaScript class module and write it to ``output_path``.

    Returns:
        Path of the written file

    """
    return _write_source(
        Path(output_path), generate_javascript(schema, options)
    )


def generate_both(
    schema: Any,
    output_dir: Path,
    base_name: str,
    options: GenerateOptions | None = None,
) -> tuple[Path, Path]:
    """Write ``<base_name>.ts`` and ``<base_name>.js`` into ``output_dir``.

    Args:
        schema: Schema mapping or parsed SchemaNode
        output_dir: Destination directory, created when missing
        base_name: File name stem shared by both outputs
        options: Generation options

    Returns:
        Tuple of (TypeScript path, JavaScript path)

    """
    output_dir = Path(output_dir)
    ts_path = write_typescript_file(
        schema, output_dir / f"{base_name}.ts", options
    )
    js_path = write_javascript_file(
        schema, output_dir / f"{base_name}.js", options
    )
    logger.info("Generated %s and %s", ts_path.name, js_path.name)
    return ts_path, js_path
