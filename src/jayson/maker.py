"""High-level facade tying schema loading to validation, codegen and I/O."""

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from jayson import json_io, report, transform
from jayson.codegen import (
    GenerateOptions,
    GeneratedSources,
    generate_both,
    generate_types,
    write_javascript_file,
    write_typescript_file,
)
from jayson.constants import DEFAULT_SCHEMA_DIR
from jayson.core import Validator, generate_template
from jayson.exceptions import DataSourceError
from jayson.logger import get_logger
from jayson.models import (
    SchemaInfo,
    ValidationError,
    ValidationResult,
)
from jayson.report import ReportFormat, ReportOptions
from jayson.schemas import SchemaCache, SchemaLoader, get_schema_info

logger = get_logger(__name__)


def _failure(message: str) -> ValidationResult:
    return ValidationResult(False, (ValidationError("", message),))


class JsonMaker:
    """Validate, template and generate code for schemas in one directory.

    Schemas are addressed by path, relative to ``schema_dir`` unless
    absolute, and cached after the first load.

    Usage:
        maker = JsonMaker("./json-schema")
        result = maker.validate_file("user.json", "user.schema.json")
    """

    def __init__(
        self,
        schema_dir: Path | str = DEFAULT_SCHEMA_DIR,
        cache: SchemaCache | None = None,
        validator: Validator | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            schema_dir: Directory relative schema paths refer to
            cache: Schema cache shared with other makers
            validator: Validator to use; defaults to the standard policy

        """
        self.loader = SchemaLoader(schema_dir, cache)
        self.validator = validator or Validator()

    @property
    def schema_dir(self) -> Path:
        return self.loader.schema_dir

    def load_schema(self, schema_path: Path | str) -> dict[str, Any]:
        return self.loader.load(schema_path)

    def get_schema_info(self, schema_path: Path | str) -> SchemaInfo:
        return get_schema_info(self.loader.load_node(schema_path))

    def list_schemas(self) -> list[Path]:
        return self.loader.list_schemas()

    def validate(self, data: Any, schema_path: Path | str) -> ValidationResult:
        """Validate decoded ``data`` against the schema at ``schema_path``.

        Raises:
            SchemaNotFoundError: If the schema file is missing
            SchemaParseError: If the schema file is not valid JSON
            SchemaError: If the schema is malformed

        """
        return self.validator.validate(
            data, self.loader.load_node(schema_path)
        )

    def validate_file(
        self, file_path: Path | str, schema_path: Path | str
    ) -> ValidationResult:
        """Validate a JSON file.

        An unreadable document yields an invalid result with a single
        root error instead of raising. Schema problems still raise.
        """
        path = Path(file_path)
        if not path.is_file():
            return _failure(f"File not found: {file_path}")
        try:
            data = json_io.load_json_file(path)
        except DataSourceError as e:
            logger.debug("Could not read %s: %s", path, e)
            return _failure(f"Failed to parse JSON: {e.message}")
        return self.validate(data, schema_path)

    def validate_files(
        self, file_paths: Iterable[Path | str], schema_path: Path | str
    ) -> dict[str, ValidationResult]:
        """Validate several files; results are keyed by the given path."""
        return {
            str(file_path): self.validate_file(file_path, schema_path)
            for file_path in file_paths
        }

    def read_data(self, source: json_io.DataSource) -> Any:
        return json_io.read_data(source)

    def write_json(
        self, data: Any, output_path: Path | str, **options: Any
    ) -> Path:
        return json_io.write_json(data, output_path, **options)

    def create_validated_json(
        self,
        data: Any,
        schema_path: Path | str,
        output_path: Path | str,
        **options: Any,
    ) -> ValidationResult:
        """Write ``data`` to ``output_path`` only if it validates.

        Returns:
            The validation result; nothing is written when it is invalid

        """
        result = self.validate(data, schema_path)
        if result.valid:
            json_io.write_json(data, output_path, **options)
        else:
            logger.info(
                "Not writing %s: %d validation error(s)",
                output_path,
                len(result.errors),
            )
        return result

    def extract_fields(
        self, data: Any, fields: Iterable[str]
    ) -> list[dict[str, Any]]:
        return transform.extract_fields(data, fields)

    def transform_data(
        self, data: Iterable[Any], transformer: Callable[[Any, int], Any]
    ) -> list[Any]:
        return transform.transform_data(data, transformer)

    def filter_data(
        self, data: Iterable[Any], predicate: Callable[[Any], bool]
    ) -> list[Any]:
        return transform.filter_data(data, predicate)

    def merge_json_files(
        self, file_paths: Iterable[Path | str], output_path: Path | str
    ) -> Path:
        return json_io.merge_json_files(file_paths, output_path)

    def split_json_file(
        self,
        input_path: Path | str,
        output_dir: Path | str,
        split_by: str,
        file_name_pattern: Callable[[str], str] | None = None,
    ) -> list[Path]:
        return json_io.split_json_file(
            input_path, output_dir, split_by, file_name_pattern
        )

    def generate_template(
        self, schema_path: Path | str
    ) -> dict[str, Any] | list[Any]:
        return generate_template(self.loader.load_node(schema_path))

    def generate_sources(
        self,
        schema_path: Path | str,
        options: GenerateOptions | None = None,
    ) -> GeneratedSources:
        """Return TypeScript and JavaScript sources as strings."""
        return generate_types(self.loader.load_node(schema_path), options)

    def generate_types(
        self,
        schema_path: Path | str,
        output_dir: Path | str,
        base_name: str,
        options: GenerateOptions | None = None,
    ) -> tuple[Path, Path]:
        """Write ``<base_name>.ts`` and ``<base_name>.js``."""
        return generate_both(
            self.loader.load_node(schema_path),
            Path(output_dir),
            base_name,
            options,
        )

    def generate_typescript_file(
        self,
        schema_path: Path | str,
        output_path: Path | str,
        options: GenerateOptions | None = None,
    ) -> Path:
        return write_typescript_file(
            self.loader.load_node(schema_path), Path(output_path), options
        )

    def generate_javascript_file(
        self,
        schema_path: Path | str,
        output_path: Path | str,
        options: GenerateOptions | None = None,
    ) -> Path:
        return write_javascript_file(
            self.loader.load_node(schema_path), Path(output_path), options
        )

    def format_report(
        self,
        result: ValidationResult,
        report_format: ReportFormat | str = ReportFormat.TERMINAL,
        options: ReportOptions | None = None,
    ) -> str:
        return report.format_report(result, report_format, options)

    def generate_report(
        self,
        result: ValidationResult,
        output_path: Path | str,
        report_format: ReportFormat | str = ReportFormat.TERMINAL,
        options: ReportOptions | None = None,
    ) -> Path:
        return report.write_report(result, output_path, report_format, options)

    def generate_summary_report(
        self,
        results: Mapping[str, ValidationResult],
        output_path: Path | str,
        report_format: ReportFormat | str = ReportFormat.TERMINAL,
        options: ReportOptions | None = None,
    ) -> Path:
        return report.write_summary(
            results, output_path, report_format, options
        )

    def generate_all_formats(
        self,
        result: ValidationResult,
        output_dir: Path | str,
        base_name: str,
        options: ReportOptions | None = None,
    ) -> list[Path]:
        return report.generate_all_formats(
            result, output_dir, base_name, options
        )
