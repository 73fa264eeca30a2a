"""Exception classes for jayson operations.

Data validation failures are reported through ``ValidationResult`` and
never raised. The classes here cover configuration and programmer
errors: malformed schemas, missing files, unsupported inputs.
"""


class JaysonError(Exception):
    """Base exception for jayson operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the schema, file or path involved.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class SchemaError(JaysonError):
    """Raised when a schema itself is malformed."""

    error_prefix = "Invalid schema"


class SchemaNotFoundError(JaysonError):
    """Raised when a schema file does not exist."""

    error_prefix = "Schema not found"


class SchemaParseError(JaysonError):
    """Raised when a schema file is not valid JSON."""

    error_prefix = "Schema parse failed"


class DataSourceError(JaysonError):
    """Raised when document data cannot be read."""

    error_prefix = "Data source error"


class ReportFormatError(JaysonError):
    """Raised for an unknown report format."""

    error_prefix = "Unknown report format"


class ConfigError(JaysonError):
    """Raised when a configuration file is invalid."""

    error_prefix = "Configuration error"
