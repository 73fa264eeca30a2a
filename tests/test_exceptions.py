"""Tests for the exception hierarchy."""

import pytest

from jayson.exceptions import (
    ConfigError,
    DataSourceError,
    JaysonError,
    ReportFormatError,
    SchemaError,
    SchemaNotFoundError,
    SchemaParseError,
)


class TestJaysonError:
    def test_message_without_target(self):
        error = JaysonError("something broke")

        assert str(error) == "Operation failed: something broke"
        assert error.message == "something broke"
        assert error.target is None

    def test_message_with_target(self):
        error = SchemaNotFoundError("no such file", target="user.schema.json")

        assert str(error) == (
            "Schema not found for 'user.schema.json': no such file"
        )

    @pytest.mark.parametrize(
        ("cls", "prefix"),
        [
            (SchemaError, "Invalid schema"),
            (SchemaParseError, "Schema parse failed"),
            (DataSourceError, "Data source error"),
            (ReportFormatError, "Unknown report format"),
            (ConfigError, "Configuration error"),
        ],
    )
    def test_subclass_prefixes(self, cls, prefix):
        error = cls("details")

        assert isinstance(error, JaysonError)
        assert str(error) == f"{prefix}: details"
