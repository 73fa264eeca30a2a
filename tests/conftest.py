"""Pytest configuration and fixtures for jayson tests."""

import logging
import os
import tempfile

import orjson
import pytest

# Keep test runs out of the user's log directory
os.environ.setdefault(
    "JAYSON_LOG_DIR", tempfile.mkdtemp(prefix="jayson-test-logs-")
)
os.environ.setdefault("JAYSON_DISABLE_FILE_LOG", "1")


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all jayson loggers during tests.

    This allows pytest's caplog fixture to capture logs from loggers
    created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name == "jayson" or name.startswith("jayson."):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture
def user_schema() -> dict:
    """Object schema used across validator, template and codegen tests."""
    return {
        "title": "User",
        "description": "A registered user",
        "type": "object",
        "properties": {
            "id": {"type": "integer", "minimum": 1},
            "user_name": {"type": "string", "minLength": 3},
            "email": {"type": "string", "pattern": "^[^@]+@[^@]+$"},
            "role": {"type": "string", "enum": ["admin", "user"]},
            "active": {"type": "boolean", "default": True},
            "tags": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["id", "user_name"],
    }


@pytest.fixture
def schema_dir(tmp_path, user_schema):
    """Directory holding ``user.schema.json``."""
    directory = tmp_path / "schemas"
    directory.mkdir()
    (directory / "user.schema.json").write_bytes(orjson.dumps(user_schema))
    return directory
