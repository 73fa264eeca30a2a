"""Fixtures for CLI tests: a project directory and a runner bound to it."""

import orjson
import pytest

from jayson.cli import CLIRunner
from jayson.config import GlobalSettingsManager


@pytest.fixture
def project_dir(tmp_path, schema_dir, monkeypatch):
    """Project with ``schemaDir`` pointing at the shared schema fixture."""
    (tmp_path / "jayson.json").write_bytes(
        orjson.dumps({"schemaDir": "schemas", "outputDir": "dist"})
    )
    (tmp_path / "good.json").write_bytes(
        orjson.dumps({"id": 1, "user_name": "alice"})
    )
    (tmp_path / "bad.json").write_bytes(orjson.dumps({"id": 0}))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def runner(project_dir):
    return CLIRunner(
        project_dir=project_dir,
        settings_manager=GlobalSettingsManager(project_dir / "config"),
    )
