"""Shared fixtures for license-classifier tests."""
import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Write a dependency manifest to a temporary JSON file."""

    def _write(records: Any, name: str = "dependencies.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write
