"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from file_crud.filesystem import RealFileSystem
from file_crud.operations import FileOps


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Path of a not-yet-created target directory."""
    return tmp_path / "testDir"


@pytest.fixture
def existing_dir(target_dir: Path) -> Path:
    """Create the target directory."""
    target_dir.mkdir(parents=True)
    return target_dir


@pytest.fixture
def ops() -> FileOps:
    """FileOps backed by the real filesystem."""
    return FileOps(RealFileSystem())


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.is_dir.return_value = False
    fs.is_file.return_value = False
    return fs


@pytest.fixture
def mock_ops(mock_filesystem: MagicMock) -> FileOps:
    """FileOps backed by the mock filesystem."""
    return FileOps(mock_filesystem)


# ============================================================================
# Sample Config Fixtures
# ============================================================================


@pytest.fixture
def sample_yaml_config() -> str:
    """Sample YAML configuration."""
    return """operation: renameFile
directory: /srv/data
fileName: notes.txt
newFileName: archive.txt
"""


@pytest.fixture
def sample_json_config() -> str:
    """Sample JSON configuration."""
    return """{
  "operation": "writeFileContent",
  "directory": "/srv/data",
  "fileName": "notes.txt",
  "content": "hi"
}
"""
