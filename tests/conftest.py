"""
Shared pytest fixtures for shellbelt tests.

External programs are never started: a recording runner returns canned
results, and selection/prompt stubs return canned answers.
"""

import pytest
from pathlib import Path

from shellbelt.session.context import SessionContext

from fakes import RecordingRunner


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def context(tmp_path):
    return SessionContext(cwd=tmp_path, env={"HOME": str(tmp_path), "USER": "tester"})


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at an empty temp location."""
    path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("SHELLBELT_CONFIG", str(path))
    return path


@pytest.fixture
def make_repo():
    """Create a directory with a .git marker below a root."""
    def _make(root: Path, *parts: str) -> Path:
        repo = root.joinpath(*parts)
        (repo / ".git").mkdir(parents=True)
        return repo
    return _make
