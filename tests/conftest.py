"""Shared fixtures: every test gets its own agents.json via AGENTS_FILE."""

import json
import sys
from pathlib import Path

import pytest

# Add repo root to path
repo_root = Path(__file__).resolve().parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


SAMPLE_AGENTS = [
    {"id": "a1", "name": "Foo", "approved": True},
    {"id": "a2", "name": "Bar", "approved": False},
]


@pytest.fixture
def store_file(tmp_path, monkeypatch):
    """Path of a not-yet-created store file, wired in through AGENTS_FILE."""
    path = tmp_path / "agents.json"
    monkeypatch.setenv("AGENTS_FILE", str(path))
    return path


@pytest.fixture
def write_store(store_file):
    """Write raw text (or a JSON-serializable value) into the store file."""
    def _write(content):
        if not isinstance(content, str):
            content = json.dumps(content, indent=2)
        store_file.write_text(content, encoding="utf-8")
        return store_file
    return _write


@pytest.fixture
def sample_store(write_store):
    return write_store(SAMPLE_AGENTS)
