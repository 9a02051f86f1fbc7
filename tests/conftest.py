"""Shared pytest fixtures and configuration."""

import json

import pytest

# Fixed "now" used across tests: 2026-01-01T00:00:00Z
NOW_MS = 1_767_225_600_000


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point HOME at a temporary directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def sessions_file(fake_home):
    """Path of the registry file under the fake HOME (not created)."""
    return fake_home / ".openclaw" / "agents" / "main" / "sessions" / "sessions.json"


@pytest.fixture
def write_registry(sessions_file):
    """Write a registry file; accepts a dict (dumped as JSON) or raw text."""

    def _write(content):
        sessions_file.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(content, str):
            content = json.dumps(content)
        sessions_file.write_text(content, encoding="utf-8")
        return sessions_file

    return _write
