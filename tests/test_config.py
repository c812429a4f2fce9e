"""Tests for environment-based settings."""

from traversal_guard.config import Settings


def test_defaults():
    """Defaults serve the demo on 127.0.0.1:3000 with rejection logging on."""
    s = Settings(_env_file=None)
    assert s.host == "127.0.0.1"
    assert s.port == 3000
    assert s.log_rejected_paths is True
    assert s.log_path_max_chars == 200


def test_env_prefix(monkeypatch):
    """Settings are read from TRAVERSAL_GUARD_* variables."""
    monkeypatch.setenv("TRAVERSAL_GUARD_PORT", "8080")
    monkeypatch.setenv("TRAVERSAL_GUARD_LOG_REJECTED_PATHS", "false")
    s = Settings(_env_file=None)
    assert s.port == 8080
    assert s.log_rejected_paths is False
