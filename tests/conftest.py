"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from traversal_guard.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_request():
    """Build a bare request carrying the given route parameters (and optionally the raw URL path)."""

    def _make(path_params: dict, raw_path: bytes | None = None) -> Request:
        scope = {"type": "http", "path_params": path_params}
        if raw_path is not None:
            scope["raw_path"] = raw_path
        return Request(scope)

    return _make
