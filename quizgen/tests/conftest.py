"""
This module provides test fixtures for the backend tests.
"""

import pytest

from quizgen import backend as backend_module
from quizgen.session_store import SessionStore


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up mock Gemini configuration and a fresh session store for every test"""
    monkeypatch.setenv("GEMINI_API_KEY", "mock_api_key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.0-flash")
    monkeypatch.setenv("GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta")

    # Fresh in-memory state per test
    monkeypatch.setattr(backend_module, "session_store", SessionStore())
    monkeypatch.setattr(backend_module, "_model_client", None)

    yield

    backend_module.app.dependency_overrides.clear()


@pytest.fixture
def session_store():
    return backend_module.session_store
