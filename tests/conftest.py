"""Pytest configuration and fixtures"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from github_mapper.config import Settings  # noqa: E402
from github_mapper.main import app  # noqa: E402


@pytest.fixture
def client():
    """TestClient with the lifespan hook running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def clean_env(monkeypatch):
    """Remove server-related variables so Settings sees only what a test sets."""
    for name in ("PORT", "HOST", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def make_settings():
    """Build Settings without reading a local .env file."""
    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)
    return _make
