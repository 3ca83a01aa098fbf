"""
Shared pytest fixtures for all test modules.

ROBOTS_* environment variables are cleared for every test so a developer's
shell or .env cannot leak into the configuration under test.
"""

from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient

from fastapi_robots.config import RobotsConfig
from fastapi_robots.main import create_app

CUSTOM_ROBOTS = "User-agent: Googlebot\nDisallow: /admin/\n"


# ---------------------------------------------------------------------------
# Core infrastructure fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_robots_env(monkeypatch):
    for name in ("ROBOTS_FILEPATH", "ROBOTS_ENCODING", "ROBOTS_MAX_AGE", "ROBOTS_INCLUDE_IN_SCHEMA"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_client():
    """
    Factory for a TestClient whose app lifespan has already installed
    /robots.txt from the given RobotsConfig.
    """

    @contextmanager
    def _make(config: RobotsConfig = None):
        app = create_app(config)
        with TestClient(app) as c:
            yield c

    return _make


@pytest.fixture
def client(make_client):
    """TestClient for an app running with the default configuration."""
    with make_client() as c:
        yield c


# ---------------------------------------------------------------------------
# Shared test-data helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def robots_file(tmp_path):
    """Write CUSTOM_ROBOTS to a temp file and return the path."""
    p = tmp_path / "robots.txt"
    p.write_text(CUSTOM_ROBOTS, encoding="utf-8")
    return str(p)
