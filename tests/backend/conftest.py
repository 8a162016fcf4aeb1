import os
import sys
from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from backend.app.main import create_app  # noqa: E402
from rivix_core.config import Settings  # noqa: E402


def _settings(**overrides) -> Settings:
    values = {
        "env": "development",
        "debug": False,
        "base_url": "https://rivix.test",
        "rate_limit_sweep_enabled": False,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def make_settings():
    """Factory for isolated settings (sweep scheduler off unless asked for)."""
    return _settings


@pytest.fixture
def settings() -> Settings:
    return _settings()


@pytest.fixture
def app(settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
