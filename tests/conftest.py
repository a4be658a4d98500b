"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SEED_DEMO_DATA", "false")


@pytest.fixture
def test_settings() -> Generator[Any, None, None]:
    """Provide fresh test settings with demo seeding off.

    Yields:
        Settings: Test configuration settings.
    """
    from src.core.config import Settings, get_settings

    get_settings.cache_clear()
    yield Settings(seed_demo_data=False)
    get_settings.cache_clear()


@pytest.fixture
def container(test_settings: Any) -> Any:
    """Provide an isolated service container with empty stores."""
    from src.core.container import build_container

    return build_container(test_settings)


@pytest.fixture
def client(test_settings: Any, container: Any) -> Generator[TestClient, None, None]:
    """Provide a test client bound to the isolated container.

    Yields:
        TestClient: FastAPI test client.
    """
    from src.main import create_app

    app = create_app(settings=test_settings, container=container)
    with TestClient(app) as test_client:
        yield test_client
