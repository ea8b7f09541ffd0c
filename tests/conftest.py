"""
Shared fixtures for the test suite.
"""

import pytest

from cnpj_alfa.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    """HTTP test client for the FastAPI application."""
    from fastapi.testclient import TestClient

    from cnpj_alfa.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
