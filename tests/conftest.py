"""
Shared pytest fixtures for users-api tests.
"""
import os
from unittest.mock import patch

import pytest

from users_api.core.config import reset_settings
from users_api.di.container import reset_container
from users_api.infrastructure.db.in_memory_user_repository import InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "APP_NAME": "Users API (test)",
        "HOST": "127.0.0.1",
        "PORT": "3001",
        "LOG_LEVEL": "debug",
        "CORS_ALLOW_ORIGINS": "http://a.test, http://b.test",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def user_repo():
    """Fresh in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def fresh_container():
    """Drop the global container before and after the test so each test gets an empty store."""
    reset_container()
    yield
    reset_container()
