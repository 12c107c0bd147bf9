"""
Shared pytest fixtures for campus connect tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from tests.fakes import (
    InMemoryClubRepository,
    InMemoryEventRepository,
    InMemoryListingRepository,
    InMemoryPostRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_campus_connect",
        "APP_ENV": "development",
        "CLOUDINARY_CLOUD_NAME": "demo-cloud",
        "CLOUDINARY_API_KEY": "1234567890",
        "CLOUDINARY_API_SECRET": "test_secret",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.environment = "development"
    mock.is_development = True
    mock.log_level = "INFO"
    mock.cors_origins = ["*"]
    mock.cloudinary_cloud_name = "demo-cloud"
    mock.cloudinary_api_key = "1234567890"
    mock.cloudinary_api_secret = "test_secret"
    mock.upload_folder = "campus_connect"
    mock.upload_transformation = "w_800,q_auto,f_auto"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("campus_connect.core.config.get_settings", return_value=mock), patch(
        "campus_connect.api.v1.error_handlers.get_settings", return_value=mock
    ), patch("campus_connect.api.v1.system_controller.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def event_repo():
    return InMemoryEventRepository()


@pytest.fixture
def club_repo():
    return InMemoryClubRepository()


@pytest.fixture
def listing_repo():
    return InMemoryListingRepository()


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()
