"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


# Test environment overriding every value a developer .env might set
TEST_ENV = {
    "APP_NAME": "FavoritesTracker",
    "ENVIRONMENT": "test",
    "DEBUG": "false",
    "LOG_LEVEL": "DEBUG",
    "LOG_FORMAT": "text",
    "SUPABASE_URL": "https://test-project.supabase.co",
    "SUPABASE_ANON_KEY": "test-anon-key",
    "SUPABASE_SERVICE_ROLE_KEY": "test-service-role-key",
    "SUPABASE_LOCAL_URL": "http://127.0.0.1:54321",
    "SUPABASE_STORAGE_BUCKET": "favorites-images",
    "FREEZE_CONTAINER_ON_STARTUP": "false",
}


# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value

from favorites_tracker.shared.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset environment and the cached settings before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("LOG_FILE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings built from the test environment."""
    return Settings()
