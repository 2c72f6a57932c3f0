"""Pytest configuration and shared fixtures for urlbat tests."""

import logging
import sys
from pathlib import Path

import pytest
import structlog


sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from urlbat.config import get_settings


# ==================== Logging Fixtures ====================


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults and the root logger after every test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root.handlers[:] = handlers
    root.setLevel(level)


# ==================== Settings Fixtures ====================


@pytest.fixture
def clean_settings_cache(monkeypatch):
    """Clear cached settings and URLBAT_* environment overrides."""
    for name in ("URLBAT_CONFIG", "URLBAT_ENVIRONMENT", "URLBAT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings_dir(tmp_path, clean_settings_cache) -> Path:
    """Create a settings directory with a base config file."""
    directory = tmp_path / "settings"
    directory.mkdir()
    (directory / "config.yaml").write_text(
        "environment: development\n"
        "log_level: WARNING\n"
        "builder:\n"
        "  base_url: https://api.example.com/v1\n"
        "  base_params:\n"
        "    format: json\n"
    )
    return directory


# ==================== Parameter Fixtures ====================


@pytest.fixture
def complex_params() -> dict:
    """Parameters for a nested resource URL with pagination."""
    return {
        "userId": 123,
        "postId": 987,
        "authorId": 456,
        "limit": 10,
        "offset": 120,
    }
