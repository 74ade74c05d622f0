# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides app/client fixtures for each environment profile
# =============================================================================

import logging
import os
from pathlib import Path

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "Development")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

PROJECT_ROOT = Path(__file__).resolve().parent.parent


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def restore_root_log_level():
    """create_app() changes the root log level; put it back after each test."""
    level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(level)


@pytest.fixture
def make_settings():
    """Build Settings that ignore any local .env file."""
    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)
    return _make


@pytest.fixture
def make_client(make_settings):
    """Factory for a TestClient running an app built with the given settings."""
    clients = []

    def _make(**overrides) -> TestClient:
        client = TestClient(create_app(make_settings(**overrides)))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    """TestClient for the Development profile with default forecast settings."""
    return make_client(ENVIRONMENT="Development")


@pytest.fixture
def project_root() -> Path:
    """Repository root, where the Dockerfiles and compose.yaml live."""
    return PROJECT_ROOT
