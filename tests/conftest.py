"""Shared pytest fixtures"""

import pytest
from fastapi.testclient import TestClient

from main import app
from services.config_manager import CONFIG_DIR_ENV, ConfigManager


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config singleton at a fresh temporary directory."""
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()


@pytest.fixture
def client(config_dir):
    with TestClient(app) as test_client:
        yield test_client
