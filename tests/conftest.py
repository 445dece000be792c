"""
Pytest configuration and fixtures.

This file provides pytest-specific fixtures.
For model builders, see tests/fixtures/engine_fixtures.py
"""

import pytest

from talent_match.config_loader import AppConfig
from talent_match.learning import ModuleCatalog


@pytest.fixture
def app_config():
    """Default engine configuration, independent of config.yaml on disk."""
    return AppConfig()


@pytest.fixture(scope="session")
def seed_catalog():
    """The bundled learning module catalog."""
    return ModuleCatalog.default()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep config overrides from the host environment out of tests."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LEARNING_CATALOG_FILE", raising=False)
