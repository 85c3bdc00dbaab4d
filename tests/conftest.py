"""Pytest configuration and fixtures for the OpenSearch parameter registry tests."""

import pytest

from opensearch_eo.config import get_oseo_config


@pytest.fixture
def oseo_env(monkeypatch):
    """Isolate OSEO_* environment variables and the cached configuration."""
    monkeypatch.delenv("OSEO_MAXIMUM_RECORDS_PER_PAGE", raising=False)
    monkeypatch.delenv("OSEO_RECORDS_PER_PAGE", raising=False)
    get_oseo_config.cache_clear()
    yield monkeypatch
    get_oseo_config.cache_clear()
