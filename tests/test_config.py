"""Unit tests for the OpenSearch configuration."""

import pytest
from pydantic import ValidationError

from opensearch_eo.config import OSEOConfig, get_oseo_config


class TestOSEOConfig:
    def test_defaults(self, oseo_env):
        config = OSEOConfig()
        assert config.maximum_records_per_page == 100
        assert config.records_per_page == 10

    def test_from_environment(self, oseo_env):
        oseo_env.setenv("OSEO_MAXIMUM_RECORDS_PER_PAGE", "500")
        oseo_env.setenv("OSEO_RECORDS_PER_PAGE", "20")
        config = OSEOConfig()
        assert config.maximum_records_per_page == 500
        assert config.records_per_page == 20

    def test_default_page_size_lowered_to_small_maximum(self, oseo_env):
        oseo_env.setenv("OSEO_MAXIMUM_RECORDS_PER_PAGE", "5")
        config = OSEOConfig()
        assert config.maximum_records_per_page == 5
        assert config.records_per_page == 5

    def test_explicit_page_size_above_maximum(self, oseo_env):
        oseo_env.setenv("OSEO_MAXIMUM_RECORDS_PER_PAGE", "5")
        oseo_env.setenv("OSEO_RECORDS_PER_PAGE", "6")
        with pytest.raises(ValidationError, match="cannot exceed"):
            OSEOConfig()

    def test_explicit_page_size_equal_to_maximum(self, oseo_env):
        oseo_env.setenv("OSEO_MAXIMUM_RECORDS_PER_PAGE", "5")
        oseo_env.setenv("OSEO_RECORDS_PER_PAGE", "5")
        assert OSEOConfig().records_per_page == 5

    def test_page_size_unchecked_without_maximum(self, oseo_env):
        oseo_env.setenv("OSEO_MAXIMUM_RECORDS_PER_PAGE", "0")
        oseo_env.setenv("OSEO_RECORDS_PER_PAGE", "1000")
        assert OSEOConfig().records_per_page == 1000

    def test_page_size_must_be_positive(self, oseo_env):
        oseo_env.setenv("OSEO_RECORDS_PER_PAGE", "0")
        with pytest.raises(ValidationError):
            OSEOConfig()


class TestGetOseoConfig:
    def test_singleton(self, oseo_env):
        assert get_oseo_config() is get_oseo_config()

    def test_cache_clear_reloads(self, oseo_env):
        oseo_env.setenv("OSEO_MAXIMUM_RECORDS_PER_PAGE", "7")
        assert get_oseo_config().maximum_records_per_page == 7
        oseo_env.setenv("OSEO_MAXIMUM_RECORDS_PER_PAGE", "8")
        get_oseo_config.cache_clear()
        assert get_oseo_config().maximum_records_per_page == 8
