# ============================================================================
# CLAUDE CONTEXT - OPENSEARCH EO CONFIGURATION
# ============================================================================
# STATUS: Standalone Configuration - OpenSearch for EO
# PURPOSE: Paging limits consumed by the parameter registry
# EXPORTS: OSEOConfig, get_oseo_config
# INTERFACES: Pydantic BaseSettings
# PYDANTIC_MODELS: OSEOConfig
# DEPENDENCIES: pydantic, pydantic-settings
# SOURCE: Environment variables (OSEO_ prefix), optional .env file
# VALIDATION: Pydantic v2 validation
# PATTERNS: Settings Pattern, Singleton via cached function
# ENTRY_POINTS: from opensearch_eo.config import get_oseo_config
# ============================================================================

"""
OpenSearch for EO Configuration

Environment Variables:
    Optional:
    - OSEO_MAXIMUM_RECORDS_PER_PAGE: Upper bound of the "count" parameter
      (default: 100). Zero or a negative value removes the upper bound.
    - OSEO_RECORDS_PER_PAGE: Page size used when a query has no "count"
      (default: 10, lowered to the maximum when that is smaller). An explicit
      value above OSEO_MAXIMUM_RECORDS_PER_PAGE is rejected.

Usage:
    from opensearch_eo.config import get_oseo_config

    limit = get_oseo_config().maximum_records_per_page
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.CONFIG, "OSEOConfig")


class OSEOConfig(BaseSettings):
    """
    OpenSearch paging configuration loaded from environment variables.

    Attributes:
        maximum_records_per_page: Largest accepted "count"; <= 0 means unlimited
        records_per_page: Default page size
    """

    model_config = SettingsConfigDict(
        env_prefix="OSEO_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    maximum_records_per_page: int = Field(
        default=100,
        description="Maximum records per page, zero or negative for no limit"
    )
    records_per_page: int = Field(
        default=10,
        ge=1,
        validate_default=True,
        description="Default number of records per page"
    )

    @model_validator(mode="after")
    def validate_records_per_page(self) -> "OSEOConfig":
        """Keep the default page size within the maximum."""
        maximum = self.maximum_records_per_page
        if maximum <= 0 or self.records_per_page <= maximum:
            return self

        if "records_per_page" in self.model_fields_set:
            raise ValueError(
                f"OSEO_RECORDS_PER_PAGE ({self.records_per_page}) cannot exceed "
                f"OSEO_MAXIMUM_RECORDS_PER_PAGE ({maximum})"
            )

        self.records_per_page = maximum
        return self


@lru_cache(maxsize=1)
def get_oseo_config() -> OSEOConfig:
    """
    Get singleton OpenSearch configuration instance.

    Returns:
        OSEOConfig: Validated configuration object

    Raises:
        ValidationError: If an environment variable holds an invalid value
    """
    config = OSEOConfig()
    logger.info(
        "OpenSearch configuration loaded",
        extra={'custom_dimensions': {
            'maximum_records_per_page': config.maximum_records_per_page,
            'records_per_page': config.records_per_page
        }}
    )
    return config
