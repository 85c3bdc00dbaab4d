# ============================================================================
# CLAUDE CONTEXT - OPENSEARCH FOR EO MODULE
# ============================================================================
# STATUS: Standalone Module - OpenSearch parameter registry
# PURPOSE: Query parameter descriptors for an OpenSearch geospatial search API
# EXPORTS: ParameterBuilder, ParameterDescriptor, ValueType, DateRelation,
#          basic_opensearch_parameters, geo_time_opensearch_parameters,
#          qualified_name, parameter_prefix, find_parameter, OUTPUT_CRS,
#          describe_parameters, OSEOConfig, get_oseo_config
# DEPENDENCIES: pydantic, pydantic-settings, pyproj
# SOURCE: Environment variables for paging limits
# PATTERNS: Builder, Module-level registry, Standalone Module
# ENTRY_POINTS: from opensearch_eo import basic_opensearch_parameters
# ============================================================================

"""
OpenSearch for EO - Parameter Registry

Declares the query parameters understood by an OpenSearch geospatial search
endpoint (core, Geo and Time extensions) and resolves their wire names.

Architecture:
    opensearch_eo/
    ├── config.py      # Environment-based paging configuration
    ├── parameters.py  # ParameterDescriptor, ParameterBuilder, enums
    ├── crs.py         # pyproj CRS lookup
    ├── registry.py    # Parameter catalogs and qualified names
    └── models.py      # Description document models (Pydantic)

Usage:
    from opensearch_eo import basic_opensearch_parameters, qualified_name

    for parameter in basic_opensearch_parameters(50):
        print(qualified_name(parameter, False))
"""

from .config import OSEOConfig, get_oseo_config
from .parameters import DateRelation, ParameterBuilder, ParameterDescriptor, ValueType
from .registry import (
    EO_PREFIX,
    GEO_PREFIX,
    OS_PREFIX,
    OUTPUT_CRS,
    TIME_PREFIX,
    basic_opensearch_parameters,
    find_parameter,
    geo_time_opensearch_parameters,
    parameter_prefix,
    qualified_name,
)
from .models import OpenSearchParameter, describe_parameters

__version__ = "1.0.0"
__all__ = [
    "OSEOConfig",
    "get_oseo_config",
    "DateRelation",
    "ParameterBuilder",
    "ParameterDescriptor",
    "ValueType",
    "OS_PREFIX",
    "GEO_PREFIX",
    "TIME_PREFIX",
    "EO_PREFIX",
    "OUTPUT_CRS",
    "basic_opensearch_parameters",
    "geo_time_opensearch_parameters",
    "qualified_name",
    "parameter_prefix",
    "find_parameter",
    "OpenSearchParameter",
    "describe_parameters",
]
