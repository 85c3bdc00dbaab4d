# ============================================================================
# CLAUDE CONTEXT - OPENSEARCH PARAMETER REGISTRY
# ============================================================================
# STATUS: Standalone Service - OpenSearch for EO
# PURPOSE: Canonical OpenSearch parameter catalogs and qualified-name resolution
# EXPORTS: OS_PREFIX, GEO_PREFIX, TIME_PREFIX, EO_PREFIX, OUTPUT_CRS, OUTPUT_CRS_CODE,
#          BASIC_OPENSEARCH, GEO_TIME_OPENSEARCH, basic_opensearch_parameters,
#          geo_time_opensearch_parameters, qualified_name, parameter_prefix, find_parameter
# DEPENDENCIES: pyproj (through opensearch_eo.crs)
# SOURCE: OpenSearch 1.1 core, OpenSearch Geo and Time extensions
# SCOPE: Read-only catalogs, built once at import
# PATTERNS: Module-level immutable registry, accessor functions
# ENTRY_POINTS: from opensearch_eo.registry import basic_opensearch_parameters
# ============================================================================

"""
OpenSearch Parameter Registry

Two fixed catalogs are declared here:

- BASIC_OPENSEARCH: core OpenSearch parameters (searchTerms, startIndex).
  The "count" parameter is added per call by basic_opensearch_parameters()
  because its upper bound comes from the paging configuration.
- GEO_TIME_OPENSEARCH: the Geo and Time extension parameters, in the order
  they are listed in description documents.

Qualified names:
    Parameters in the "os" namespace are the native OpenSearch vocabulary and
    may be rendered without prefix; extension parameters ("geo", "time") are
    always rendered as "prefix:key".

    >>> qualified_name(GEO_LAT, qualify_native_prefix=False)
    'geo:lat'
    >>> qualified_name(SEARCH_TERMS, qualify_native_prefix=False)
    'searchTerms'
    >>> qualified_name(SEARCH_TERMS)
    'os:searchTerms'
"""

from typing import Iterable, List, Optional, Tuple

from .config import get_oseo_config
from .crs import decode_crs
from .parameters import (
    ParameterBuilder,
    ParameterDescriptor,
    ValueType,
)
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "registry")

# ============================================================================
# Namespaces
# ============================================================================

OS_PREFIX = "os"
GEO_PREFIX = "geo"
TIME_PREFIX = "time"
EO_PREFIX = "eo"

# ============================================================================
# Fixed parameters
# ============================================================================

SEARCH_TERMS = ParameterBuilder("searchTerms", ValueType.STRING).prefix(OS_PREFIX).build()

START_INDEX = ParameterBuilder("startIndex", ValueType.INTEGER).prefix(OS_PREFIX).build()

GEO_UID = ParameterBuilder("uid", ValueType.STRING).prefix(GEO_PREFIX).build()

GEO_BOX = ParameterBuilder("box", ValueType.ENVELOPE).prefix(GEO_PREFIX).build()

GEO_NAME = ParameterBuilder("name", ValueType.STRING).prefix(GEO_PREFIX).build()

GEO_LAT = (
    ParameterBuilder("lat", ValueType.FLOAT)
    .prefix(GEO_PREFIX)
    .minimum_inclusive(-90)
    .maximum_inclusive(90)
    .build()
)

GEO_LON = (
    ParameterBuilder("lon", ValueType.FLOAT)
    .prefix(GEO_PREFIX)
    .minimum_inclusive(-180)
    .maximum_inclusive(180)
    .build()
)

GEO_RADIUS = ParameterBuilder("radius", ValueType.FLOAT).prefix(GEO_PREFIX).minimum_inclusive(0).build()

TIME_START = ParameterBuilder("start", ValueType.DATE).prefix(TIME_PREFIX).build()

TIME_END = ParameterBuilder("end", ValueType.DATE).prefix(TIME_PREFIX).build()

TIME_RELATION = ParameterBuilder("relation", ValueType.DATE_RELATION).prefix(TIME_PREFIX).build()

COUNT_KEY = "count"

BASIC_OPENSEARCH: Tuple[ParameterDescriptor, ...] = (SEARCH_TERMS, START_INDEX)

GEO_TIME_OPENSEARCH: Tuple[ParameterDescriptor, ...] = (
    GEO_UID,
    GEO_BOX,
    GEO_NAME,
    GEO_LAT,
    GEO_LON,
    GEO_RADIUS,
    TIME_START,
    TIME_END,
    TIME_RELATION,
)

logger.debug(
    "Parameter catalogs initialized",
    extra={'custom_dimensions': {
        'basic': [p.key for p in BASIC_OPENSEARCH],
        'geo_time': [p.key for p in GEO_TIME_OPENSEARCH]
    }}
)

# ============================================================================
# Output CRS
# ============================================================================

OUTPUT_CRS_CODE = "urn:ogc:def:crs:EPSG:4326"


def _decode_output_crs():
    try:
        return decode_crs(OUTPUT_CRS_CODE)
    except ValueError as e:
        logger.critical(f"Cannot decode output CRS {OUTPUT_CRS_CODE}")
        raise RuntimeError("Unexpected error decoding WGS84 in lat/lon order") from e


# WGS84 in EPSG authority axis order: latitude first, then longitude.
# Not longitude/latitude; callers needing x/y order must swap axes.
OUTPUT_CRS = _decode_output_crs()

# ============================================================================
# Accessors
# ============================================================================

def basic_opensearch_parameters(max_records_per_page: Optional[int] = None) -> List[ParameterDescriptor]:
    """
    Get the basic OpenSearch parameters, including "count".

    Args:
        max_records_per_page: Upper bound for "count". Zero or negative means
            no upper bound. When None, the value is read from the OSEO
            configuration.

    Returns:
        New list: searchTerms, startIndex, count
    """
    if max_records_per_page is None:
        max_records_per_page = get_oseo_config().maximum_records_per_page

    count = ParameterBuilder(COUNT_KEY, ValueType.INTEGER).prefix(OS_PREFIX)
    count.minimum_inclusive(0)
    if max_records_per_page > 0:
        count.maximum_inclusive(max_records_per_page)

    result = list(BASIC_OPENSEARCH)
    result.append(count.build())
    return result


def geo_time_opensearch_parameters() -> Tuple[ParameterDescriptor, ...]:
    """Get the OGC Geo and Time extension parameters."""
    return GEO_TIME_OPENSEARCH


def parameter_prefix(parameter: ParameterDescriptor) -> Optional[str]:
    """Return the namespace prefix of a parameter, if any."""
    return parameter.prefix


def qualified_name(parameter: ParameterDescriptor, qualify_native_prefix: bool = True) -> str:
    """
    Get the wire name of a parameter.

    Args:
        parameter: Parameter descriptor
        qualify_native_prefix: If False, parameters in the "os" namespace are
            returned unqualified. Other namespaces are always qualified.

    Returns:
        "prefix:key", or just the key for unprefixed parameters (and native
        ones when qualify_native_prefix is False)
    """
    prefix = parameter_prefix(parameter)
    if prefix is not None and (prefix != OS_PREFIX or qualify_native_prefix):
        return f"{prefix}:{parameter.key}"
    return parameter.key


def find_parameter(
    name: str,
    parameters: Iterable[ParameterDescriptor]
) -> Optional[ParameterDescriptor]:
    """
    Resolve a query string key to its parameter descriptor.

    Both "prefix:key" and the unqualified form of native parameters are
    matched, so "searchTerms" and "os:searchTerms" resolve to the same
    descriptor while "lat" does not resolve to "geo:lat".

    Args:
        name: Parameter name as found in the request
        parameters: Candidate descriptors

    Returns:
        Matching descriptor, or None if the name is unknown
    """
    for parameter in parameters:
        if name == qualified_name(parameter, True) or name == qualified_name(parameter, False):
            return parameter
    return None
