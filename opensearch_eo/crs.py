# ============================================================================
# CLAUDE CONTEXT - CRS LOOKUP
# ============================================================================
# STATUS: Adapter - pyproj integration
# PURPOSE: Decode OGC/EPSG CRS identifiers into pyproj CRS objects
# EXPORTS: decode_crs, parse_crs_code
# DEPENDENCIES: pyproj
# SCOPE: Lookup by code only - no coordinate transformation
# ENTRY_POINTS: from opensearch_eo.crs import decode_crs
# ============================================================================

"""
CRS Lookup

Thin adapter over pyproj that understands the identifier spellings used in
OGC service documents:

    EPSG:4326
    urn:ogc:def:crs:EPSG:4326
    urn:ogc:def:crs:EPSG::4326
    urn:ogc:def:crs:EPSG:9.6:4326
    http://www.opengis.net/def/crs/EPSG/0/4326

The returned CRS keeps the axis order defined by the authority, so
EPSG:4326 is latitude/longitude.
"""

import re
from typing import Optional, Tuple

from pyproj import CRS
from pyproj.exceptions import CRSError

from util_logger import LoggerFactory, ComponentType, log_exceptions

logger = LoggerFactory.create_logger(ComponentType.ADAPTER, "crs")

_CODE_PATTERNS = (
    re.compile(r"^(?P<authority>[A-Za-z]+):(?P<code>\w+)$"),
    re.compile(r"^urn:ogc:def:crs:(?P<authority>[A-Za-z]+):(?:[^:]*:)?(?P<code>\w+)$", re.IGNORECASE),
    re.compile(r"^https?://www\.opengis\.net/def/crs/(?P<authority>[A-Za-z]+)/[^/]+/(?P<code>\w+)$", re.IGNORECASE),
)


def parse_crs_code(code: str) -> Optional[Tuple[str, str]]:
    """
    Split a CRS identifier into (authority, code).

    Args:
        code: CRS identifier in one of the supported spellings

    Returns:
        Tuple like ("EPSG", "4326"), or None if the identifier is not recognized
    """
    candidate = code.strip()
    for pattern in _CODE_PATTERNS:
        match = pattern.match(candidate)
        if match:
            return match.group("authority").upper(), match.group("code")
    return None


@log_exceptions(logger=logger)
def decode_crs(code: str) -> CRS:
    """
    Look up a coordinate reference system by identifier.

    Args:
        code: CRS identifier (see module docstring for accepted spellings)

    Returns:
        pyproj CRS in authority axis order

    Raises:
        ValueError: If the identifier cannot be parsed or is unknown to PROJ
    """
    parsed = parse_crs_code(code)
    try:
        if parsed:
            authority, number = parsed
            crs = CRS.from_authority(authority, number)
        else:
            crs = CRS.from_user_input(code)
    except CRSError as e:
        raise ValueError(f"Unable to decode CRS '{code}': {e}") from e

    logger.info(f"Decoded CRS {code} as {crs.name}")
    return crs
