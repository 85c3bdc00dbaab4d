# ============================================================================
# CLAUDE CONTEXT - OPENSEARCH PARAMETER DESCRIPTORS
# ============================================================================
# STATUS: Standalone Schema - OpenSearch for EO
# PURPOSE: Immutable query parameter descriptors and their fluent builder
# EXPORTS: DateRelation, ValueType, ParameterDescriptor, ParameterBuilder,
#          PARAM_PREFIX, MIN_INCLUSIVE, MAX_INCLUSIVE
# INTERFACES: Frozen dataclass, Enum
# DEPENDENCIES: dataclasses, enum, math, typing
# SCOPE: Descriptor definition only - no request parsing
# VALIDATION: ParameterDescriptor rejects malformed definitions at construction
# PATTERNS: Value Object, Builder
# ENTRY_POINTS: from opensearch_eo.parameters import ParameterBuilder
# ============================================================================

"""
OpenSearch Parameter Descriptors

A ParameterDescriptor describes one OpenSearch query parameter: its key, the
type of value it carries, its namespace prefix and, for numeric parameters,
its inclusive validity range.

Descriptors are built once through ParameterBuilder and never change:

    lat = (
        ParameterBuilder("lat", ValueType.FLOAT)
        .prefix("geo")
        .minimum_inclusive(-90)
        .maximum_inclusive(90)
        .build()
    )
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.FACTORY, "ParameterBuilder")

Number = Union[int, float]

# Metadata keys used when a descriptor is rendered as an out-of-band mapping
PARAM_PREFIX = "parameterPrefix"
MIN_INCLUSIVE = "minInclusive"
MAX_INCLUSIVE = "maxInclusive"


class DateRelation(Enum):
    """
    Possible relationships between the time validity of the data and the
    time range of the query.
    """
    INTERSECTS = "intersects"
    CONTAINS = "contains"
    DURING = "during"
    DISJOINT = "disjoint"
    EQUALS = "equals"


class ValueType(Enum):
    """Semantic type of the value carried by a parameter."""
    DATE = "date"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    DATE_RELATION = "dateRelation"
    ENVELOPE = "envelope"

    @property
    def is_numeric(self) -> bool:
        return self in (ValueType.INTEGER, ValueType.FLOAT)


@dataclass(frozen=True)
class ParameterDescriptor:
    """
    Immutable description of one OpenSearch query parameter.

    Attributes:
        key: Parameter name, unique within its prefix namespace
        value_type: Semantic type of the parameter value
        prefix: Namespace qualifier ("os", "geo", "time", ...) or None
        min_inclusive: Lowest accepted value (numeric types only)
        max_inclusive: Highest accepted value (numeric types only)
        required: Whether the parameter must appear in a query
    """
    key: str
    value_type: ValueType
    prefix: Optional[str] = None
    min_inclusive: Optional[Number] = None
    max_inclusive: Optional[Number] = None
    required: bool = False

    def __post_init__(self):
        if not self.key:
            raise ValueError("Parameter key must not be empty")

        if self.bounds is not None and not self.value_type.is_numeric:
            raise ValueError(
                f"Parameter '{self.key}' has type {self.value_type.value}, "
                f"bounds are only allowed on numeric parameters"
            )

        for bound in (self.min_inclusive, self.max_inclusive):
            if bound is not None and math.isnan(bound):
                raise ValueError(f"Parameter '{self.key}' bounds must not be NaN")

        if (
            self.min_inclusive is not None
            and self.max_inclusive is not None
            and self.min_inclusive > self.max_inclusive
        ):
            raise ValueError(
                f"Parameter '{self.key}' minimum {self.min_inclusive} "
                f"is greater than maximum {self.max_inclusive}"
            )

    @property
    def bounds(self) -> Optional[Tuple[Optional[Number], Optional[Number]]]:
        """(min_inclusive, max_inclusive), or None when the parameter is unbounded."""
        if self.min_inclusive is None and self.max_inclusive is None:
            return None
        return (self.min_inclusive, self.max_inclusive)

    @property
    def metadata(self) -> Dict[str, Any]:
        """
        Prefix and bounds as a string-keyed mapping.

        Only the entries that are set are included, so an unprefixed and
        unbounded parameter yields an empty dict.
        """
        result: Dict[str, Any] = {}
        if self.prefix is not None:
            result[PARAM_PREFIX] = self.prefix
        if self.min_inclusive is not None:
            result[MIN_INCLUSIVE] = self.min_inclusive
        if self.max_inclusive is not None:
            result[MAX_INCLUSIVE] = self.max_inclusive
        return result

    def accepts(self, value: Number) -> bool:
        """
        Check a numeric value against the inclusive bounds.

        Args:
            value: Candidate value, already converted to a number

        Returns:
            True if the value lies within the bounds (always True when unbounded)
        """
        if self.min_inclusive is not None and value < self.min_inclusive:
            return False
        if self.max_inclusive is not None and value > self.max_inclusive:
            return False
        return True


class ParameterBuilder:
    """
    Fluent builder for ParameterDescriptor.

    Key and value type are fixed at creation; prefix, bounds and the required
    flag are optional and may be set in any order. A builder is meant to be
    used for a single descriptor.
    """

    def __init__(self, key: str, value_type: ValueType):
        self._key = key
        self._value_type = value_type
        self._prefix: Optional[str] = None
        self._min_inclusive: Optional[Number] = None
        self._max_inclusive: Optional[Number] = None
        self._required = False

    @classmethod
    def create(cls, key: str, value_type: ValueType) -> "ParameterBuilder":
        return cls(key, value_type)

    def prefix(self, prefix: str) -> "ParameterBuilder":
        self._prefix = prefix
        return self

    def minimum_inclusive(self, value: Number) -> "ParameterBuilder":
        self._min_inclusive = value
        return self

    def maximum_inclusive(self, value: Number) -> "ParameterBuilder":
        self._max_inclusive = value
        return self

    def required(self, required: bool = True) -> "ParameterBuilder":
        self._required = required
        return self

    def build(self) -> ParameterDescriptor:
        """
        Create the descriptor.

        Returns:
            ParameterDescriptor with the accumulated settings

        Raises:
            ValueError: If the key is empty, if bounds are set on a non-numeric
                parameter, if a bound is NaN, or if the minimum is greater than
                the maximum
        """
        descriptor = ParameterDescriptor(
            key=self._key,
            value_type=self._value_type,
            prefix=self._prefix,
            min_inclusive=self._min_inclusive,
            max_inclusive=self._max_inclusive,
            required=self._required,
        )
        logger.debug(f"Built parameter descriptor {descriptor}")
        return descriptor
