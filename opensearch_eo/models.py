# ============================================================================
# CLAUDE CONTEXT - OPENSEARCH DESCRIPTION MODELS
# ============================================================================
# STATUS: Standalone Models - OpenSearch for EO
# PURPOSE: Parameter extension entries of OpenSearch description documents
# EXPORTS: OpenSearchParameter, template_token, describe_parameter, describe_parameters
# INTERFACES: Pydantic BaseModel
# PYDANTIC_MODELS: OpenSearchParameter
# DEPENDENCIES: pydantic, typing
# SOURCE: OpenSearch Parameter extension 1.0
# PATTERNS: Data Transfer Objects (DTOs)
# ENTRY_POINTS: from opensearch_eo.models import describe_parameters
# ============================================================================

"""
OpenSearch Description Models

A description document lists each supported query parameter with its name,
the URL template token it binds to and, when bounded, its inclusive range:

    <parameters:Parameter name="lat" value="{geo:lat?}" minInclusive="-90" maxInclusive="90"/>

References:
- OpenSearch Parameter extension: http://www.opensearch.org/Specifications/OpenSearch/Extensions/Parameter/1.0
"""

from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from .parameters import ParameterDescriptor
from .registry import qualified_name


class OpenSearchParameter(BaseModel):
    """
    One <parameters:Parameter> entry of a description document.
    """
    name: str = Field(
        description="Parameter name as used in the query string"
    )
    value: str = Field(
        description="URL template token, e.g. {geo:box?}"
    )
    minInclusive: Optional[Union[int, float]] = Field(
        default=None,
        description="Lowest accepted value"
    )
    maxInclusive: Optional[Union[int, float]] = Field(
        default=None,
        description="Highest accepted value"
    )


def template_token(parameter: ParameterDescriptor) -> str:
    """
    Build the URL template token of a parameter.

    Native OpenSearch parameters are unqualified, optional ones get a
    trailing "?".

    Returns:
        Token such as "{searchTerms?}" or "{geo:box?}"
    """
    marker = "" if parameter.required else "?"
    return "{" + qualified_name(parameter, False) + marker + "}"


def describe_parameter(parameter: ParameterDescriptor) -> OpenSearchParameter:
    return OpenSearchParameter(
        name=parameter.key,
        value=template_token(parameter),
        minInclusive=parameter.min_inclusive,
        maxInclusive=parameter.max_inclusive,
    )


def describe_parameters(parameters: Iterable[ParameterDescriptor]) -> List[OpenSearchParameter]:
    """Describe parameters for a description document, preserving their order."""
    return [describe_parameter(p) for p in parameters]
