"""Unit tests for description document parameter models."""

from opensearch_eo.models import describe_parameters, template_token
from opensearch_eo.parameters import ParameterBuilder, ValueType
from opensearch_eo.registry import (
    GEO_BOX,
    GEO_LAT,
    SEARCH_TERMS,
    basic_opensearch_parameters,
    geo_time_opensearch_parameters,
)


class TestTemplateToken:
    def test_native_unqualified(self):
        assert template_token(SEARCH_TERMS) == "{searchTerms?}"

    def test_extension_qualified(self):
        assert template_token(GEO_BOX) == "{geo:box?}"

    def test_required(self):
        p = ParameterBuilder("uid", ValueType.STRING).prefix("geo").required().build()
        assert template_token(p) == "{geo:uid}"


class TestDescribeParameters:
    def test_preserves_order(self):
        described = describe_parameters(geo_time_opensearch_parameters())
        assert [d.name for d in described] == [p.key for p in geo_time_opensearch_parameters()]

    def test_bounds(self):
        lat = describe_parameters([GEO_LAT])[0]
        assert lat.minInclusive == -90
        assert lat.maxInclusive == 90
        assert lat.value == "{geo:lat?}"

    def test_count_serialization(self):
        count = describe_parameters(basic_opensearch_parameters(0))[-1]
        assert count.model_dump(exclude_none=True) == {
            "name": "count",
            "value": "{count?}",
            "minInclusive": 0,
        }
