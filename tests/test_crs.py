"""Unit tests for CRS lookup."""

import pytest

from opensearch_eo import registry
from opensearch_eo.crs import decode_crs, parse_crs_code
from opensearch_eo.registry import OUTPUT_CRS, OUTPUT_CRS_CODE


class TestParseCrsCode:
    @pytest.mark.parametrize("code", [
        "EPSG:4326",
        "epsg:4326",
        "urn:ogc:def:crs:EPSG:4326",
        "urn:ogc:def:crs:EPSG::4326",
        "urn:ogc:def:crs:EPSG:9.6:4326",
        "http://www.opengis.net/def/crs/EPSG/0/4326",
    ])
    def test_supported_spellings(self, code):
        assert parse_crs_code(code) == ("EPSG", "4326")

    def test_unrecognized(self):
        assert parse_crs_code("+proj=longlat +datum=WGS84") is None


class TestDecodeCrs:
    def test_epsg(self):
        assert decode_crs("EPSG:3857").to_epsg() == 3857

    def test_unknown_code(self):
        with pytest.raises(ValueError, match="Unable to decode CRS"):
            decode_crs("EPSG:999999")

    def test_garbage(self):
        with pytest.raises(ValueError):
            decode_crs("definitely not a crs")


class TestOutputCrs:
    def test_code(self):
        assert OUTPUT_CRS_CODE == "urn:ogc:def:crs:EPSG:4326"

    def test_is_wgs84(self):
        assert OUTPUT_CRS.to_epsg() == 4326

    def test_latitude_first(self):
        assert OUTPUT_CRS.axis_info[0].direction == "north"
        assert OUTPUT_CRS.axis_info[1].direction == "east"

    def test_decode_failure_is_fatal(self, monkeypatch, caplog):
        def fail(code):
            raise ValueError(f"Unable to decode CRS '{code}'")

        monkeypatch.setattr(registry, "decode_crs", fail)

        with pytest.raises(RuntimeError, match="WGS84") as excinfo:
            registry._decode_output_crs()

        assert isinstance(excinfo.value.__cause__, ValueError)
        assert any(r.levelname == "CRITICAL" for r in caplog.records)
