"""Tests for query URL building and DOI normalization."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from doi_query.application.query_url import build_lookup_url, build_query_url, normalize_doi
from doi_query.config.models import DOIConfig


@pytest.fixture
def config():
    return DOIConfig(api_key="me@example.org")


def _query(url: str) -> dict[str, list[str]]:
    return parse_qs(urlsplit(url).query)


class TestBuildQueryURL:
    def test_defaults(self, config):
        url = build_query_url("10.1038/nature12373", config)
        assert url.startswith("https://www.crossref.org/openurl/?")
        assert _query(url) == {
            "format": ["unixref"],
            "id": ["doi:10.1038/nature12373"],
            "pid": ["me@example.org"],
            "noredirect": ["true"],
        }

    def test_id_and_pid_overrides(self, config):
        url = build_query_url("10.1/x", config, {"id": "custom", "pid": "other"})
        query = _query(url)
        assert query["id"] == ["custom"]
        assert query["pid"] == ["other"]

    def test_fixed_parameters_cannot_be_overridden(self, config):
        query = _query(build_query_url("10.1/x", config, {"format": "json", "noredirect": "false"}))
        assert query["format"] == ["unixref"]
        assert query["noredirect"] == ["true"]

    def test_extra_parameters_merged(self, config):
        assert _query(build_query_url("10.1/x", config, {"multihit": "true"}))["multihit"] == ["true"]

    def test_none_values_dropped(self, config):
        assert "extra" not in _query(build_query_url("10.1/x", config, {"extra": None}))

    def test_none_id_and_pid_fall_back_to_defaults(self, config):
        query = _query(build_query_url("10.1/x", config, {"id": None, "pid": None}))
        assert query["id"] == ["doi:10.1/x"]
        assert query["pid"] == ["me@example.org"]

    def test_missing_api_key_drops_pid(self):
        assert "pid" not in _query(build_query_url("10.1/x", DOIConfig()))

    def test_custom_base_url(self):
        cfg = DOIConfig(fetch_base_url="http://localhost:8080/openurl")
        assert build_query_url("10.1/x", cfg).startswith("http://localhost:8080/openurl?")

    def test_deterministic(self, config):
        assert build_query_url("10.1/x", config) == build_query_url("10.1/x", config)


class TestLookupURL:
    def test_default(self, config):
        assert build_lookup_url("10.1/x", config) == "http://dx.doi.org/10.1/x"

    def test_base_without_trailing_slash(self):
        cfg = DOIConfig(lookup_base_url="https://doi.org")
        assert build_lookup_url("10.1/x", cfg) == "https://doi.org/10.1/x"


class TestNormalizeDOI:
    @pytest.mark.parametrize(
        "raw",
        [
            "10.1234/test",
            "  10.1234/test ",
            "doi:10.1234/test",
            "DOI: 10.1234/test",
            "https://doi.org/10.1234/test",
            "http://dx.doi.org/10.1234/test",
        ],
    )
    def test_strips_prefixes(self, raw):
        assert normalize_doi(raw) == "10.1234/test"
