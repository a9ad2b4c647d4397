"""Tests for the resolve-DOI use case with an in-memory transport."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from doi_query.application.use_cases.resolve_doi import ResolveDOIUseCase
from doi_query.bootstrap import Container
from doi_query.config.models import DOIConfig
from doi_query.domain.errors import FetchException, UnrecognizedTypeException
from doi_query.domain.models.enums import PublicationType
from doi_query.domain.ports.transport import TransportPort
from doi_query.infrastructure.xml.element_document import TextDocument, parse_document


class FakeTransport(TransportPort):
    """Returns a canned document and records requested URLs."""

    def __init__(self, document=None, error=None):
        self.document = document
        self.error = error
        self.urls: list[str] = []

    def fetch(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.document


@pytest.fixture
def config():
    return DOIConfig(api_key="me@example.org")


class TestResolveDOI:
    def test_content_record_is_stamped(self, config, journal_xml):
        transport = FakeTransport(parse_document(journal_xml))
        record = ResolveDOIUseCase(transport, config).execute("https://doi.org/10.1038/nature12373")

        assert record.doi == "10.1038/nature12373"
        assert record.type == PublicationType.JOURNAL
        query = parse_qs(urlsplit(transport.urls[0]).query)
        assert query["id"] == ["doi:10.1038/nature12373"]
        assert query["pid"] == ["me@example.org"]

    def test_error_record_is_stamped(self, config):
        transport = FakeTransport(TextDocument("Malformed DOI"))
        record = ResolveDOIUseCase(transport, config).execute("garbage")
        assert record.doi == "garbage"
        assert record.error == "Not a valid DOI"

    def test_params_forwarded(self, config, journal_xml):
        transport = FakeTransport(parse_document(journal_xml))
        ResolveDOIUseCase(transport, config).execute("10.1/x", {"pid": "other"})
        assert parse_qs(urlsplit(transport.urls[0]).query)["pid"] == ["other"]

    def test_transport_failure_propagates(self, config):
        transport = FakeTransport(error=FetchException("offline"))
        with pytest.raises(FetchException, match="offline"):
            ResolveDOIUseCase(transport, config).execute("10.1/x")

    def test_unrecognized_type_propagates(self, config):
        transport = FakeTransport(parse_document("<doi_records><thesis/></doi_records>"))
        with pytest.raises(UnrecognizedTypeException):
            ResolveDOIUseCase(transport, config).execute("10.1/x")


class TestContainer:
    def test_injected_transport_and_api_key(self, journal_xml):
        transport = FakeTransport(parse_document(journal_xml))
        container = Container(api_key="cli@example.org", transport=transport)

        record = container.resolve_doi().execute("10.1038/nature12373")

        assert container.config.api_key == "cli@example.org"
        assert record.title == "Nanometre-scale thermometry in a living cell"
