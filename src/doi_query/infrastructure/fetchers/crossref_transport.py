"""CrossRef transport — implements TransportPort via requests.

Performs a single GET per query; there is no retry. The body is parsed
with ElementTree after stripping default namespace declarations.
"""

from __future__ import annotations

import logging

import requests  # type: ignore[import-untyped]

from doi_query.config.models import DOIConfig
from doi_query.domain.errors import FetchException, ParseException
from doi_query.domain.ports.document import DocumentNode
from doi_query.domain.ports.transport import TransportPort
from doi_query.domain.rules.constants import MALFORMED_MARKER
from doi_query.infrastructure.xml.element_document import TextDocument, parse_document

logger = logging.getLogger(__name__)


class CrossRefTransport(TransportPort):
    """Fetch unixref documents from the CrossRef OpenURL endpoint."""

    def __init__(self, config: DOIConfig) -> None:
        self._timeout = config.timeout_seconds
        self._headers = {
            "User-Agent": config.user_agent,
            "Accept": "application/xml, text/xml;q=0.9, */*;q=0.1",
        }

    def fetch(self, url: str) -> DocumentNode:
        """Fetch *url* and return the parsed document.

        Raises:
            FetchException: Network error, timeout or HTTP error status.
            ParseException: Body is not XML, or XML that cannot be parsed.
        """
        try:
            resp = requests.get(url, timeout=self._timeout, headers=self._headers)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise FetchException(f"CrossRef request failed: {exc}") from exc

        return read_body(resp.text, resp.headers.get("Content-Type", ""))


def read_body(body: str, content_type: str = "") -> DocumentNode:
    """Turn a response body into a document node.

    Raises:
        ParseException: If the body is neither XML nor a malformed-DOI notice.
    """
    if "xml" in content_type or body.lstrip().startswith("<"):
        return parse_document(body)
    if MALFORMED_MARKER in body:
        logger.debug("Registry answered with a plain-text malformed DOI notice")
        return TextDocument(body)
    raise ParseException("Unrecognized response format")
