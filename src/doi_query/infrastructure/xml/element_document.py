"""ElementTree-backed implementation of the DocumentNode port.

Registry responses declare a default namespace which would qualify every
tag (``{http://www.crossref.org/xschema/1.0}journal``). Default namespace
declarations are stripped before parsing so lookups can use bare names.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Optional

from doi_query.domain.errors import ParseException

_DEFAULT_NAMESPACE = re.compile(r"""\sxmlns\s*=\s*(["']).*?\1""")
_START_TAG = re.compile(r"<[A-Za-z_][^<>]*>")

# Synthetic root so probes also match the response's own root element.
_CONTAINER_TAG = "document"


def strip_default_namespaces(xml_text: str) -> str:
    """Remove every ``xmlns="..."`` declaration, keeping prefixed ones.

    Only start tags are rewritten, so element text is left alone. Tag-like
    text inside CDATA sections is not distinguished from markup.
    """
    return _START_TAG.sub(lambda tag: _DEFAULT_NAMESPACE.sub("", tag.group(0)), xml_text)


def parse_document(xml_text: str) -> ElementNode:
    """Parse *xml_text* into a queryable document node.

    Raises:
        ParseException: If the text is not well-formed XML.
    """
    try:
        root = ET.fromstring(strip_default_namespaces(xml_text.lstrip()))
    except ET.ParseError as exc:
        raise ParseException(f"Could not parse registry response: {exc}") from exc

    container = ET.Element(_CONTAINER_TAG)
    container.append(root)
    return ElementNode(container, source=xml_text)


class ElementNode:
    """DocumentNode over an ``xml.etree.ElementTree.Element``."""

    def __init__(self, element: ET.Element, source: Optional[str] = None) -> None:
        self._element = element
        self._source = source

    @property
    def tag(self) -> str:
        return self._element.tag

    def find_first(self, path: str) -> Optional[ElementNode]:
        found = self._element.find(path)
        return None if found is None else ElementNode(found)

    def find_all(self, path: str) -> list[ElementNode]:
        return [ElementNode(found) for found in self._element.findall(path)]

    def attribute(self, name: str) -> Optional[str]:
        return self._element.get(name)

    def text(self) -> str:
        return "".join(self._element.itertext())

    def serialize(self) -> str:
        if self._source is not None:
            return self._source
        return ET.tostring(self._element, encoding="unicode")

    def __repr__(self) -> str:
        return f"ElementNode(<{self.tag}>)"


class TextDocument:
    """DocumentNode for a plain-text response body.

    The registry answers some malformed queries with plain text rather than
    XML. Such a document has no elements; only its serialized text is
    meaningful.
    """

    def __init__(self, body: str) -> None:
        self._body = body

    def find_first(self, path: str) -> None:
        return None

    def find_all(self, path: str) -> list[ElementNode]:
        return []

    def attribute(self, name: str) -> None:
        return None

    def text(self) -> str:
        return self._body

    def serialize(self) -> str:
        return self._body
