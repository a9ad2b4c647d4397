"""XML document adapters."""

from doi_query.infrastructure.xml.element_document import (
    ElementNode,
    TextDocument,
    parse_document,
    strip_default_namespaces,
)

__all__ = ["ElementNode", "TextDocument", "parse_document", "strip_default_namespaces"]
