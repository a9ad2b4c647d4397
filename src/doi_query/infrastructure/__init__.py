"""Infrastructure layer — external framework adapters."""

from doi_query.infrastructure.config.json_config_provider import JsonConfigProvider
from doi_query.infrastructure.fetchers.crossref_transport import CrossRefTransport
from doi_query.infrastructure.xml.element_document import ElementNode, TextDocument

__all__ = [
    "CrossRefTransport",
    "ElementNode",
    "JsonConfigProvider",
    "TextDocument",
]
