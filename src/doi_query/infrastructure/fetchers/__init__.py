"""Registry transports — retrieve unixref documents over HTTP."""

from doi_query.infrastructure.fetchers.crossref_transport import CrossRefTransport

__all__ = ["CrossRefTransport"]
