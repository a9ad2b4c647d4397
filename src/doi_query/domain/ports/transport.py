"""Port: Transport — fetch a registry response for a query URL."""

from abc import ABC, abstractmethod

from doi_query.domain.ports.document import DocumentNode


class TransportPort(ABC):
    """Contract for retrieving and parsing a registry response."""

    @abstractmethod
    def fetch(self, url: str) -> DocumentNode:
        """Perform the request and return the parsed document.

        Args:
            url: Fully built query URL.

        Raises:
            FetchException: On connection, timeout or HTTP status failures.
            ParseException: If the body cannot be parsed.
        """
        ...
