"""Use Case: Resolve a DOI to a metadata Record.

Sequences URL building, the injected transport and the response
interpreter. Registry-reported failures come back as error records;
transport and parse failures propagate.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from doi_query.application.query_url import build_query_url, normalize_doi
from doi_query.config.models import DOIConfig
from doi_query.domain.models.record import Record
from doi_query.domain.ports.transport import TransportPort
from doi_query.domain.rules.interpreter import interpret

logger = logging.getLogger(__name__)


class ResolveDOIUseCase:
    """Fetch and interpret the registry metadata for one DOI."""

    def __init__(self, transport: TransportPort, config: DOIConfig) -> None:
        self._transport = transport
        self._config = config

    def execute(self, doi: str, params: Optional[Mapping[str, Any]] = None) -> Record:
        """Resolve *doi* and return a Record stamped with it.

        Args:
            doi: A DOI string (bare, ``doi:``-labelled or a resolver URL).
            params: Extra query parameters; ``id``/``pid`` override defaults.

        Returns:
            A content Record, or an error Record for registry-reported
            failures.

        Raises:
            FetchException: Transport failure.
            ParseException: The response could not be parsed.
            UnrecognizedTypeException: Unknown publication shape.
        """
        bare = normalize_doi(doi)
        url = build_query_url(bare, self._config, params)
        logger.debug("Querying registry: %s", url)

        document = self._transport.fetch(url)
        record = interpret(document).with_doi(bare)
        if not record.is_error:
            logger.info("Resolved %s as %s", bare, record.type.value)
        return record
