"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports.
"""

from __future__ import annotations

from typing import Optional

from doi_query.application.use_cases.resolve_doi import ResolveDOIUseCase
from doi_query.config.models import DOIConfig
from doi_query.domain.ports.config_provider import ConfigProviderPort
from doi_query.domain.ports.transport import TransportPort
from doi_query.infrastructure.config.json_config_provider import JsonConfigProvider
from doi_query.infrastructure.fetchers.crossref_transport import CrossRefTransport


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container(api_key="me@example.org")
        record = container.resolve_doi().execute("10.1038/nature12373")
    """

    def __init__(
        self,
        config_path: str | None = None,
        api_key: Optional[str] = None,
        transport: Optional[TransportPort] = None,
    ) -> None:
        self._config_provider: ConfigProviderPort = JsonConfigProvider(
            config_path, api_key=api_key
        )
        self._config: DOIConfig = self._config_provider.get_config()
        self._transport = transport or CrossRefTransport(self._config)

    @property
    def config(self) -> DOIConfig:
        return self._config

    def resolve_doi(self) -> ResolveDOIUseCase:
        return ResolveDOIUseCase(self._transport, self._config)
