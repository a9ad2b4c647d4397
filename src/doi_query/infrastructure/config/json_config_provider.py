"""JSON config provider — implements ConfigProviderPort.

Wraps the config/loader.py logic and applies command-line overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from doi_query.config.loader import get_config, load_config
from doi_query.config.models import DOIConfig
from doi_query.domain.ports.config_provider import ConfigProviderPort


class JsonConfigProvider(ConfigProviderPort):
    """Load registry configuration from JSON files, lazily."""

    def __init__(self, config_path: str | None = None, **overrides: object) -> None:
        self._config_path = config_path
        self._overrides = overrides
        self._config: Optional[DOIConfig] = None

    def get_config(self) -> DOIConfig:
        """Return the current configuration, loading it on first use."""
        if self._config is None:
            base = load_config(Path(self._config_path)) if self._config_path else get_config()
            self._config = base.with_overrides(**self._overrides)
        return self._config
