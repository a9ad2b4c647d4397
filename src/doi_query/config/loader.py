"""Configuration loader for DOI Query.

Loads the JSON configuration file and returns a validated DOIConfig instance.
Uses module-level caching so each file is only parsed once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from doi_query.config.models import DOIConfig
from doi_query.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level cache
_config_cache: dict[str, DOIConfig] = {}

# Default config path — lives next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "doi_default.json"


def load_config(path: Optional[Path] = None) -> DOIConfig:
    """Load and validate configuration from a JSON file.

    Args:
        path: Custom JSON config file. If None, the bundled
            ``doi_default.json`` is used.

    Returns:
        Validated configuration instance.

    Raises:
        ConfigurationError: The file is missing, is not JSON, or does not
            match the expected schema.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = DOIConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid config file {config_path}: {exc}") from exc

    logger.debug("Loaded configuration from %s", config_path)
    _config_cache[cache_key] = config
    return config


def get_config() -> DOIConfig:
    """Get the default configuration (cached).

    This is the main entry point used by the rest of the application.
    """
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
