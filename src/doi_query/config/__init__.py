"""DOI Query configuration package."""

from doi_query.config.loader import get_config, load_config
from doi_query.config.models import DOIConfig

__all__ = ["DOIConfig", "get_config", "load_config"]
