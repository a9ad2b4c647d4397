"""Build registry query and resolver URLs for a DOI."""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from doi_query.config.models import DOIConfig

_DOI_PREFIX = re.compile(r"^(?:doi:\s*|https?://(?:dx\.)?doi\.org/)", re.IGNORECASE)


def normalize_doi(doi: str) -> str:
    """Strip a ``doi:`` label or ``https://doi.org/`` prefix, returning the bare DOI."""
    return _DOI_PREFIX.sub("", doi.strip())


def build_query_url(
    doi: str,
    config: DOIConfig,
    params: Optional[Mapping[str, Any]] = None,
) -> str:
    """Return the OpenURL query for *doi*.

    ``id`` and ``pid`` default to ``doi:<DOI>`` and the configured API key
    unless *params* gives them a non-None value. Any other parameter whose
    value is None is dropped before encoding.
    """
    query: dict[str, Any] = dict(params or {})
    query["format"] = "unixref"
    if query.get("id") is None:
        query["id"] = f"doi:{doi}"
    if query.get("pid") is None:
        query["pid"] = config.api_key
    query["noredirect"] = "true"

    encoded = urlencode({key: value for key, value in query.items() if value is not None})
    return f"{config.fetch_base_url}?{encoded}"


def build_lookup_url(doi: str, config: DOIConfig) -> str:
    """Return the direct resolver link for *doi*."""
    return f"{config.lookup_base_url.rstrip('/')}/{doi}"
