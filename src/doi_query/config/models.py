"""Pydantic model for DOI Query configuration.

Validates and types the JSON configuration file that supplies the
registry endpoints and credentials.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LOOKUP_URL = "http://dx.doi.org/"
DEFAULT_FETCH_URL = "https://www.crossref.org/openurl/"


class DOIConfig(BaseModel):
    """Registry settings passed explicitly to the URL builder and transport."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(None, description="CrossRef OpenURL pid (account email)")
    lookup_base_url: str = Field(DEFAULT_LOOKUP_URL, description="Direct DOI resolver")
    fetch_base_url: str = Field(DEFAULT_FETCH_URL, description="OpenURL metadata endpoint")
    timeout_seconds: float = Field(10.0, gt=0)
    user_agent: str = "doi-query/0.1"

    @field_validator("lookup_base_url", "fetch_base_url")
    @classmethod
    def check_http_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"Expected an http(s) URL, got {value!r}")
        return value

    def with_overrides(self, **overrides: object) -> DOIConfig:
        """Return a copy with every non-None override applied."""
        update = {key: value for key, value in overrides.items() if value is not None}
        if not update:
            return self
        return self.model_validate({**self.model_dump(), **update})
