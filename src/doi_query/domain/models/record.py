"""DOI metadata records.

Contains the Author and Record value objects produced by the response
interpreter. Both are frozen Pydantic models: a record is built once per
interpretation and never mutated afterwards. Use ``Record.with_doi`` to
obtain a copy stamped with the identifier that was queried.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from doi_query.domain.errors import (
    FetchException,
    MalformedDOIException,
    NotFoundException,
)
from doi_query.domain.models.enums import PublicationType
from doi_query.domain.rules.constants import MALFORMED_MESSAGE, NOT_FOUND_MESSAGE


# ---------------------------------------------------------------------------
# Authors
# ---------------------------------------------------------------------------


class Author(BaseModel):
    """A person credited as author of a work."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        """Format as 'First Last'."""
        return f"{self.first_name} {self.last_name}"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class Record(BaseModel):
    """Bibliographic metadata for a single DOI.

    A record is either an *error record* (``error`` set, ``type`` unset) or
    a *content record* (``type`` set, ``error`` unset).
    """

    model_config = ConfigDict(frozen=True)

    doi: Optional[str] = None
    type: Optional[PublicationType] = None
    title: Optional[str] = None
    authors: list[Author] = Field(default_factory=list)
    journal: Optional[str] = Field(None, description="Journal, proceedings or book title")
    citation: Optional[str] = None
    pub_date: Optional[date] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_kind(self) -> Record:
        if self.error is not None and self.type is not None:
            raise ValueError("An error record cannot carry a publication type")
        if self.error is None and self.type is None:
            raise ValueError("A content record requires a publication type")
        return self

    @classmethod
    def from_error(cls, message: str) -> Record:
        """Build an error record carrying *message*."""
        return cls(error=message)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def with_doi(self, doi: str) -> Record:
        """Return a copy of this record stamped with *doi*."""
        return self.model_copy(update={"doi": doi})

    def raise_for_error(self) -> None:
        """Raise the exception matching this error record, if any.

        Raises:
            MalformedDOIException: The registry rejected the identifier.
            NotFoundException: The identifier did not resolve.
            FetchException: Any other registry-reported error.
        """
        if self.error is None:
            return
        if self.error == MALFORMED_MESSAGE:
            raise MalformedDOIException(self.error)
        if self.error == NOT_FOUND_MESSAGE:
            raise NotFoundException(self.error)
        raise FetchException(self.error)
