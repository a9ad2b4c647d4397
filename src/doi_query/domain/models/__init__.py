"""Domain models — public API.

Provides convenient imports for the record value objects.
"""

from doi_query.domain.models.enums import PublicationType
from doi_query.domain.models.record import Author, Record

__all__ = [
    "Author",
    "PublicationType",
    "Record",
]
