"""Domain errors — custom exceptions for DOI Query.

These exceptions are raised by domain services and adapters and caught by
the application or presentation layers. They carry no infrastructure
dependencies.
"""

from __future__ import annotations

from typing import Optional


class DOIQueryError(Exception):
    """Base exception for all DOI Query errors."""


class FetchException(DOIQueryError):
    """Raised when the registry request fails or reports an unknown error."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "Could not fetch the DOI metadata")
        self.message = message


class ParseException(DOIQueryError):
    """Raised when the registry response cannot be parsed."""


class MissingAuthorFieldError(ParseException):
    """Raised when an author element lacks a surname or given name."""


class MalformedDOIException(DOIQueryError):
    """Raised when the registry rejects the identifier as malformed."""


class NotFoundException(DOIQueryError):
    """Raised when a well-formed DOI does not resolve."""


class UnrecognizedTypeException(DOIQueryError):
    """Raised when a content document matches no known publication type."""


class ConfigurationError(DOIQueryError):
    """Raised when configuration is invalid or missing."""
