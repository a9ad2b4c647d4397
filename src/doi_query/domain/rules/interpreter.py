"""Interpret a unixref registry response as a DOI Record.

The interpreter never performs I/O. It receives an already-parsed
``DocumentNode`` and either returns a Record (content or error) or raises
``UnrecognizedTypeException`` when the response shape is unknown.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from doi_query.domain.errors import (
    MissingAuthorFieldError,
    ParseException,
    UnrecognizedTypeException,
)
from doi_query.domain.models.enums import PublicationType
from doi_query.domain.models.record import Author, Record
from doi_query.domain.ports.document import DocumentNode
from doi_query.domain.rules import constants as c

logger = logging.getLogger(__name__)

_STRUCTURAL_PROBES = (
    (c.JOURNAL_PATH, PublicationType.JOURNAL),
    (c.CONFERENCE_PATH, PublicationType.CONFERENCE),
    (c.BOOK_PATH, PublicationType.BOOK_CHAPTER),
)


def interpret(document: DocumentNode) -> Record:
    """Turn a registry response into a Record.

    Args:
        document: The parsed response, with default namespaces stripped.

    Returns:
        An error Record for registry-reported failures, otherwise a
        content Record. ``doi`` is left unset for the caller to stamp.

    Raises:
        UnrecognizedTypeException: No publication type probe matched.
        MissingAuthorFieldError: An author lacks a surname or given name.
        ParseException: The publication date is not a valid date.
    """
    error = classify_error(document)
    if error is not None:
        logger.warning("Registry reported an error: %s", error)
        return Record.from_error(error)
    return interpret_content(document)


# ---------------------------------------------------------------------------
# Error dispatch
# ---------------------------------------------------------------------------


def classify_error(document: DocumentNode) -> Optional[str]:
    """Return the error message the document signals, or None for content."""
    if c.MALFORMED_MARKER in document.serialize():
        return c.MALFORMED_MESSAGE

    element = document.find_first(".//error")
    if element is None:
        return None

    message = element.text()
    if c.NOT_FOUND_MARKER in message:
        return c.NOT_FOUND_MESSAGE
    return message


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


def interpret_content(document: DocumentNode) -> Record:
    """Classify and extract a content Record from *document*."""
    pub_type, article = classify(document)
    logger.debug("Classified response as %s", pub_type.value)

    date_node = article.find_first(c.PUBLICATION_DATE_PATH)
    return Record(
        type=pub_type,
        title=_content_of(first_match(article, c.TITLE_PATHS)),
        authors=extract_authors(article),
        journal=_content_of(first_match(article, c.JOURNAL_PATHS)),
        citation=build_citation(document, article),
        pub_date=None if date_node is None else parse_date(date_node),
    )


def classify(document: DocumentNode) -> tuple[PublicationType, DocumentNode]:
    """Return the publication type and the element that determined it.

    Raises:
        UnrecognizedTypeException: If no structural probe matches.
    """
    for path, pub_type in _STRUCTURAL_PROBES:
        element = document.find_first(path)
        if element is not None:
            return pub_type, element

    posted = document.find_first(c.POSTED_CONTENT_PATH)
    if posted is not None:
        if posted.attribute("type") == c.PREPRINT_ATTRIBUTE_VALUE:
            return PublicationType.PRE_PRINT, posted
        return PublicationType.OTHER, posted

    raise UnrecognizedTypeException("The response does not describe a known publication type")


def first_match(node: DocumentNode, paths: Iterable[str]) -> Optional[DocumentNode]:
    """Return the first node found by trying *paths* in order."""
    for path in paths:
        found = node.find_first(path)
        if found is not None:
            return found
    return None


def extract_authors(article: DocumentNode) -> list[Author]:
    """Collect authors, preferring those scoped under a content item.

    Raises:
        MissingAuthorFieldError: If a matched author lacks a name part.
    """
    elements: list[DocumentNode] = []
    for path in c.AUTHOR_PATHS:
        elements = article.find_all(path)
        if elements:
            break

    authors: list[Author] = []
    for element in elements:
        surname = element.find_first(".//surname")
        given_name = element.find_first(".//given_name")
        if surname is None or given_name is None:
            raise MissingAuthorFieldError(
                "Author element is missing a surname or given name: "
                f"{element.serialize()!r}"
            )
        authors.append(Author(first_name=given_name.text(), last_name=surname.text()))
    return authors


def build_citation(document: DocumentNode, article: DocumentNode) -> str:
    """Build ``'<abbrev> <volume>(<issue>) : <first page>'``.

    Missing parts collapse to empty strings, so the result may be
    whitespace only.
    """
    abbreviation = article.find_first(c.ABBREVIATION_PATH)
    if abbreviation is None:
        abbreviation = document.find_first(c.GENERIC_TITLE_PATH)
    abbrev = _content_of(abbreviation) or ""

    volume = article.find_first(c.VOLUME_PATH)
    issue = article.find_first(c.ISSUE_PATH)
    first_page = article.find_first(c.FIRST_PAGE_PATH)

    volume_str = volume.text() if volume is not None else ""
    issue_str = f"({issue.text()})" if issue is not None else ""
    page_str = f" : {first_page.text()}" if first_page is not None else ""
    return f"{abbrev} {volume_str}{issue_str}{page_str}"


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def parse_date(date_node: DocumentNode) -> date:
    """Parse a ``publication_date`` element, defaulting missing parts.

    Raises:
        ParseException: If the parts do not form a valid calendar date.
    """
    day = _content_of(date_node.find_first(".//day")) or c.DEFAULT_DAY
    month = _content_of(date_node.find_first(".//month")) or c.DEFAULT_MONTH
    year = _content_of(date_node.find_first(".//year")) or c.DEFAULT_YEAR
    try:
        return date(int(year), int(month), int(day))
    except ValueError as exc:
        raise ParseException(f"Invalid publication date {year}-{month}-{day}") from exc


def _content_of(node: Optional[DocumentNode]) -> Optional[str]:
    return None if node is None else node.text()
