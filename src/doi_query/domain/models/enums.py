"""Enumerations for DOI metadata records."""

from enum import Enum


class PublicationType(str, Enum):
    """Publication types recognised in a unixref response."""

    JOURNAL = "journal"
    CONFERENCE = "conference"
    BOOK_CHAPTER = "book_chapter"
    PRE_PRINT = "pre_print"
    OTHER = "other"
