"""Registry vocabulary — fixed element paths and messages.

Every lookup chain is an ordered tuple of ElementTree paths relative to the
classified publication element. The first path that matches wins.
"""

# ---------------------------------------------------------------------------
# Error messages
# ---------------------------------------------------------------------------

MALFORMED_MARKER = "Malformed DOI"
NOT_FOUND_MARKER = "not found in CrossRef"

MALFORMED_MESSAGE = "Not a valid DOI"
NOT_FOUND_MESSAGE = "The DOI could not be resolved"


# ---------------------------------------------------------------------------
# Publication type probes (priority order)
# ---------------------------------------------------------------------------

JOURNAL_PATH = ".//journal"
CONFERENCE_PATH = ".//conference"
BOOK_PATH = ".//book"
POSTED_CONTENT_PATH = ".//posted_content"
PREPRINT_ATTRIBUTE_VALUE = "preprint"


# ---------------------------------------------------------------------------
# Field fallback chains
# ---------------------------------------------------------------------------

TITLE_PATHS = (
    ".//journal_article/titles/title",
    ".//conference_paper/titles/title",
    ".//content_item/titles/title",
    ".//titles/title",
)

AUTHOR_PATHS = (
    ".//content_item/contributors/person_name[@contributor_role='author']",
    ".//contributors/person_name[@contributor_role='author']",
)

JOURNAL_PATHS = (
    ".//journal_metadata/abbrev_title",
    ".//proceedings_metadata/proceedings_title",
    ".//book_series_metadata/titles/title",
    ".//book_metadata/titles/title",
)

ABBREVIATION_PATH = ".//journal_metadata/abbrev_title"
GENERIC_TITLE_PATH = ".//title"

VOLUME_PATH = ".//volume"
ISSUE_PATH = ".//issue"
FIRST_PAGE_PATH = ".//first_page"


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

PUBLICATION_DATE_PATH = ".//publication_date"
DEFAULT_DAY = "01"
DEFAULT_MONTH = "01"
DEFAULT_YEAR = "1970"
