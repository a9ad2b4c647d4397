"""Port: Parsed document — read-only view over a registry response tree."""

from __future__ import annotations

from typing import Optional, Protocol


class DocumentNode(Protocol):
    """Minimal tree-query capability the response interpreter relies on.

    Paths use the ElementTree XPath subset and are evaluated relative to
    the node, e.g. ``.//journal_metadata/abbrev_title``.
    """

    def find_first(self, path: str) -> Optional[DocumentNode]:
        """Return the first node matching *path*, or None."""
        ...

    def find_all(self, path: str) -> list[DocumentNode]:
        """Return every node matching *path* in document order."""
        ...

    def attribute(self, name: str) -> Optional[str]:
        """Return the value of attribute *name*, or None."""
        ...

    def text(self) -> str:
        """Return the concatenated text content of the node."""
        ...

    def serialize(self) -> str:
        """Return the node serialized back to text."""
        ...
