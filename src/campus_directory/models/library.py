"""Library: a building that lends books from its collection.

The collection maps title → availability. A title missing from the
mapping is unknown to the library, which is different from a title that
is present but checked out.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import ClassVar

from pydantic import Field

from campus_directory.models.building import Building

logger = logging.getLogger(__name__)

AVAILABLE = "Available"
CHECKED_OUT = "Checked Out"


class Library(Building):
    """A building with a book collection that can be checked out and returned."""

    kind: ClassVar[str] = "library"

    collection: dict[str, bool] = Field(
        default_factory=dict, description="Title → True if available"
    )
    log: logging.Logger = Field(
        default_factory=lambda: logger, exclude=True, repr=False
    )

    def _options(self) -> list[str]:
        return super()._options() + [
            "add_title(title)",
            "remove_title(title)",
            "check_out(title)",
            "return_book(title)",
            "print_collection()",
        ]

    # ── Collection management ─────────────────────────────────────────

    def add_title(self, title: str) -> None:
        """Add a title as available. Titles already held are left alone."""
        if title in self.collection:
            self.log.info("%s is already in the collection", title)
            return
        self.collection[title] = True

    def add_titles(self, titles: Iterable[str]) -> None:
        for title in titles:
            self.add_title(title)

    def remove_title(self, title: str) -> str | None:
        """Remove a title, returning it, or None if the library never had it."""
        if title not in self.collection:
            self.log.info("%s is not in the collection", title)
            return None
        del self.collection[title]
        return title

    # ── Lending ───────────────────────────────────────────────────────

    def check_out(self, title: str) -> None:
        if not self.is_available(title):
            self.log.info(
                "%s is not in the collection or already checked out.", title
            )
            return
        self.collection[title] = False

    def check_out_many(self, titles: Iterable[str]) -> None:
        for title in titles:
            self.check_out(title)

    def return_book(self, title: str) -> None:
        if title not in self.collection or self.collection[title]:
            self.log.info(
                "%s is not in the collection or already available.", title
            )
            return
        self.collection[title] = True

    # ── Queries ───────────────────────────────────────────────────────

    def contains_title(self, title: str) -> bool:
        return title in self.collection

    def is_available(self, title: str) -> bool:
        """True only for titles held and not checked out."""
        return self.collection.get(title, False)

    def print_collection(self) -> list[tuple[str, str]]:
        """List every title with its status, logging each line."""
        listing = [
            (title, AVAILABLE if available else CHECKED_OUT)
            for title, available in self.collection.items()
        ]
        self.log.info("Library Collection:")
        for title, status in listing:
            self.log.info("- %s (%s)", title, status)
        return listing
