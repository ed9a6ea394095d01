"""House: a residential building with a roster of residents."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import ClassVar

from pydantic import Field, model_validator

from campus_directory.models.building import Building

logger = logging.getLogger(__name__)


class House(Building):
    """A building people live in.

    Residents are kept in move-in order without duplicates.
    """

    kind: ClassVar[str] = "house"

    has_dining_room: bool = Field(default=False, frozen=True)
    residents: list[str] = Field(default_factory=list)
    log: logging.Logger = Field(
        default_factory=lambda: logger, exclude=True, repr=False
    )

    @model_validator(mode="after")
    def residents_unique(self) -> House:
        if len(set(self.residents)) != len(self.residents):
            raise ValueError("Residents must not be listed more than once")
        return self

    def _options(self) -> list[str]:
        return super()._options() + [
            "has_dining_room",
            "resident_count()",
            "move_in(name)",
            "move_out(name)",
            "is_resident(name)",
        ]

    def move_in(self, name: str) -> None:
        if name in self.residents:
            self.log.info("%s is already a resident of %s", name, self.name)
            return
        self.residents.append(name)

    def move_in_all(self, names: Iterable[str]) -> None:
        for name in names:
            self.move_in(name)

    def move_out(self, name: str) -> str | None:
        """Remove a resident and return their name, or None if not living here."""
        if name not in self.residents:
            self.log.info("%s is not a resident of %s", name, self.name)
            return None
        self.residents.remove(name)
        return name

    def move_out_all(self, names: Iterable[str]) -> None:
        for name in names:
            self.move_out(name)

    def is_resident(self, name: str) -> bool:
        return name in self.residents

    def resident_count(self) -> int:
        return len(self.residents)
