"""Base building model shared by every entry in the campus directory."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from campus_directory.models.navigation import FloorAccess, adjacent_floor

logger = logging.getLogger(__name__)


class Building(BaseModel):
    """A named building at an address with one or more floors.

    People start on floor 1. ``log`` is the output channel for every
    informational message; pass your own logger to capture or silence it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: ClassVar[str] = "building"

    name: str = Field(default="<Name Unknown>", frozen=True)
    address: str = Field(default="<Address Unknown>", frozen=True)
    floor_count: int = Field(default=1, ge=1, frozen=True, description="Number of floors")
    has_elevator: bool = Field(default=True, frozen=True)
    current_floor: int = Field(default=1, description="Floor the visitor is on")
    log: logging.Logger = Field(
        default_factory=lambda: logger, exclude=True, repr=False
    )

    @model_validator(mode="after")
    def current_floor_in_building(self) -> Building:
        if not 1 <= self.current_floor <= self.floor_count:
            raise ValueError(
                f"current_floor {self.current_floor} is outside floors "
                f"1-{self.floor_count}"
            )
        return self

    def model_post_init(self, __context: Any) -> None:
        self.log.info("You have built a %s: %s", self.kind, self.name)

    def __str__(self) -> str:
        return (
            f"{self.name} is a {self.floor_count}-story building "
            f"located at {self.address}."
        )

    @property
    def floor_access(self) -> FloorAccess:
        return FloorAccess.for_building(self.has_elevator)

    # ── Floor navigation ──────────────────────────────────────────────

    def go_to_floor(self, floor: int) -> int:
        """Go straight to ``floor``. Requires an elevator; no bounds check."""
        self.current_floor = self.floor_access.go_to_floor(self.name, floor)
        self.log.info("You are now on floor #%d of %s", self.current_floor, self.name)
        return self.current_floor

    def go_up(self) -> int:
        """Take the stairs up one floor."""
        self.current_floor = adjacent_floor(
            self.name, self.current_floor, 1, self.floor_count
        )
        self.log.info("You are now on floor #%d of %s", self.current_floor, self.name)
        return self.current_floor

    def go_down(self) -> int:
        """Take the stairs down one floor."""
        self.current_floor = adjacent_floor(
            self.name, self.current_floor, -1, self.floor_count
        )
        self.log.info("You are now on floor #%d of %s", self.current_floor, self.name)
        return self.current_floor

    # ── Capabilities ──────────────────────────────────────────────────

    def _options(self) -> list[str]:
        return ["go_up()", "go_down()", "go_to_floor(n)", "show_options()"]

    def show_options(self) -> list[str]:
        """List the operations available on this building, logging each."""
        options = self._options()
        self.log.info("Available options at %s:", self.name)
        for option in options:
            self.log.info(" + %s", option)
        return options
