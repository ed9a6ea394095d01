"""Floor access policy shared by every building type.

A building either has an elevator (any floor in one hop) or only stairs
(one floor at a time via go_up/go_down). The policy is picked once from
``Building.has_elevator`` instead of each building type re-checking it.
"""

from __future__ import annotations

from enum import Enum


class UnsupportedOperation(RuntimeError):
    """The building can't do what was asked (e.g. no elevator)."""


class FloorAccess(str, Enum):
    """How people get between floors of a building."""

    ELEVATOR = "elevator"
    STAIRS = "stairs"

    @classmethod
    def for_building(cls, has_elevator: bool) -> FloorAccess:
        return cls.ELEVATOR if has_elevator else cls.STAIRS

    def go_to_floor(self, building_name: str, target: int) -> int:
        """Resolve a direct trip to ``target``.

        Elevators reach any floor number, including ones the building
        doesn't have. Stairs-only buildings refuse direct trips.
        """
        if self is FloorAccess.STAIRS:
            raise UnsupportedOperation(
                f"{building_name} doesn't have an elevator. "
                "You can only take the stairs (go_up/go_down)."
            )
        return target


def adjacent_floor(
    building_name: str, current: int, step: int, floor_count: int
) -> int:
    """Floor reached by taking the stairs one floor up (+1) or down (-1)."""
    target = current + step
    if 1 <= target <= floor_count:
        return target
    if step < 0 and current == 1:
        raise ValueError(f"Already on the ground floor of {building_name}")
    if step > 0 and current == floor_count:
        raise ValueError(
            f"Already on the top floor of {building_name} "
            f"({floor_count} floors)"
        )
    # Only an elevator trip can leave someone off floors 1..floor_count.
    raise ValueError(
        f"Floor {target} of {building_name} doesn't exist; the stairs "
        f"only connect floors 1-{floor_count}"
    )
