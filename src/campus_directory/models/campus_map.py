"""CampusMap: the directory of buildings on a campus.

The map only relies on what every building has (name, address). It
never owns its buildings; callers keep their own references.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from campus_directory.models.building import Building
from campus_directory.models.cafe import Cafe
from campus_directory.models.house import House
from campus_directory.models.library import Library

logger = logging.getLogger(__name__)

DIRECTORY_HEADER = "DIRECTORY of BUILDINGS"


class CampusMap(BaseModel):
    """Ordered list of buildings. Duplicates are allowed."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    buildings: list[Building] = Field(default_factory=list)
    log: logging.Logger = Field(
        default_factory=lambda: logger, exclude=True, repr=False
    )

    def __len__(self) -> int:
        return len(self.buildings)

    def __contains__(self, building: object) -> bool:
        return any(b is building for b in self.buildings)

    def __str__(self) -> str:
        return self.render()

    def add_building(self, building: Building) -> None:
        self.buildings.append(building)
        self.log.info("Successfully added %s to the map.", building.name)

    def remove_building(self, building: Building) -> Building:
        """Remove ``building`` itself (matched by identity) and hand it back.

        Separate buildings with identical fields are different entries.
        """
        index = next(
            (i for i, b in enumerate(self.buildings) if b is building), None
        )
        if index is None:
            self.log.info("%s is not on the map.", building.name)
            return building
        del self.buildings[index]
        self.log.info("Successfully removed %s from the map.", building.name)
        return building

    def get_building(self, name: str) -> Building | None:
        """Find a building by name (case-insensitive)."""
        return next(
            (b for b in self.buildings if b.name.lower() == name.lower()), None
        )

    def render(self) -> str:
        """Numbered directory listing, one ``name (address)`` per line."""
        lines = [DIRECTORY_HEADER]
        for i, building in enumerate(self.buildings, start=1):
            lines.append(f"  {i}. {building.name} ({building.address})")
        return "\n".join(lines)


def smith_campus() -> CampusMap:
    """The sample Smith College campus used by the CLI and examples."""
    campus = CampusMap()
    campus.add_building(Building(name="Ford Hall", address="100 Green Street Northampton, MA 01063", floor_count=4))
    campus.add_building(Building(name="Bass Hall", address="4 Tyler Court Northampton, MA 01063", floor_count=4))
    campus.add_building(
        House(
            name="Ziskind House",
            address="1 Henshaw Ave, Northampton, MA 01063",
            floor_count=3,
            has_dining_room=True,
            has_elevator=True,
        )
    )
    campus.add_building(Building(name="Cutter House", address="10 Prospect St, Northampton, MA 01060", floor_count=3))
    campus.add_building(Building(name="Northrop House", address="49 Elm St, Northampton, MA 01063", floor_count=5))
    campus.add_building(Building(name="Smith College Museum of Art", address="20 Elm St, Northampton, MA 01063", floor_count=3))
    campus.add_building(Building(name="Sabin-Reed Hall", address="44 College Ln, Northampton, MA 01063", floor_count=4))
    campus.add_building(Building(name="Ainsworth Gym and Olin Fitness Center", address="102 Lower College Ln, Northampton, MA 01060", floor_count=4))
    campus.add_building(Building(name="Campus Center", address="100 Elm St, Northampton, MA 01063", floor_count=3))
    campus.add_building(Building(name="Mendenhall Center for the Performing Arts", address="122 Green St, Northampton, MA 01063", floor_count=3))
    campus.add_building(
        Library(
            name="Neilson Library",
            address="7 Neilson Drive, Northampton, MA 01063",
            floor_count=4,
            has_elevator=True,
        )
    )
    campus.add_building(
        Cafe(
            name="Campus Cafe",
            address="Smith College Campus Center",
            floor_count=1,
            has_elevator=False,
            coffee_ounces=100,
            sugar_packets=50,
            cream_portions=30,
            cups=20,
        )
    )
    return campus
