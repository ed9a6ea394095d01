"""Campus directory data models."""

from campus_directory.models.navigation import (
    FloorAccess,
    UnsupportedOperation,
    adjacent_floor,
)
from campus_directory.models.building import Building
from campus_directory.models.library import Library
from campus_directory.models.house import House
from campus_directory.models.cafe import Cafe, Restock, Sale
from campus_directory.models.campus_map import CampusMap, smith_campus

__all__ = [
    "FloorAccess",
    "UnsupportedOperation",
    "adjacent_floor",
    "Building",
    "Library",
    "House",
    "Cafe",
    "Restock",
    "Sale",
    "CampusMap",
    "smith_campus",
]
