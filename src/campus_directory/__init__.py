"""Campus directory: buildings, libraries, houses and cafes on a campus map."""

__version__ = "0.1.0"
