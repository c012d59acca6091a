"""Game logic for a grid-based tower defense game: maps, critters, towers and scenarios."""

__version__ = "0.1.0"