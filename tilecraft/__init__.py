"""Core systems for a 2D tile game: ids, data definitions, assets, rendering, input and the game loop."""

__version__ = "0.0.1"