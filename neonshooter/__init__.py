"""Game logic of a vertical bullet-hell shooter: vectors, collisions, bullets, items and enemies."""

__version__ = "0.1.0"