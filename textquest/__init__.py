"""A small turn-based text role-playing game: items, characters, monsters, a shop and the game loop."""

__version__ = "0.1.0"