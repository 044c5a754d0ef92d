"""Map loading, validation and game state for a tile-based puzzle game."""

__version__ = "1.0.0"