"""A tile-based Sokoban game on pygame: menu, level loading, animated worker and boxes."""

__version__ = "0.1.0"