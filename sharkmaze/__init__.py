"""A tile-based maze game: load a .ber map, collect every fish, then reach the exit."""

__version__ = "1.0.0"
__all__ = ["app", "game", "mapfile"]