"""Search algorithm implementations."""

from .astar import AStarFinder, find_path, search

__all__ = [
    "AStarFinder",
    "find_path",
    "search",
]
