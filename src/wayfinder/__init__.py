"""
Wayfinder - Generic A* Shortest Path Search

This package finds cheapest paths through arbitrary discrete state spaces. The
caller describes the space with three functions (move cost, heuristic estimate
and neighbor generation) and the search returns the sequence of states leading
from a start to a goal. It includes:

- The A* search engine and its configuration
- Search result and metrics models
- Grid helpers with ready-made heuristics for integer coordinates
"""

__version__ = "0.1.0"
__author__ = "Wayfinder Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("Wayfinder requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.exceptions import NoPathError, PathFindingError, SearchLimitError
from .core.search import (
    AStarFinder,
    PathFinding,
    SearchConfig,
    SearchResult,
    find_path,
    search,
)

__all__ = [
    "AStarFinder",
    "NoPathError",
    "PathFinding",
    "PathFindingError",
    "SearchConfig",
    "SearchLimitError",
    "SearchResult",
    "find_path",
    "search",
]
