"""A* path finding functionality."""

from typing import Any, Optional

from ..exceptions import NoPathError
from ..types import CostFunc, HeuristicFunc, MoveFunc, PathOrNone
from .algorithms.astar import AStarFinder, find_path, search
from .base import PathFinder
from .config import DEFAULT_CONFIG, MAX_QUEUE_SIZE, REL_TOLERANCE, SearchConfig
from .models import PathValidationError, SearchMetrics, SearchResult, SearchState
from .utils import calculate_path_cost, reconstruct_path, validate_path

__all__ = [
    "AStarFinder",
    "DEFAULT_CONFIG",
    "MAX_QUEUE_SIZE",
    "PathFinder",
    "PathFinding",
    "PathValidationError",
    "REL_TOLERANCE",
    "SearchConfig",
    "SearchMetrics",
    "SearchResult",
    "SearchState",
    "calculate_path_cost",
    "find_path",
    "reconstruct_path",
    "search",
    "validate_path",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def find_path(
        neighbor_cost: CostFunc,
        heuristic: HeuristicFunc,
        move_fn: MoveFunc,
        start: Any,
        end: Any,
        config: Optional[SearchConfig] = None,
    ) -> PathOrNone:
        """Find path between states, None if unreachable."""
        return find_path(neighbor_cost, heuristic, move_fn, start, end, config=config)

    @staticmethod
    def search(
        neighbor_cost: CostFunc,
        heuristic: HeuristicFunc,
        move_fn: MoveFunc,
        start: Any,
        end: Any,
        config: Optional[SearchConfig] = None,
    ) -> SearchResult:
        """Find path between states along with its cost and metrics."""
        return search(neighbor_cost, heuristic, move_fn, start, end, config=config)

    @classmethod
    def shortest_path(
        cls,
        neighbor_cost: CostFunc,
        heuristic: HeuristicFunc,
        move_fn: MoveFunc,
        start: Any,
        end: Any,
        config: Optional[SearchConfig] = None,
    ) -> SearchResult:
        """Find path between states, raising NoPathError if unreachable."""
        result = cls.search(neighbor_cost, heuristic, move_fn, start, end, config=config)
        if not result.found:
            raise NoPathError(f"No path exists between {start!r} and {end!r}")
        return result
