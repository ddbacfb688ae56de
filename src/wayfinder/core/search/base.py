from abc import ABC, abstractmethod
from typing import Generic, Optional

from ..types import CostFunc, HeuristicFunc, MoveFunc, PathOrNone, S
from .config import DEFAULT_CONFIG, SearchConfig
from .models import SearchResult


class PathFinder(ABC, Generic[S]):
    """Abstract base class for path finding algorithms.

    The search space is described entirely by the three caller functions; a
    finder keeps no state between searches.
    """

    def __init__(
        self,
        neighbor_cost: CostFunc,
        heuristic: HeuristicFunc,
        move_fn: MoveFunc,
        config: Optional[SearchConfig] = None,
    ):
        """Initialize finder with the functions describing the search space."""
        for name, func in (
            ("neighbor_cost", neighbor_cost),
            ("heuristic", heuristic),
            ("move_fn", move_fn),
        ):
            if not callable(func):
                raise TypeError(f"{name} must be callable")
        if config is not None and not isinstance(config, SearchConfig):
            raise TypeError("config must be a SearchConfig instance")

        self.neighbor_cost = neighbor_cost
        self.heuristic = heuristic
        self.move_fn = move_fn
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def search(self, start: S, end: S) -> SearchResult[S]:
        """Run a search and return the result with its cost and metrics."""
        pass

    def find_path(self, start: S, end: S) -> PathOrNone:
        """Find path between states.

        Returns the states after ``start`` through ``end``, ``[]`` when
        ``start == end``, or None when ``end`` is unreachable.
        """
        return self.search(start, end).path
