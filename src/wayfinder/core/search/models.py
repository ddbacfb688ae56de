"""
Data models for A* search.

This module provides the core data structures used by the search engine:
- SearchState: Mutable bookkeeping owned by a single running search
- SearchResult: Container for a finished search with its cost and metrics
- SearchMetrics: Container for search performance metrics
- PathValidationError: Exception for path validation failures

Example:
    >>> result = finder.search((0, 0), (2, 0))
    >>> result.path
    [(1, 0), (2, 0)]
    >>> result.states((0, 0))
    [(0, 0), (1, 0), (2, 0)]
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, Set, Union

from ..exceptions import PathFindingError
from ..types import S


class PathValidationError(PathFindingError):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - A step that the move function does not allow
    - A path that does not end at the goal
    - Cost inconsistencies
    """

    pass


@dataclass
class SearchState(Generic[S]):
    """
    Bookkeeping for one running search.

    A fresh instance is created for every search and dropped when it returns.
    A state is never in both ``open_set`` and ``evaluated``, and following
    ``came_from`` from any key ends at the start state.

    Attributes:
        evaluated: States already expanded (closed set)
        open_set: States discovered but not yet expanded (frontier)
        costs: Best known path cost from the start to each state
        came_from: Best known predecessor of each state
    """

    evaluated: Set[S] = field(default_factory=set)
    open_set: Set[S] = field(default_factory=set)
    costs: Dict[S, float] = field(default_factory=dict)
    came_from: Dict[S, S] = field(default_factory=dict)

    @classmethod
    def seeded(cls, start: S) -> "SearchState[S]":
        """Create the initial state of a search from ``start``."""
        return cls(open_set={start}, costs={start: 0.0})

    def close(self, state: S) -> None:
        """Move ``state`` from the frontier to the closed set."""
        self.open_set.discard(state)
        self.evaluated.add(state)

    def is_closed(self, state: S) -> bool:
        return state in self.evaluated


@dataclass
class SearchMetrics:
    """
    Container for search performance metrics.

    Attributes:
        operation: Name of the search operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of states expanded
        path_length: Number of moves in the found path (if any)
        max_memory_used: Peak memory usage during the search (bytes)

    Example:
        >>> metrics = SearchMetrics(operation="astar", start_time=time())
        >>> # ... perform search ...
        >>> metrics.end_time = time()
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    path_length: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if not isinstance(self.end_time, (int, float)):
            raise TypeError("end_time must be a numeric value")

        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

        if not isinstance(self.nodes_explored, int):
            raise TypeError("nodes_explored must be an integer")
        if self.nodes_explored < 0:
            raise ValueError("nodes_explored cannot be negative")

        if self.path_length is not None:
            if not isinstance(self.path_length, int):
                raise TypeError("path_length must be an integer")
            if self.path_length < 0:
                raise ValueError("path_length cannot be negative")

        if self.max_memory_used is not None:
            if not isinstance(self.max_memory_used, int):
                raise TypeError("max_memory_used must be an integer")
            if self.max_memory_used < 0:
                raise ValueError("max_memory_used cannot be negative")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "path_length": self.path_length,
            "max_memory_used": self.max_memory_used,
        }


@dataclass
class SearchResult(Generic[S]):
    """
    Outcome of a finished search.

    ``path`` follows the ``find_path`` contract: the states after the start up
    to and including the goal, ``[]`` when start and goal are equal, and
    ``None`` when the goal is unreachable.

    Attributes:
        path: Reconstructed path or None
        total_cost: Sum of edge costs along the path (None without a path)
        metrics: Performance metrics of the search
    """

    path: Optional[List[S]]
    total_cost: Optional[float]
    metrics: SearchMetrics

    def __post_init__(self):
        """Validate initialization parameters."""
        if self.path is not None and not isinstance(self.path, list):
            raise TypeError("path must be a list or None")

        if self.path is None and self.total_cost is not None:
            raise ValueError("total_cost must be None when no path was found")

        if self.total_cost is not None and not isinstance(self.total_cost, (int, float)):
            raise TypeError("total_cost must be a numeric value")

    @property
    def found(self) -> bool:
        """Whether the goal was reached."""
        return self.path is not None

    def __len__(self) -> int:
        """Return the number of moves in the path."""
        return len(self.path) if self.path is not None else 0

    def states(self, start: S) -> List[S]:
        """
        Get the full sequence of states including ``start``.

        Returns:
            List of states in order of traversal, empty if no path was found
        """
        if self.path is None:
            return []
        return [start, *self.path]
