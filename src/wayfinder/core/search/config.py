"""
Configuration for A* searches.

Searches run unbounded and unvalidated by default. ``SearchConfig`` turns on the
optional budgets (iterations, frontier size, memory) and the optional cost and
result validation.

Example:
    >>> config = SearchConfig(max_iterations=10_000, validate_costs=True)
    >>> finder = AStarFinder(cost, heuristic, moves, config=config)
"""

from dataclasses import dataclass
from typing import Optional

# Constants
REL_TOLERANCE = 1e-12  # Relative tolerance for cost comparisons
MAX_QUEUE_SIZE = 1_000_000  # Maximum number of live frontier entries


@dataclass(frozen=True)
class SearchConfig:
    """
    Options controlling a single search.

    Attributes:
        max_iterations: Maximum number of node expansions, None for unbounded
        max_queue_size: Maximum number of states waiting in the frontier
        max_memory_mb: Ceiling on process memory growth during the search
        validate_costs: Reject negative or non-finite costs and heuristics
        validate_result: Re-check the returned path against the move function
    """

    max_iterations: Optional[int] = None
    max_queue_size: int = MAX_QUEUE_SIZE
    max_memory_mb: Optional[float] = None
    validate_costs: bool = False
    validate_result: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if self.max_iterations is not None:
            if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int):
                raise TypeError("max_iterations must be an integer")
            if self.max_iterations < 0:
                raise ValueError("max_iterations must be non-negative")

        if isinstance(self.max_queue_size, bool) or not isinstance(self.max_queue_size, int):
            raise TypeError("max_queue_size must be an integer")
        if self.max_queue_size <= 0:
            raise ValueError("max_queue_size must be positive")

        if self.max_memory_mb is not None:
            if not isinstance(self.max_memory_mb, (int, float)):
                raise TypeError("max_memory_mb must be a numeric value")
            if self.max_memory_mb <= 0:
                raise ValueError("max_memory_mb must be positive")

        if not isinstance(self.validate_costs, bool):
            raise TypeError("validate_costs must be a boolean")
        if not isinstance(self.validate_result, bool):
            raise TypeError("validate_result must be a boolean")


DEFAULT_CONFIG = SearchConfig()
