"""
Utility functions for A* search.
"""

import gc
import logging
import math
import os
import time
from heapq import heappop, heappush
from typing import Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

import psutil

from ..exceptions import InvalidCostError, SearchLimitError
from ..types import CostFunc, MoveFunc, Path, S
from .config import MAX_QUEUE_SIZE, REL_TOLERANCE
from .models import PathValidationError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


def is_better_cost(new_cost: float, old_cost: float) -> bool:
    """Compare costs with a relative floating point tolerance.

    Returns True only if new_cost is strictly lower than old_cost and the two
    are not equal up to rounding, so equal-cost alternatives never replace a
    recorded route. The tolerance scales with the costs, so routes on a tiny
    cost scale still compare correctly.
    """
    new_cost, old_cost = float(new_cost), float(old_cost)
    return new_cost < old_cost and not math.isclose(new_cost, old_cost, rel_tol=REL_TOLERANCE)


def check_cost(value: float, label: str = "cost") -> float:
    """Reject NaN, infinite and negative values."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidCostError(f"{label} must be numeric, got {type(value).__name__}")
    if math.isnan(value) or math.isinf(value):
        raise InvalidCostError(f"{label} must be a finite number, got {value}")
    if value < 0:
        raise InvalidCostError(f"{label} must be non-negative, got {value}")
    return float(value)


def reconstruct_path(came_from: Dict[S, S], goal: S) -> Path:
    """Walk predecessors back from ``goal``.

    The state without a predecessor (the start) is not included, so a goal
    that has no recorded predecessor yields an empty path.
    """
    path = []
    current = goal
    while current in came_from:
        path.append(current)
        current = came_from[current]
    path.reverse()
    return path


def calculate_path_cost(start: S, path: List[S], neighbor_cost: CostFunc) -> float:
    """Calculate total cost of walking ``path`` from ``start``."""
    total = 0.0
    previous = start
    for state in path:
        new_total = total + neighbor_cost(previous, state)
        if math.isinf(new_total) or math.isnan(new_total):
            raise ValueError("Path cost overflow")
        total = new_total
        previous = state
    return total


def validate_path(
    path: List[S],
    start: S,
    end: S,
    move_fn: MoveFunc,
    neighbor_cost: Optional[CostFunc] = None,
    total_cost: Optional[float] = None,
    cost_epsilon: float = 1e-9,
) -> None:
    """Validate a reconstructed path.

    Checks that every step is allowed by ``move_fn``, that the path ends at
    ``end`` and, when ``neighbor_cost`` and ``total_cost`` are both given,
    that the stored cost matches the recomputed one.
    """
    if not isinstance(path, list):
        raise TypeError("path must be a list")

    if not path:
        if start != end:
            raise PathValidationError(f"Empty path does not lead from {start!r} to {end!r}")
        return

    if path[-1] != end:
        raise PathValidationError(f"Path ends at {path[-1]!r}, expected {end!r}")

    previous = start
    for i, state in enumerate(path):
        if state not in set(move_fn(previous)):
            raise PathValidationError(
                f"Invalid step {i}: {state!r} is not reachable from {previous!r}"
            )
        previous = state

    if neighbor_cost is not None and total_cost is not None:
        calculated = calculate_path_cost(start, path, neighbor_cost)
        if abs(calculated - total_cost) > cost_epsilon:
            raise PathValidationError(
                f"Cost mismatch: calculated {calculated} != stored {total_cost}"
            )


class PriorityQueue(Generic[K]):
    """Priority queue with decrease-key and lazy deletion.

    Items with equal priority pop in insertion order.
    """

    def __init__(self, maxsize: int = MAX_QUEUE_SIZE):
        self._queue: List[Tuple[float, int, K]] = []
        self._entry_finder: Dict[K, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties
        self._maxsize = maxsize

    def add_or_update(self, item: K, priority: float) -> bool:
        """Insert ``item`` or lower its priority.

        Returns True if the queue changed.
        """
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            # Only update if new priority is lower (better)
            if not is_better_cost(priority, old_priority):
                return False
        elif len(self._entry_finder) >= self._maxsize:
            raise SearchLimitError(f"Frontier exceeded maximum size of {self._maxsize}")

        entry = (priority, self._counter, item)
        # Overwriting the finder entry invalidates any older heap entry
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, entry)
        self._counter += 1
        return True

    def pop(self) -> Optional[Tuple[float, K]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            stored_priority, stored_count = self._entry_finder.get(item, (None, None))
            if stored_priority == priority and stored_count == count:
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __contains__(self, item: K) -> bool:
        return item in self._entry_finder

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


class MemoryManager:
    """Tracks process memory growth during a search."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = 0.1  # Check memory every 100ms

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return

        self._last_check = current_time
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if not self.max_memory:
            return

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.warning(
                    "Search memory growth %.1fMB over limit %.1fMB",
                    (current - self.start_memory) / 1024 / 1024,
                    self.max_memory / 1024 / 1024,
                )
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Get peak memory usage in bytes."""
        return self._peak_memory

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
