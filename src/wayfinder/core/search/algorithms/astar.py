"""
A* search over caller-defined state spaces.

The state space is never materialized: it is described by three functions,
``neighbor_cost(a, b)``, ``heuristic(a, goal)`` and ``move_fn(state)``, and
states are opaque hashable values.

Behavior worth knowing:
- The returned path excludes the start state and includes the goal.
- ``start == end`` returns ``[]``; an unreachable goal returns ``None``.
- Expanded states are never re-opened, even if a cheaper route to one is
  found later. The result is optimal for consistent heuristics; an admissible
  but inconsistent heuristic can yield a suboptimal path.
- Among frontier states with equal ``cost + heuristic`` the one discovered
  first is expanded first.
- A move whose accumulated cost is not finite is treated as no move.
"""

import logging
import math
from contextlib import contextmanager
from time import time
from typing import Any, Iterator, Optional

from ...exceptions import SearchLimitError
from ...types import CostFunc, HeuristicFunc, MoveFunc, PathOrNone, S
from ..base import PathFinder
from ..config import SearchConfig
from ..models import SearchMetrics, SearchResult, SearchState
from ..utils import (
    MemoryManager,
    PriorityQueue,
    check_cost,
    is_better_cost,
    reconstruct_path,
    validate_path,
)

logger = logging.getLogger(__name__)


class AStarFinder(PathFinder[S]):
    """A* implementation with a heap frontier and a permanent closed set."""

    operation = "astar"

    def _edge_cost(self, current: S, neighbor: S) -> float:
        cost = self.neighbor_cost(current, neighbor)
        if self.config.validate_costs:
            return check_cost(cost, f"cost of {current!r} -> {neighbor!r}")
        return cost

    def _estimate(self, state: S, end: S) -> float:
        estimate = self.heuristic(state, end)
        if self.config.validate_costs:
            return check_cost(estimate, f"heuristic of {state!r}")
        return estimate

    @contextmanager
    def _search_context(self, metrics: SearchMetrics) -> Iterator[Optional[MemoryManager]]:
        """Context manager for search resources and closing metrics."""
        max_memory_mb = self.config.max_memory_mb
        memory_manager = MemoryManager(max_memory_mb) if max_memory_mb else None
        try:
            yield memory_manager
        finally:
            metrics.end_time = time()
            if memory_manager is not None:
                metrics.max_memory_used = int(memory_manager.peak_memory)

    def search(self, start: S, end: S) -> SearchResult[S]:
        """Run A* from ``start`` to ``end``."""
        config = self.config
        metrics = SearchMetrics(operation=self.operation, start_time=time())

        logger.debug("Starting A* from %r to %r", start, end)

        state: SearchState[S] = SearchState.seeded(start)
        frontier: PriorityQueue[S] = PriorityQueue(maxsize=config.max_queue_size)
        frontier.add_or_update(start, self._estimate(start, end))

        with self._search_context(metrics) as memory_manager:
            while True:
                if memory_manager is not None:
                    memory_manager.check_memory()

                popped = frontier.pop()
                if popped is None:
                    logger.debug(
                        "Frontier exhausted after %d expansions, no path from %r to %r",
                        metrics.nodes_explored,
                        start,
                        end,
                    )
                    return SearchResult(path=None, total_cost=None, metrics=metrics)

                priority, current = popped
                logger.debug("Selected %r with estimated total %s", current, priority)

                if current == end:
                    return self._finish(state, start, end, metrics)

                if (
                    config.max_iterations is not None
                    and metrics.nodes_explored >= config.max_iterations
                ):
                    raise SearchLimitError(
                        f"Search from {start!r} to {end!r} exceeded "
                        f"{config.max_iterations} iterations",
                        nodes_explored=metrics.nodes_explored,
                    )

                state.close(current)
                metrics.nodes_explored += 1
                self._expand(state, frontier, current, end)

    def _expand(
        self, state: SearchState[S], frontier: PriorityQueue[S], current: S, end: S
    ) -> None:
        current_cost = state.costs[current]

        # Closed states are never re-opened
        for neighbor in dict.fromkeys(self.move_fn(current)):
            if state.is_closed(neighbor):
                continue

            candidate = current_cost + self._edge_cost(current, neighbor)
            # An infinite edge cost means there is no edge
            if not math.isfinite(candidate):
                continue

            state.open_set.add(neighbor)
            known = state.costs.get(neighbor)
            if known is None or is_better_cost(candidate, known):
                logger.debug("  Relaxing %r: %s -> %s", neighbor, known, candidate)
                state.came_from[neighbor] = current
                state.costs[neighbor] = candidate
                frontier.add_or_update(neighbor, candidate + self._estimate(neighbor, end))

    def _finish(
        self, state: SearchState[S], start: S, end: S, metrics: SearchMetrics
    ) -> SearchResult[S]:
        path = reconstruct_path(state.came_from, end)
        total_cost = float(state.costs[end])
        metrics.path_length = len(path)

        logger.debug(
            "Found path of %d moves and cost %s after %d expansions",
            len(path),
            total_cost,
            metrics.nodes_explored,
        )

        if self.config.validate_result:
            validate_path(path, start, end, self.move_fn, self.neighbor_cost, total_cost)

        return SearchResult(path=path, total_cost=total_cost, metrics=metrics)


def search(
    neighbor_cost: CostFunc,
    heuristic: HeuristicFunc,
    move_fn: MoveFunc,
    start: Any,
    end: Any,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """Run A* and return the full result with cost and metrics."""
    return AStarFinder(neighbor_cost, heuristic, move_fn, config=config).search(start, end)


def find_path(
    neighbor_cost: CostFunc,
    heuristic: HeuristicFunc,
    move_fn: MoveFunc,
    start: Any,
    end: Any,
    config: Optional[SearchConfig] = None,
) -> PathOrNone:
    """
    Find the cheapest path from ``start`` to ``end``.

    Args:
        neighbor_cost: Cost of moving between two adjacent states
        heuristic: Estimated remaining cost between a state and the goal
        move_fn: States reachable from a state in one move
        start: Start state
        end: Goal state
        config: Optional search configuration

    Returns:
        The states after ``start`` through ``end``, ``[]`` if ``start == end``,
        or None if ``end`` cannot be reached.

    Example:
        >>> find_path(constant_cost, straight_line_distance, grid_moves(), (0, 0), (2, 0))
        [(1, 0), (2, 0)]
    """
    return search(neighbor_cost, heuristic, move_fn, start, end, config=config).path
