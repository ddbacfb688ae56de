"""Shared test fixtures."""

from collections import deque
from typing import Callable, Dict, Optional

import pytest

from wayfinder.grid import TerrainMap, grid_moves


@pytest.fixture
def grid8():
    """Unbounded 8-directional grid adjacency."""
    return grid_moves(diagonal=True)


@pytest.fixture
def grid4():
    """Unbounded 4-directional grid adjacency."""
    return grid_moves(diagonal=False)


@pytest.fixture
def mountain_terrain() -> TerrainMap:
    """
    Fixture providing a 5x3 map with a mountain ridge across the middle:

        y=0  1 1 1 1 1
        y=1  1 9 9 9 1
        y=2  1 1 1 1 1
    """
    return TerrainMap.from_rows(
        [
            [1, 1, 1, 1, 1],
            [1, 9, 9, 9, 1],
            [1, 1, 1, 1, 1],
        ]
    )


@pytest.fixture
def bfs_distance() -> Callable[[Callable, object, object], Optional[int]]:
    """Fixture providing a brute-force breadth-first move counter."""

    def distance(move_fn, start, end) -> Optional[int]:
        seen: Dict[object, int] = {start: 0}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                return seen[current]
            for neighbor in move_fn(current):
                if neighbor not in seen:
                    seen[neighbor] = seen[current] + 1
                    queue.append(neighbor)
        return None

    return distance
