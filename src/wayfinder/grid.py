"""
Grid helpers for A* searches over integer coordinates.

Positions are ``(x, y)`` tuples. This module only supplies concrete cost,
heuristic and move functions; the search itself is generic.

Example:
    >>> terrain = TerrainMap.from_rows([[1, 1, 1], [9, 9, 1], [1, 1, 1]])
    >>> find_path(terrain.cost, chebyshev_distance, terrain.moves(), (0, 0), (0, 2))
    [(1, 0), (2, 1), (1, 2), (0, 2)]
"""

import math
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np

Position = Tuple[int, int]

# Cost value for cells that cannot be entered
IMPASSABLE = math.inf

ORTHOGONAL_STEPS: Tuple[Position, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL_STEPS: Tuple[Position, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))

SQRT2 = math.sqrt(2)


def constant_cost(a: Position, b: Position) -> float:
    """Every move costs 1."""
    return 1.0


def manhattan_distance(a: Position, b: Position) -> float:
    """Sum of absolute coordinate differences.

    Admissible for 4-directional movement with unit costs.
    """
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def chebyshev_distance(a: Position, b: Position) -> float:
    """Largest absolute coordinate difference.

    Admissible for 8-directional movement with unit costs.
    """
    return float(max(abs(a[0] - b[0]), abs(a[1] - b[1])))


def euclidean_distance(a: Position, b: Position) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def straight_line_distance(a: Position, b: Position) -> float:
    """Octile distance: diagonal steps cost sqrt(2), straight steps cost 1.

    Admissible when diagonal moves cost at least sqrt(2). With unit-cost
    diagonals it may overestimate.
    """
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return abs(SQRT2 * min(dx, dy) + abs(dy - dx))


def grid_moves(
    diagonal: bool = True,
    bounds: Optional[Tuple[int, int]] = None,
    blocked: Optional[Iterable[Position]] = None,
) -> Callable[[Position], List[Position]]:
    """
    Build a move function for a grid.

    Args:
        diagonal: Allow the four diagonal moves in addition to the orthogonal ones
        bounds: Optional ``(width, height)``; positions outside are never produced
        blocked: Positions that can never be entered

    Returns:
        Function mapping a position to its neighbors in a fixed order
    """
    steps = ORTHOGONAL_STEPS + DIAGONAL_STEPS if diagonal else ORTHOGONAL_STEPS
    blocked_cells: Set[Position] = set(blocked or ())

    if bounds is not None:
        width, height = bounds
        if width < 0 or height < 0:
            raise ValueError("bounds must be non-negative")

    def moves(position: Position) -> List[Position]:
        x, y = position
        result = []
        for dx, dy in steps:
            nx, ny = x + dx, y + dy
            if bounds is not None and not (0 <= nx < width and 0 <= ny < height):
                continue
            if (nx, ny) in blocked_cells:
                continue
            result.append((nx, ny))
        return result

    return moves


class TerrainMap:
    """Rectangular grid of per-cell entry costs.

    ``cost`` is suitable as a ``neighbor_cost`` function: moving into a cell
    costs that cell's value, independent of where the move came from. Blocked
    and out-of-bounds cells cost ``IMPASSABLE``, which the search treats as no
    edge, so ``cost`` also works with a plain ``grid_moves()`` move function.
    """

    def __init__(self, width: int, height: int, default_cost: float = 1.0):
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        if default_cost < 0:
            raise ValueError("default_cost must be non-negative")
        self.width = width
        self.height = height
        # Indexed (x, y)
        self.costs = np.full((width, height), float(default_cost), dtype=np.float64)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "TerrainMap":
        """Create a map from row-major costs, ``rows[y][x]``."""
        if not rows or not rows[0]:
            raise ValueError("rows must be a non-empty rectangle")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("rows must all have the same length")

        terrain = cls(width, len(rows))
        data = np.asarray(rows, dtype=np.float64)
        if (data < 0).any():
            raise ValueError("terrain costs must be non-negative")
        terrain.costs[:, :] = data.T
        return terrain

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cost(self, x: int, y: int, cost: float) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} map")
        if cost < 0:
            raise ValueError("terrain costs must be non-negative")
        self.costs[x, y] = cost

    def block(self, x: int, y: int) -> None:
        self.set_cost(x, y, IMPASSABLE)

    def get_cost(self, x: int, y: int) -> float:
        if not self.in_bounds(x, y):
            return IMPASSABLE
        return float(self.costs[x, y])

    def is_walkable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and math.isfinite(self.costs[x, y])

    def cost(self, a: Position, b: Position) -> float:
        """Cost of moving from ``a`` into ``b``."""
        return self.get_cost(b[0], b[1])

    def moves(self, diagonal: bool = True) -> Callable[[Position], List[Position]]:
        """Move function restricted to in-bounds walkable cells."""
        steps = ORTHOGONAL_STEPS + DIAGONAL_STEPS if diagonal else ORTHOGONAL_STEPS

        def moves(position: Position) -> List[Position]:
            x, y = position
            return [
                (x + dx, y + dy) for dx, dy in steps if self.is_walkable(x + dx, y + dy)
            ]

        return moves
