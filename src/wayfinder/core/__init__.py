"""Core search functionality."""

from .exceptions import (
    InvalidCostError,
    NoPathError,
    PathFindingError,
    SearchLimitError,
)
from .types import CostFunc, HeuristicFunc, MoveFunc

__all__ = [
    "CostFunc",
    "HeuristicFunc",
    "InvalidCostError",
    "MoveFunc",
    "NoPathError",
    "PathFindingError",
    "SearchLimitError",
]
