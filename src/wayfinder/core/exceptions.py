"""
Custom exceptions for the path finding system.

This module defines the hierarchy of exceptions raised by the search engine. Note
that failing to find a path is not an error for the plain ``find_path`` contract,
which returns ``None`` instead; the exceptions below cover the opt-in strict
interfaces, search budgets and cost validation.
"""

from typing import Optional


class PathFindingError(Exception):
    """
    Base class for all path finding errors.

    Examples:
        * No path exists and the caller asked for a strict result
        * Search budget exhausted
        * Invalid edge cost detected
    """

    def __str__(self) -> str:
        """Format path finding error message."""
        return f"Path Finding Error: {super().__str__()}"


class NoPathError(PathFindingError):
    """
    Raised when no path exists between two states.

    Only raised by strict interfaces such as ``PathFinding.shortest_path``;
    ``find_path`` reports the same outcome by returning ``None``.
    """


class SearchLimitError(PathFindingError):
    """
    Raised when a search exceeds its configured budget.

    Examples:
        * Iteration budget exhausted
        * Frontier grew beyond its maximum size
    """

    def __init__(self, message: str, nodes_explored: Optional[int] = None):
        super().__init__(message)
        self.nodes_explored = nodes_explored


class InvalidCostError(PathFindingError, ValueError):
    """
    Raised when a cost or heuristic value is rejected.

    Only raised when cost validation is enabled in the search configuration.

    Examples:
        * Negative edge cost
        * NaN or infinite edge cost
        * Negative heuristic estimate
    """

