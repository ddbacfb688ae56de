"""
Tests for custom exceptions.
"""

import pytest

from wayfinder.core.exceptions import (
    InvalidCostError,
    NoPathError,
    PathFindingError,
    SearchLimitError,
)
from wayfinder.core.search.models import PathValidationError


def test_path_finding_error_message():
    """Test path finding error message formatting."""
    error = PathFindingError("test message")
    assert str(error) == "Path Finding Error: test message"


@pytest.mark.parametrize(
    "error_type",
    [NoPathError, SearchLimitError, InvalidCostError, PathValidationError],
)
def test_hierarchy(error_type):
    """Test that every error derives from PathFindingError."""
    error = error_type("boom")
    assert isinstance(error, PathFindingError)
    assert str(error) == "Path Finding Error: boom"


def test_invalid_cost_error_is_value_error():
    """Test that cost errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        raise InvalidCostError("negative")


def test_search_limit_error_nodes_explored():
    """Test the explored node count carried by SearchLimitError."""
    assert SearchLimitError("limit").nodes_explored is None
    assert SearchLimitError("limit", nodes_explored=12).nodes_explored == 12
