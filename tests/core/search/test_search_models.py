"""
Tests for search models and configuration.
"""

from time import time

import pytest

from wayfinder.core.search import DEFAULT_CONFIG, MAX_QUEUE_SIZE, SearchConfig
from wayfinder.core.search.models import SearchMetrics, SearchResult, SearchState


@pytest.fixture
def metrics() -> SearchMetrics:
    """Fixture providing finished search metrics."""
    start = time()
    return SearchMetrics(operation="astar", start_time=start, end_time=start + 0.5)


def test_search_state_seeded():
    """Test the initial search state."""
    state = SearchState.seeded((0, 0))
    assert state.open_set == {(0, 0)}
    assert state.costs == {(0, 0): 0.0}
    assert state.evaluated == set()
    assert state.came_from == {}


def test_search_state_close():
    """Test that closing moves a state out of the frontier."""
    state = SearchState.seeded("s")
    state.close("s")
    assert state.open_set == set()
    assert state.is_closed("s")
    assert not state.is_closed("t")


def test_search_states_do_not_share_containers():
    """Test that each search state owns its containers."""
    first = SearchState()
    second = SearchState()
    first.evaluated.add("x")
    assert second.evaluated == set()


def test_metrics_duration(metrics):
    """Test duration calculation in milliseconds."""
    assert metrics.duration == pytest.approx(500.0)
    assert SearchMetrics(operation="astar", start_time=time()).duration == 0.0


def test_metrics_to_dict(metrics):
    """Test metrics dictionary conversion."""
    metrics.nodes_explored = 7
    metrics.path_length = 3
    data = metrics.to_dict()
    assert data["operation"] == "astar"
    assert data["nodes_explored"] == 7
    assert data["path_length"] == 3
    assert data["max_memory_used"] is None
    assert data["duration_ms"] == pytest.approx(500.0)


@pytest.mark.parametrize(
    "kwargs, error, message",
    [
        ({"operation": ""}, ValueError, "operation must be a non-empty string"),
        ({"start_time": "now"}, TypeError, "start_time must be a numeric value"),
        ({"end_time": -1.0}, ValueError, "end_time cannot be negative"),
        ({"start_time": 10.0, "end_time": 5.0}, ValueError, "end_time cannot be before"),
        ({"nodes_explored": -1}, ValueError, "nodes_explored cannot be negative"),
        ({"path_length": 1.5}, TypeError, "path_length must be an integer"),
        ({"max_memory_used": -3}, ValueError, "max_memory_used cannot be negative"),
    ],
)
def test_metrics_validation(kwargs, error, message):
    """Test metrics validation errors."""
    values = {"operation": "astar", "start_time": 1.0}
    values.update(kwargs)
    with pytest.raises(error, match=message):
        SearchMetrics(**values)


def test_search_result_properties(metrics):
    """Test SearchResult helpers."""
    result = SearchResult(path=[(1, 0), (2, 0)], total_cost=2.0, metrics=metrics)
    assert result.found
    assert len(result) == 2
    assert result.states((0, 0)) == [(0, 0), (1, 0), (2, 0)]

    missing = SearchResult(path=None, total_cost=None, metrics=metrics)
    assert not missing.found
    assert len(missing) == 0
    assert missing.states((0, 0)) == []

    at_goal = SearchResult(path=[], total_cost=0.0, metrics=metrics)
    assert at_goal.found
    assert at_goal.states("s") == ["s"]


def test_search_result_validation(metrics):
    """Test SearchResult validation errors."""
    with pytest.raises(TypeError, match="path must be a list or None"):
        SearchResult(path=((1, 0),), total_cost=1.0, metrics=metrics)

    with pytest.raises(ValueError, match="total_cost must be None"):
        SearchResult(path=None, total_cost=1.0, metrics=metrics)

    with pytest.raises(TypeError, match="total_cost must be a numeric value"):
        SearchResult(path=[], total_cost="0", metrics=metrics)


def test_default_config():
    """Test default configuration values."""
    assert DEFAULT_CONFIG.max_iterations is None
    assert DEFAULT_CONFIG.max_queue_size == MAX_QUEUE_SIZE
    assert DEFAULT_CONFIG.max_memory_mb is None
    assert DEFAULT_CONFIG.validate_costs is False
    assert DEFAULT_CONFIG.validate_result is False


@pytest.mark.parametrize(
    "kwargs, error, message",
    [
        ({"max_iterations": -1}, ValueError, "max_iterations must be non-negative"),
        ({"max_iterations": 2.5}, TypeError, "max_iterations must be an integer"),
        ({"max_iterations": True}, TypeError, "max_iterations must be an integer"),
        ({"max_queue_size": 0}, ValueError, "max_queue_size must be positive"),
        ({"max_queue_size": "10"}, TypeError, "max_queue_size must be an integer"),
        ({"max_memory_mb": 0}, ValueError, "max_memory_mb must be positive"),
        ({"max_memory_mb": "1"}, TypeError, "max_memory_mb must be a numeric value"),
        ({"validate_costs": 1}, TypeError, "validate_costs must be a boolean"),
        ({"validate_result": None}, TypeError, "validate_result must be a boolean"),
    ],
)
def test_config_validation(kwargs, error, message):
    """Test configuration validation errors."""
    with pytest.raises(error, match=message):
        SearchConfig(**kwargs)


def test_config_is_immutable():
    """Test that configurations cannot be modified after creation."""
    config = SearchConfig(max_iterations=10)
    with pytest.raises(AttributeError):
        config.max_iterations = 20
