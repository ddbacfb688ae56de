"""Type definitions for the search engine."""

from typing import Callable, Hashable, Iterable, List, Optional, TypeVar

# Opaque node identity; only hashing and equality are required
S = TypeVar("S", bound=Hashable)

# Type alias for edge cost functions: (from_state, to_state) -> cost
CostFunc = Callable[[S, S], float]

# Type alias for heuristic functions: (state, goal) -> estimated remaining cost
HeuristicFunc = Callable[[S, S], float]

# Type alias for neighbor generation functions
MoveFunc = Callable[[S], Iterable[S]]

# Type alias for a reconstructed path, start excluded
Path = List[S]

# Type alias for the plain find_path result
PathOrNone = Optional[List[S]]
