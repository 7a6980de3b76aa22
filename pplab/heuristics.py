"""Board evaluation used by the search-based solvers."""

from __future__ import annotations

from .game import count_empty

# The last row keeps the weights as the evaluator has always applied them.
SNAKE_WEIGHTS = (
    (10.0, 8.0, 7.0, 6.5),
    (0.5, 0.7, 1.0, 3.0),
    (-0.5, -1.5, -1.8, -2.0),
    (-3.8, -7.2, -3.0, 0.0),
)


def snake_score(state) -> float:
    """Weighted sum of tiles favouring a snake-shaped layout."""
    return sum(
        value * weight
        for row, weights in zip(state, SNAKE_WEIGHTS)
        for value, weight in zip(row, weights)
    )


def empty_score(state, weight: float = 1.0) -> float:
    """Number of empty cells times ``weight``."""
    return count_empty(state) * weight


def h_score(state) -> float:
    """Heuristic value of a board: snake score plus squared empty count."""
    return snake_score(state) + empty_score(state) ** 2.0