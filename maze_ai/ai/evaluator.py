"""State evaluation for search.

Selectors never look at ``game_score`` directly; they only compare
``evaluated_score``. Any callable with the :data:`Evaluator` signature can
be passed to a selector to change what "better" means without touching
the search code.
"""

from __future__ import annotations

from collections.abc import Callable

from ..models import MazeState

Evaluator = Callable[[MazeState], MazeState]


def evaluate(state: MazeState) -> MazeState:
    """Score a state by the points collected so far."""
    state.evaluated_score = state.game_score
    return state
