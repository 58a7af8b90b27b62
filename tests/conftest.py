"""
Shared pytest fixtures for maze_ai tests.

State fixtures are function-scoped: states carry a mutable board, so each
test gets its own copy.
"""

from pathlib import Path
import sys
from typing import Callable, List, Sequence

import pytest

# Ensure the repository root is on sys.path so `import maze_ai` works when
# running pytest without an editable install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from maze_ai.game_engine import GameEngine
from maze_ai.models import MazeState, Position


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def state_factory() -> Callable[..., MazeState]:
    """Factory for creating MazeState instances from an explicit board."""

    def _create_state(
        points: Sequence[Sequence[int]],
        start: tuple = (0, 0),
        end_turn: int = 4,
    ) -> MazeState:
        return GameEngine.create_initial_state(
            points, Position(y=start[0], x=start[1]), end_turn
        )

    return _create_state


# =============================================================================
# COMMON STATE FIXTURES
# =============================================================================


@pytest.fixture
def scenario_state(state_factory) -> MazeState:
    """2x2 board, two turns, start top-left.

    Right collects 5, Down collects 3, and Right-then-Down reaches 14.
    """
    return state_factory([[0, 5], [3, 9]], start=(0, 0), end_turn=2)


@pytest.fixture
def corridor_state(state_factory) -> MazeState:
    """1x4 corridor where the greedy first step is a dead end.

    Left grabs 5 immediately; Right grabs 1 and then 9.
    """
    return state_factory([[5, 0, 1, 9]], start=(0, 1), end_turn=2)


@pytest.fixture
def single_cell_state(state_factory) -> MazeState:
    """Degenerate 1x1 board with no legal actions."""
    return state_factory([[0]], start=(0, 0), end_turn=3)


@pytest.fixture
def seeded_states() -> List[MazeState]:
    """A spread of generated default-size boards."""
    from maze_ai.generation import create_state_from_seed

    return [create_state_from_seed(seed) for seed in range(40)]
