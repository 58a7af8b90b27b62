"""Single-agent heuristic search on a deterministic grid maze.

    from maze_ai import GameEngine, create_state_from_seed
    from maze_ai.ai import create_ai

    state = create_state_from_seed(42)
    ai = create_ai("beam", beam_width=2, beam_depth=4)
    while not GameEngine.is_terminal(state):
        state = GameEngine.apply_action(state, ai.select_action(state))
"""

from maze_ai.game_engine import GameEngine
from maze_ai.generation import create_state_from_seed
from maze_ai.models import Action, AIConfig, AIType, MazeConfig, MazeState, Position

__version__ = "0.1.0"

__all__ = [
    "AIConfig",
    "AIType",
    "Action",
    "GameEngine",
    "MazeConfig",
    "MazeState",
    "Position",
    "create_state_from_seed",
]
