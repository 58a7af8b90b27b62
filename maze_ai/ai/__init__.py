"""Selectors for the maze game.

    from maze_ai.ai import create_ai, AIType

    ai = create_ai(AIType.BEAM, beam_width=2, beam_depth=4)
    action = ai.select_action(state)

Architecture:
- base.py: BaseAI abstract base class
- evaluator.py: state evaluation shared by all search strategies
- random_ai.py: uniform-random baseline
- greedy_ai.py: one-ply exhaustive lookahead
- beam_ai.py: bounded-width, bounded-depth beam search
- factory.py: AIFactory for creating selector instances
"""

from maze_ai.ai.base import BaseAI
from maze_ai.ai.beam_ai import BeamAI, Frontier, beam_action
from maze_ai.ai.evaluator import Evaluator, evaluate
from maze_ai.ai.factory import AIFactory, create_ai
from maze_ai.ai.greedy_ai import GreedyAI, greedy_action
from maze_ai.ai.random_ai import RandomAI
from maze_ai.models import AIType

__all__ = [
    "AIFactory",
    "AIType",
    "BaseAI",
    "BeamAI",
    "Evaluator",
    "Frontier",
    "GreedyAI",
    "RandomAI",
    "beam_action",
    "create_ai",
    "evaluate",
    "greedy_action",
]
