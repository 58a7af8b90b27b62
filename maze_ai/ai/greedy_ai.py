"""Greedy AI implementation for the maze game.

Evaluates every legal action one ply deep and keeps the best. Ties go to
the action seen first, i.e. the lowest action id, because candidates are
compared with a strict ``>``. This is the beam search special case with
width equal to the branching factor and depth one.
"""

from __future__ import annotations

import logging

from ..game_engine import GameEngine
from ..metrics import AI_STATES_EXPANDED
from ..models import Action, AIConfig, AIType, MazeState
from .base import BaseAI
from .evaluator import Evaluator

logger = logging.getLogger(__name__)


class GreedyAI(BaseAI):
    """AI that picks the action with the best immediate evaluation."""

    ai_type = AIType.GREEDY

    def select_action(self, state: MazeState) -> Action:
        """Select the one-ply best action for ``state``.

        Raises:
            NoLegalActionsError: If the board offers no legal action.
            InvalidMoveError: If ``state`` is already terminal.
        """
        legal_actions = self.get_legal_actions(state)

        best_score = float("-inf")
        best_action = legal_actions[0]
        for action in legal_actions:
            child = self.evaluator(GameEngine.apply_action(state, action))
            if child.evaluated_score > best_score:
                best_score = child.evaluated_score
                best_action = action

        AI_STATES_EXPANDED.labels(ai_type=self.ai_type.value).inc(len(legal_actions))
        logger.debug(
            "greedy selected %s (score=%s) at turn %d",
            best_action.name,
            best_score,
            state.turn,
        )
        self.action_count += 1
        return best_action


def greedy_action(state: MazeState, evaluator: Evaluator | None = None) -> Action:
    """Functional entry point for one-ply greedy selection."""
    return GreedyAI(AIConfig(ai_type=AIType.GREEDY), evaluator).select_action(state)
