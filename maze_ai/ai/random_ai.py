"""Random AI implementation for the maze game.

This selector picks uniformly among legal actions using the per-instance
RNG on :class:`BaseAI`. It is the baseline the search strategies are
compared against.
"""

from __future__ import annotations

from ..models import Action, AIType, MazeState
from .base import BaseAI


class RandomAI(BaseAI):
    """AI that selects random legal actions."""

    ai_type = AIType.RANDOM

    def select_action(self, state: MazeState) -> Action:
        """Select a random legal action for ``state``.

        Raises:
            NoLegalActionsError: If the board offers no legal action.
        """
        legal_actions = self.get_legal_actions(state)
        selected = self.rng.choice(legal_actions)

        self.action_count += 1
        return selected
