"""
Base AI class for the maze game
Abstract base class that all selectors inherit from
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import random

from ..errors import NoLegalActionsError
from ..game_engine import GameEngine
from ..models import Action, AIConfig, AIType, MazeState
from .evaluator import Evaluator, evaluate


def derive_seed(config: AIConfig) -> int:
    """
    Derive a deterministic RNG seed when ``AIConfig.rng_seed`` is unset.

    Mixes the AI type and beam parameters into a 32-bit value so two
    differently configured selectors do not share a random stream, while
    a given configuration always reproduces the same one.
    """
    type_code = sum(ord(c) for c in config.ai_type.value)
    base = (type_code * 1_000_003) ^ (config.beam_width * 97_911) ^ (config.beam_depth or 0)
    return int(base & 0xFFFFFFFF)


class BaseAI(ABC):
    """Abstract base class for all selectors"""

    ai_type: AIType

    def __init__(self, config: AIConfig, evaluator: Optional[Evaluator] = None):
        """
        Initialize the selector

        Args:
            config: AI configuration settings
            evaluator: State evaluator; defaults to the collected score
        """
        self.config = config
        self.evaluator: Evaluator = evaluator or evaluate
        self.action_count = 0

        # Per-instance RNG for all stochastic behaviour. An explicit
        # rng_seed wins over the derived one.
        if self.config.rng_seed is not None:
            self.rng_seed: int = int(self.config.rng_seed)
        else:
            self.rng_seed = derive_seed(self.config)
        self.rng: random.Random = random.Random(self.rng_seed)

    @abstractmethod
    def select_action(self, state: MazeState) -> Action:
        """
        Select an action for the current state

        Args:
            state: Current maze state (never mutated)

        Returns:
            One action from the state's legal set

        Raises:
            NoLegalActionsError: If the board offers no legal action
        """

    def get_legal_actions(self, state: MazeState) -> List[Action]:
        """
        Legal actions for ``state``.

        Raises:
            NoLegalActionsError: If the set is empty (1x1 board)
        """
        actions = GameEngine.get_legal_actions(state)
        if not actions:
            raise NoLegalActionsError(
                "No legal actions available",
                height=state.height,
                width=state.width,
            )
        return actions

    def __repr__(self) -> str:
        """String representation of AI"""
        return f"{self.__class__.__name__}(ai_type={self.ai_type.value})"
