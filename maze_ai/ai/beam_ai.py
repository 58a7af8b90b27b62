"""Beam search AI implementation for the maze game.

Each depth level pops at most ``beam_width`` of the best states from the
current frontier and expands every legal action of each popped parent
into the next frontier. Only the number of expanded parents is capped;
the next frontier keeps every child. The search stops early once the
best member of a frontier is terminal.

The action taken from the root is stamped on each depth-0 child as
``first_action`` and carried to all descendants by cloning, so the best
final state answers which action to play.

Frontier ordering is a max-heap on ``evaluated_score`` with insertion
order as the secondary key: among equal scores the earliest pushed state
wins. Children are pushed in ascending action id, which makes
``beam_width >= 4, beam_depth == 1`` agree with :class:`GreedyAI`.
"""

from __future__ import annotations

import heapq
import itertools
import logging

from ..errors import EmptyFrontierError, InvalidSearchParametersError
from ..game_engine import GameEngine
from ..metrics import AI_STATES_EXPANDED
from ..models import Action, AIConfig, AIType, MazeState
from .base import BaseAI
from .evaluator import Evaluator

logger = logging.getLogger(__name__)


class Frontier:
    """Score-ordered multiset of candidate states."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, MazeState]] = []
        self._sequence = itertools.count()

    def push(self, state: MazeState) -> None:
        heapq.heappush(
            self._heap, (-state.evaluated_score, next(self._sequence), state)
        )

    def pop(self) -> MazeState:
        """Remove and return the best state."""
        if not self._heap:
            raise EmptyFrontierError("Cannot pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> MazeState:
        """Return the best state without removing it."""
        if not self._heap:
            raise EmptyFrontierError("Cannot peek an empty frontier")
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)


class BeamAI(BaseAI):
    """AI that runs a bounded-width, bounded-depth beam search."""

    ai_type = AIType.BEAM

    def select_action(self, state: MazeState) -> Action:
        """Select an action using the configured beam parameters."""
        return self.beam_action(state)

    def beam_action(
        self,
        state: MazeState,
        beam_width: int | None = None,
        beam_depth: int | None = None,
    ) -> Action:
        """
        Run beam search from ``state`` and return the root action of the
        best state found.

        Args:
            state: Root state (never mutated).
            beam_width: Parents expanded per level; defaults to config.
            beam_depth: Number of expansion levels; defaults to config,
                then to the game's ``end_turn``.

        Raises:
            InvalidSearchParametersError: If width or depth is below one.
            NoLegalActionsError: If the root has no legal action.
            EmptyFrontierError: If a frontier runs dry.
            InvalidMoveError: If ``state`` is already terminal.
        """
        width = self.config.beam_width if beam_width is None else beam_width
        depth = self.config.beam_depth if beam_depth is None else beam_depth
        if depth is None:
            depth = state.end_turn
        if width < 1 or depth < 1:
            raise InvalidSearchParametersError(
                "beam_width and beam_depth must both be at least 1",
                beam_width=width,
                beam_depth=depth,
            )
        self.get_legal_actions(state)

        root = state.clone()
        root.first_action = None
        frontier = Frontier()
        frontier.push(root)

        expanded = 0
        levels = 0
        for t in range(depth):
            next_frontier = Frontier()
            for _ in range(width):
                if not frontier:
                    break
                parent = frontier.pop()
                for action in GameEngine.get_legal_actions(parent):
                    child = self.evaluator(GameEngine.apply_action(parent, action))
                    if t == 0:
                        child.first_action = action
                    next_frontier.push(child)
                    expanded += 1
            frontier = next_frontier
            levels = t + 1
            if GameEngine.is_terminal(frontier.peek()):
                break

        best = frontier.peek()
        AI_STATES_EXPANDED.labels(ai_type=self.ai_type.value).inc(expanded)
        logger.debug(
            "beam(width=%d, depth=%d) selected %s after %d levels, "
            "%d states expanded, best score %s",
            width,
            depth,
            best.first_action.name,
            levels,
            expanded,
            best.evaluated_score,
        )
        self.action_count += 1
        return best.first_action


def beam_action(
    state: MazeState,
    beam_width: int,
    beam_depth: int,
    evaluator: Evaluator | None = None,
) -> Action:
    """Functional entry point for beam search selection."""
    config = AIConfig(ai_type=AIType.BEAM, beam_width=beam_width, beam_depth=beam_depth)
    return BeamAI(config, evaluator).beam_action(state)
