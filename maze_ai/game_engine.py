"""Core game engine for the maze AI package.

This module is the transition model shared by every selector and by the
benchmark driver: it builds validated initial states, enumerates legal
actions, advances states and answers terminality. It performs no I/O.

Two advancement entry points exist:

- ``advance`` mutates a state the caller exclusively owns.
- ``apply_action`` clones first and leaves the input untouched. Drivers
  and search code use this one so that no state held elsewhere is ever
  modified.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import InvalidMoveError, InvalidStateError
from .models import Action, MazeState, Position

logger = logging.getLogger(__name__)


class GameEngine:
    """Stateless rules host for the maze game."""

    @staticmethod
    def create_initial_state(
        points: Sequence[Sequence[int]],
        start: Position,
        end_turn: int,
    ) -> MazeState:
        """
        Build a fresh, non-terminal state from an explicit board.

        Args:
            points: H rows of W non-negative point values. Copied, never
                aliased.
            start: Initial character position.
            end_turn: Number of turns in the game.

        Raises:
            InvalidStateError: If the board is empty, ragged or negative,
                the start is out of bounds or ``end_turn`` is below one.
        """
        height = len(points)
        if height == 0:
            raise InvalidStateError("Board must have at least one row")
        width = len(points[0])
        if width == 0:
            raise InvalidStateError("Board must have at least one column")
        for row_index, row in enumerate(points):
            if len(row) != width:
                raise InvalidStateError(
                    "Board rows must all have the same width",
                    context={"row": row_index, "expected": width, "actual": len(row)},
                )
            for value in row:
                if value < 0:
                    raise InvalidStateError(
                        "Point values must be non-negative",
                        context={"row": row_index, "value": value},
                    )
        if not GameEngine._in_bounds(start.y, start.x, height, width):
            raise InvalidStateError(
                "Start position is outside the board",
                context={"start": start.to_key(), "height": height, "width": width},
            )
        if end_turn < 1:
            raise InvalidStateError(
                "end_turn must be at least 1", context={"end_turn": end_turn}
            )

        return MazeState(
            height=height,
            width=width,
            end_turn=end_turn,
            points=[list(row) for row in points],
            turn=0,
            character=start,
            game_score=0,
        )

    @staticmethod
    def _in_bounds(y: int, x: int, height: int, width: int) -> bool:
        return 0 <= y < height and 0 <= x < width

    @staticmethod
    def get_legal_actions(state: MazeState) -> List[Action]:
        """Actions whose target stays on the board, in ascending id order.

        Empty only for a 1x1 board.
        """
        actions = []
        for action in Action:
            dy, dx = action.delta
            if GameEngine._in_bounds(
                state.character.y + dy,
                state.character.x + dx,
                state.height,
                state.width,
            ):
                actions.append(action)
        return actions

    @staticmethod
    def advance(state: MazeState, action: Action) -> None:
        """
        Apply ``action`` to ``state`` in place.

        Moves the character, collects and zeroes a nonzero target cell and
        increments the turn counter.

        Raises:
            InvalidMoveError: If the state is terminal, the action id is
                unknown or the target is off the board.
        """
        if GameEngine.is_terminal(state):
            raise InvalidMoveError(
                "Cannot advance a terminal state",
                action=int(action),
                turn=state.turn,
            )
        try:
            dy, dx = Action(action).delta
        except ValueError as e:
            raise InvalidMoveError(
                "Unknown action",
                action=int(action),
                turn=state.turn,
            ) from e
        y = state.character.y + dy
        x = state.character.x + dx
        if not GameEngine._in_bounds(y, x, state.height, state.width):
            raise InvalidMoveError(
                "Action leaves the board",
                action=int(action),
                turn=state.turn,
            )

        state.character = Position(y=y, x=x)
        point = state.points[y][x]
        if point > 0:
            state.game_score += point
            state.points[y][x] = 0
        state.turn += 1

    @staticmethod
    def apply_action(state: MazeState, action: Action) -> MazeState:
        """Return the successor of ``state`` under ``action``.

        The input state is not modified.
        """
        new_state = state.clone()
        GameEngine.advance(new_state, action)
        return new_state

    @staticmethod
    def is_terminal(state: MazeState) -> bool:
        return state.turn == state.end_turn

    @staticmethod
    def get_score(state: MazeState) -> int:
        return state.game_score

    @staticmethod
    def render(state: MazeState) -> str:
        """
        Text rendering: turn and score lines, then the board with ``@`` for
        the character, the digit for a nonzero cell and ``.`` for an empty
        one, terminated by a blank line.
        """
        lines = [f"turn:{state.turn}", f"score:{state.game_score}"]
        for y in range(state.height):
            row = []
            for x in range(state.width):
                if y == state.character.y and x == state.character.x:
                    row.append("@")
                elif state.points[y][x] > 0:
                    row.append(str(state.points[y][x]))
                else:
                    row.append(".")
            lines.append("".join(row))
        return "\n".join(lines) + "\n\n"
