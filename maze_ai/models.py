"""
Pydantic Models for the Maze Game State
"""

from __future__ import annotations

import os
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from .errors import ConfigurationError


class Action(IntEnum):
    """Directional action. Ids are stable and enumerated in ascending order."""
    RIGHT = 0
    LEFT = 1
    DOWN = 2
    UP = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """(dy, dx) applied to the character position."""
        return ACTION_DELTAS[self]


ACTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.RIGHT: (0, 1),
    Action.LEFT: (0, -1),
    Action.DOWN: (1, 0),
    Action.UP: (-1, 0),
}


class AIType(str, Enum):
    """AI type enumeration"""
    RANDOM = "random"
    GREEDY = "greedy"
    BEAM = "beam"


class Position(BaseModel):
    """Board position as (row, column)"""
    y: int
    x: int

    class Config:
        frozen = True

    def to_key(self) -> str:
        """Convert position to string key"""
        return f"{self.y},{self.x}"


class MazeState(BaseModel):
    """Snapshot of a single-agent maze game.

    ``points`` is mutated in place as cells are visited, so search code
    must always work on a :meth:`clone`. ``evaluated_score`` is only
    meaningful after an evaluator ran, and ``first_action`` is stamped by
    search procedures at depth 0 of their tree.
    """
    height: int
    width: int
    end_turn: int = Field(alias="endTurn")
    points: List[List[int]]
    turn: int = 0
    character: Position
    game_score: int = Field(0, alias="gameScore")
    evaluated_score: float = Field(0, alias="evaluatedScore")
    first_action: Optional[Action] = Field(None, alias="firstAction")

    class Config:
        populate_by_name = True

    def clone(self) -> "MazeState":
        """Independent deep copy, board included."""
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        from .game_engine import GameEngine

        return GameEngine.render(self)


class MazeConfig(BaseModel):
    """Board generation settings"""
    height: int = Field(3, ge=1)
    width: int = Field(4, ge=1)
    end_turn: int = Field(4, ge=1, alias="endTurn")
    max_point: int = Field(9, ge=0, alias="maxPoint")

    class Config:
        populate_by_name = True


DEFAULT_BEAM_WIDTH = 2


class AIConfig(BaseModel):
    """AI configuration.

    Beam parameters are validated at decision time rather than here so a
    zero width or depth surfaces as an AI error from the search itself.
    An unset ``beam_depth`` searches to the game's ``end_turn``.
    """
    ai_type: AIType = Field(AIType.BEAM, alias="aiType")
    beam_width: int = Field(DEFAULT_BEAM_WIDTH, alias="beamWidth")
    beam_depth: Optional[int] = Field(None, alias="beamDepth")
    rng_seed: Optional[int] = Field(None, alias="rngSeed")

    class Config:
        populate_by_name = True

    @classmethod
    def from_env(cls, **overrides) -> "AIConfig":
        """Build a config, letting MAZE_AI_BEAM_WIDTH / MAZE_AI_BEAM_DEPTH
        override the defaults. Explicit keyword overrides win over both.
        """
        values: Dict[str, object] = {}
        for field_name, env_var in (
            ("beam_width", "MAZE_AI_BEAM_WIDTH"),
            ("beam_depth", "MAZE_AI_BEAM_DEPTH"),
        ):
            raw = os.environ.get(env_var)
            if not raw:
                continue
            try:
                values[field_name] = int(raw)
            except ValueError as e:
                raise ConfigurationError(
                    f"{env_var} must be an integer",
                    context={"variable": env_var, "value": raw},
                ) from e
        values.update(overrides)
        return cls(**values)
