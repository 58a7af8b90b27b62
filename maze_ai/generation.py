"""Seeded board generation.

Given the same seed and :class:`MazeConfig`, ``create_state_from_seed``
always yields the same board and start position. Draw order: start row,
start column, then every other cell in row-major order.
"""

from __future__ import annotations

import random

from .game_engine import GameEngine
from .models import MazeConfig, MazeState, Position


def create_state_from_seed(
    seed: int,
    config: MazeConfig | None = None,
) -> MazeState:
    """Create an initial state from ``seed``.

    The start cell is always empty; every other cell holds a value in
    ``[0, config.max_point]``.
    """
    config = config or MazeConfig()
    rng = random.Random(seed)

    y = rng.randrange(config.height)
    x = rng.randrange(config.width)

    points = [[0] * config.width for _ in range(config.height)]
    for j in range(config.height):
        for i in range(config.width):
            if j == y and i == x:
                continue
            points[j][i] = rng.randint(0, config.max_point)

    return GameEngine.create_initial_state(
        points, Position(y=y, x=x), config.end_turn
    )
