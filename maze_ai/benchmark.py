#!/usr/bin/env python3
"""Benchmark selectors on seeded maze games.

Every agent plays the same sequence of seeded boards and the mean final
score per agent is reported, so strategies are compared on identical
inputs.

Usage:
    # Compare all built-in selectors over 100 games
    maze-benchmark --games 100

    # Wider, deeper beam on a larger board
    maze-benchmark --agents greedy,beam --beam-width 5 --beam-depth 8 \
        --height 5 --width 5 --end-turn 10

    # Print each turn of the first game
    maze-benchmark --agents beam --games 1 --show
"""

from __future__ import annotations

import argparse
import logging
import statistics
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from .ai.base import BaseAI
from .ai.factory import AIFactory
from .game_engine import GameEngine
from .errors import ConfigurationError
from .generation import create_state_from_seed
from .metrics import observe_decision, observe_game
from .models import AIConfig, AIType, MazeConfig

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a single game."""
    agent_id: str
    seed: int
    final_score: int
    num_turns: int
    duration_ms: float


@dataclass
class AgentStats:
    """Aggregated statistics for an agent."""
    agent_id: str
    scores: list[int] = field(default_factory=list)
    total_duration_ms: float = 0.0

    @property
    def games_played(self) -> int:
        return len(self.scores)

    @property
    def mean_score(self) -> float:
        if not self.scores:
            return 0.0
        return statistics.fmean(self.scores)

    @property
    def max_score(self) -> int:
        return max(self.scores, default=0)

    @property
    def mean_duration_ms(self) -> float:
        if not self.scores:
            return 0.0
        return self.total_duration_ms / len(self.scores)

    def add(self, result: GameResult) -> None:
        self.scores.append(result.final_score)
        self.total_duration_ms += result.duration_ms


def play_game(
    ai: BaseAI,
    seed: int,
    maze_config: MazeConfig | None = None,
    show: bool = False,
    agent_id: str | None = None,
) -> GameResult:
    """Play one seeded game to the end with ``ai`` choosing every action.

    ``agent_id`` labels the result and metrics; it defaults to the
    selector's ``ai_type``.
    """
    start_time = time.perf_counter()
    state = create_state_from_seed(seed, maze_config)
    if agent_id is None:
        agent_id = ai.ai_type.value
    if show:
        print(state)

    while not GameEngine.is_terminal(state):
        decision_start = time.perf_counter()
        try:
            action = ai.select_action(state)
        except Exception:
            observe_decision(agent_id, "error", time.perf_counter() - decision_start)
            raise
        observe_decision(agent_id, "ok", time.perf_counter() - decision_start)
        state = GameEngine.apply_action(state, action)
        if show:
            print(state)

    final_score = GameEngine.get_score(state)
    observe_game(agent_id, final_score)
    return GameResult(
        agent_id=agent_id,
        seed=seed,
        final_score=final_score,
        num_turns=state.turn,
        duration_ms=(time.perf_counter() - start_time) * 1000,
    )


def run_benchmark(
    agents: Sequence[AIType | str],
    num_games: int,
    base_seed: int = 0,
    ai_config: AIConfig | None = None,
    maze_config: MazeConfig | None = None,
    show_first: bool = False,
) -> dict[str, AgentStats]:
    """Play ``num_games`` seeded games per agent.

    Game ``i`` uses seed ``base_seed + i`` for every agent. Each agent gets
    a fresh selector built from ``ai_config``. Results are keyed by the
    name each agent was requested under, so custom registrations that
    reuse a built-in ``ai_type`` are reported separately.

    Raises:
        ConfigurationError: If the same agent is requested twice.
    """
    results: dict[str, AgentStats] = {}
    for agent in agents:
        agent_id = agent.value if isinstance(agent, AIType) else str(agent)
        if agent_id in results:
            raise ConfigurationError(
                f"Agent '{agent_id}' requested more than once",
                context={"agent": agent_id},
            )
        ai = AIFactory.create(agent, ai_config)
        stats = AgentStats(agent_id=agent_id)
        results[agent_id] = stats
        for i in range(num_games):
            result = play_game(
                ai,
                base_seed + i,
                maze_config,
                show=show_first and i == 0,
                agent_id=agent_id,
            )
            stats.add(result)
        logger.info(
            f"{agent_id}: mean score {stats.mean_score:.2f} over "
            f"{stats.games_played} games ({stats.mean_duration_ms:.3f} ms/game)"
        )
    return results


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Benchmark maze selectors on seeded games"
    )
    parser.add_argument(
        "--agents",
        default=",".join(t.value for t in AIType),
        help="Comma-separated AI types (default: all built-in)",
    )
    parser.add_argument("--games", type=int, default=100, help="Games per agent")
    parser.add_argument("--seed", type=int, default=0, help="Base seed")
    parser.add_argument("--beam-width", type=int, default=None)
    parser.add_argument("--beam-depth", type=int, default=None)
    parser.add_argument("--height", type=int, default=3)
    parser.add_argument("--width", type=int, default=4)
    parser.add_argument("--end-turn", type=int, default=4)
    parser.add_argument(
        "--show", action="store_true", help="Render every turn of the first game"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    overrides = {}
    if args.beam_width is not None:
        overrides["beam_width"] = args.beam_width
    if args.beam_depth is not None:
        overrides["beam_depth"] = args.beam_depth
    ai_config = AIConfig.from_env(**overrides)
    depth = "end_turn" if ai_config.beam_depth is None else ai_config.beam_depth
    maze_config = MazeConfig(
        height=args.height, width=args.width, end_turn=args.end_turn
    )
    agents = [a.strip() for a in args.agents.split(",") if a.strip()]

    logger.info(
        f"Benchmarking {', '.join(agents)}: {args.games} games, "
        f"{maze_config.height}x{maze_config.width} board, "
        f"{maze_config.end_turn} turns, beam {ai_config.beam_width}x{depth}"
    )
    results = run_benchmark(
        agents,
        args.games,
        base_seed=args.seed,
        ai_config=ai_config,
        maze_config=maze_config,
        show_first=args.show,
    )

    print(f"{'agent':<10} {'games':>6} {'mean':>8} {'max':>6} {'ms/game':>10}")
    for stats in results.values():
        print(
            f"{stats.agent_id:<10} {stats.games_played:>6} "
            f"{stats.mean_score:>8.2f} {stats.max_score:>6} "
            f"{stats.mean_duration_ms:>10.3f}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
