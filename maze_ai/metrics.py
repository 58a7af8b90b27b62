"""Prometheus metrics for the maze AI package.

Counters and histograms shared by the selectors and the benchmark driver,
labeled by AI type so runs of different strategies can be told apart in
a local Prometheus setup.
"""

from __future__ import annotations

from typing import Final

from prometheus_client import Counter, Histogram


AI_DECISIONS: Final[Counter] = Counter(
    "maze_ai_decisions_total",
    "Total number of action selections, labeled by ai_type and outcome.",
    labelnames=("ai_type", "outcome"),
)

AI_DECISION_LATENCY: Final[Histogram] = Histogram(
    "maze_ai_decision_latency_seconds",
    "Latency of a single action selection in seconds, labeled by ai_type.",
    labelnames=("ai_type",),
    # Decisions on small boards finish in microseconds; the upper buckets
    # only matter for wide or deep beams.
    buckets=(
        0.0001,
        0.0005,
        0.001,
        0.005,
        0.01,
        0.05,
        0.1,
        1.0,
    ),
)

AI_STATES_EXPANDED: Final[Counter] = Counter(
    "maze_ai_states_expanded_total",
    "Total number of child states generated during search, labeled by ai_type.",
    labelnames=("ai_type",),
)

GAMES_COMPLETED: Final[Counter] = Counter(
    "maze_games_completed_total",
    "Total completed games, labeled by ai_type.",
    labelnames=("ai_type",),
)

GAME_FINAL_SCORE: Final[Histogram] = Histogram(
    "maze_game_final_score",
    "Final game score, labeled by ai_type.",
    labelnames=("ai_type",),
    buckets=(0, 5, 10, 15, 20, 30, 40, 60, 100),
)


def observe_decision(ai_type: str, outcome: str, duration_seconds: float) -> None:
    """Record a single action selection."""
    AI_DECISIONS.labels(ai_type=ai_type, outcome=outcome).inc()
    AI_DECISION_LATENCY.labels(ai_type=ai_type).observe(duration_seconds)


def observe_game(ai_type: str, final_score: int) -> None:
    """Record a completed game."""
    GAMES_COMPLETED.labels(ai_type=ai_type).inc()
    GAME_FINAL_SCORE.labels(ai_type=ai_type).observe(final_score)
