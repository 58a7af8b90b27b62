import pytest
from prometheus_client import REGISTRY

from maze_ai.ai import AIFactory, create_ai
from maze_ai.ai.base import BaseAI
from maze_ai.benchmark import AgentStats, GameResult, main, play_game, run_benchmark
from maze_ai.errors import ConfigurationError
from maze_ai.models import AIConfig, AIType, MazeConfig

TEST_TIMEOUT_SECONDS = 60


def _sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class _LowestActionAI(BaseAI):
    """Custom selector that reuses a built-in ai_type."""

    ai_type = AIType.RANDOM

    def select_action(self, state):
        return self.get_legal_actions(state)[0]


@pytest.fixture
def lowest_action_agent():
    AIFactory.register("lowest_action", _LowestActionAI)
    yield "lowest_action"
    AIFactory.unregister("lowest_action")


def test_play_game_runs_to_end():
    result = play_game(create_ai(AIType.GREEDY), seed=2)
    assert result.num_turns == 4
    assert result.final_score >= 0
    assert result.agent_id == "greedy"
    assert result.seed == 2


def test_play_game_records_metrics():
    games_before = _sample("maze_games_completed_total", {"ai_type": "beam"})
    decisions_before = _sample(
        "maze_ai_decisions_total", {"ai_type": "beam", "outcome": "ok"}
    )
    play_game(create_ai(AIType.BEAM, beam_width=2, beam_depth=4), seed=5)
    assert _sample("maze_games_completed_total", {"ai_type": "beam"}) == games_before + 1
    assert (
        _sample("maze_ai_decisions_total", {"ai_type": "beam", "outcome": "ok"})
        == decisions_before + 4
    )


def test_play_game_show_prints_every_turn(capsys):
    play_game(create_ai(AIType.RANDOM, rng_seed=1), seed=0, show=True)
    out = capsys.readouterr().out
    assert out.count("turn:") == 5
    assert "turn:4" in out


def test_agent_stats():
    stats = AgentStats(agent_id="greedy")
    assert stats.mean_score == 0.0
    stats.add(GameResult("greedy", 0, 10, 4, 1.0))
    stats.add(GameResult("greedy", 1, 20, 4, 3.0))
    assert stats.games_played == 2
    assert stats.mean_score == pytest.approx(15.0)
    assert stats.max_score == 20
    assert stats.mean_duration_ms == pytest.approx(2.0)


@pytest.mark.timeout(TEST_TIMEOUT_SECONDS)
def test_run_benchmark_same_seeds_for_every_agent():
    results = run_benchmark(
        [AIType.GREEDY, "beam"],
        num_games=10,
        base_seed=100,
        ai_config=AIConfig(beam_width=64, beam_depth=4),
    )
    assert set(results) == {"greedy", "beam"}
    assert all(stats.games_played == 10 for stats in results.values())
    # An exhaustive beam plays optimally on the default board
    for greedy_score, beam_score in zip(
        results["greedy"].scores, results["beam"].scores
    ):
        assert beam_score >= greedy_score


@pytest.mark.timeout(TEST_TIMEOUT_SECONDS)
def test_run_benchmark_is_reproducible():
    first = run_benchmark([AIType.RANDOM, AIType.BEAM], num_games=5, base_seed=7)
    second = run_benchmark([AIType.RANDOM, AIType.BEAM], num_games=5, base_seed=7)
    for agent_id in first:
        assert first[agent_id].scores == second[agent_id].scores


def test_run_benchmark_custom_board():
    results = run_benchmark(
        [AIType.GREEDY],
        num_games=3,
        maze_config=MazeConfig(height=2, width=2, end_turn=6),
    )
    assert results["greedy"].games_played == 3


@pytest.mark.timeout(TEST_TIMEOUT_SECONDS)
def test_main_prints_table(capsys, monkeypatch):
    monkeypatch.delenv("MAZE_AI_BEAM_WIDTH", raising=False)
    monkeypatch.delenv("MAZE_AI_BEAM_DEPTH", raising=False)
    exit_code = main(
        [
            "--agents",
            "random,greedy,beam",
            "--games",
            "3",
            "--beam-width",
            "3",
            "--beam-depth",
            "2",
            "--log-level",
            "WARNING",
        ]
    )
    assert exit_code == 0
    out = capsys.readouterr().out
    assert "mean" in out
    for agent in ("random", "greedy", "beam"):
        assert agent in out


def test_run_benchmark_keys_custom_agent_by_requested_name(lowest_action_agent):
    results = run_benchmark([AIType.RANDOM, lowest_action_agent], num_games=3)
    assert set(results) == {"random", "lowest_action"}
    assert results["random"].games_played == 3
    assert results["lowest_action"].games_played == 3
    assert results["lowest_action"].agent_id == "lowest_action"


def test_run_benchmark_labels_custom_agent_metrics(lowest_action_agent):
    before = _sample("maze_games_completed_total", {"ai_type": "lowest_action"})
    run_benchmark([lowest_action_agent], num_games=2)
    assert (
        _sample("maze_games_completed_total", {"ai_type": "lowest_action"})
        == before + 2
    )


def test_run_benchmark_rejects_duplicate_agents():
    with pytest.raises(ConfigurationError) as exc_info:
        run_benchmark([AIType.GREEDY, "greedy"], num_games=1)
    assert exc_info.value.context["agent"] == "greedy"
