import pytest

from maze_ai.ai.random_ai import RandomAI
from maze_ai.errors import NoLegalActionsError
from maze_ai.game_engine import GameEngine
from maze_ai.models import AIConfig, AIType


def _play_out(ai, state):
    actions = []
    while not GameEngine.is_terminal(state):
        action = ai.select_action(state)
        actions.append(action)
        state = GameEngine.apply_action(state, action)
    return actions, state.game_score


def test_selects_legal_actions(seeded_states):
    ai = RandomAI(AIConfig(ai_type=AIType.RANDOM, rng_seed=3))
    for state in seeded_states:
        assert ai.select_action(state) in GameEngine.get_legal_actions(state)
    assert ai.action_count == len(seeded_states)


def test_same_seed_same_game(seeded_states):
    state = seeded_states[0]
    first = _play_out(RandomAI(AIConfig(ai_type=AIType.RANDOM, rng_seed=11)), state)
    second = _play_out(RandomAI(AIConfig(ai_type=AIType.RANDOM, rng_seed=11)), state)
    assert first == second


def test_derived_seed_is_stable():
    config = AIConfig(ai_type=AIType.RANDOM)
    assert RandomAI(config).rng_seed == RandomAI(config).rng_seed


def test_covers_every_legal_action(state_factory):
    state = state_factory([[0] * 3 for _ in range(3)], start=(1, 1))
    ai = RandomAI(AIConfig(ai_type=AIType.RANDOM, rng_seed=0))
    seen = {ai.select_action(state) for _ in range(200)}
    assert seen == set(GameEngine.get_legal_actions(state))


def test_no_legal_actions(single_cell_state):
    ai = RandomAI(AIConfig(ai_type=AIType.RANDOM, rng_seed=0))
    with pytest.raises(NoLegalActionsError):
        ai.select_action(single_cell_state)
