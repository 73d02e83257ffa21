"""Tests for game state representation and rules configuration."""

import pytest
from mancala_advisor.core import (
    CaptureRule,
    ConfigError,
    GameState,
    RulesConfig,
    create_rules,
)


def test_create_game_state():
    """Test basic game state creation."""
    state = GameState(pits=((4,) * 4, (4,) * 4), store=(0, 0), to_move=0)

    assert state.num_pits == 4
    assert state.to_move == 0
    assert state.total_seeds == 32
    assert state.seeds_in_pits == 32


def test_side_helpers():
    """Test per-side seed counts and emptiness."""
    state = GameState(pits=((0, 0, 0), (1, 2, 3)), store=(5, 1), to_move=1)

    assert state.side_seeds(0) == 0
    assert state.side_seeds(1) == 6
    assert state.side_empty(0) is True
    assert state.side_empty(1) is False
    assert state.total_seeds == 12


def test_state_is_immutable():
    """Test that states cannot be modified in place."""
    state = GameState(pits=((1, 1), (1, 1)), store=(0, 0), to_move=0)

    with pytest.raises(AttributeError):
        state.to_move = 1
    assert state.to_move == 0


def test_state_validation():
    """Test state validation catches errors."""
    # Rows of different length
    with pytest.raises(ValueError):
        GameState(pits=((0, 0, 0), (0, 0)), store=(0, 0), to_move=0)

    # Invalid side to move
    with pytest.raises(ValueError):
        GameState(pits=((0, 0), (0, 0)), store=(0, 0), to_move=2)

    # Negative seeds
    with pytest.raises(ValueError):
        GameState(pits=((0, -1), (0, 0)), store=(0, 0), to_move=0)

    # Negative store
    with pytest.raises(ValueError):
        GameState(pits=((0, 1), (0, 0)), store=(-1, 0), to_move=0)


def test_board_string():
    """Test the text board shows side 1 reversed on top."""
    state = GameState(pits=((1, 2, 3), (4, 5, 6)), store=(7, 8), to_move=1)
    text = str(state)

    lines = [line for line in text.splitlines() if line.strip()]
    assert lines[0].split() == ["6", "5", "4"]
    assert lines[2].split() == ["1", "2", "3"]
    assert "[ 8]" in lines[1] and "[ 7]" in lines[1]
    assert "Side 1 to move" in text


def test_default_rules():
    """Test standard Kalah(6,4) defaults."""
    rules = create_rules()

    assert rules.pits_per_side == 6
    assert rules.seeds_per_pit == 4
    assert rules.extra_turn_on_store is True
    assert rules.sweep_on_game_end is True
    assert rules.capture_rule is CaptureRule.KALAH
    assert rules.allow_move_from_empty is False
    assert rules.total_seeds == 48
    assert rules.near_store_pit == 5
    assert str(rules) == "Kalah(6,4)"


def test_rules_accept_capture_rule_string():
    """Test capture rule given as its string value."""
    rules = create_rules(capture_rule="none")
    assert rules.capture_rule is CaptureRule.NONE


@pytest.mark.parametrize(
    "options",
    [
        {"pits_per_side": 0},
        {"pits_per_side": -3},
        {"pits_per_side": 2.5},
        {"pits_per_side": True},
        {"seeds_per_pit": -1},
        {"seeds_per_pit": "4"},
        {"capture_rule": "oware"},
    ],
)
def test_invalid_rules(options):
    """Test invalid parameters fail construction."""
    with pytest.raises(ConfigError):
        create_rules(**options)


def test_zero_seeds_allowed():
    """Test an empty starting board is a valid configuration."""
    rules = RulesConfig(pits_per_side=3, seeds_per_pit=0)
    assert rules.total_seeds == 0


def test_rules_are_immutable():
    """Test rules cannot be changed after construction."""
    rules = create_rules()
    with pytest.raises(AttributeError):
        rules.pits_per_side = 4
