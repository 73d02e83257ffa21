"""Tests for game sessions."""

import pytest
from mancala_advisor.core import MoveError, create_rules, init_standard
from mancala_advisor.play import GameMode, GameSession, NotationError
from mancala_advisor.solver import best_move


def test_modes():
    """Test AI side and turn ownership per mode."""
    assert GameMode.HvAI.ai_side() == 1
    assert GameMode.AIvH.ai_side() == 0
    assert GameMode.HvH.ai_side() is None

    assert GameMode.HvAI.is_human_turn(0) is True
    assert GameMode.HvAI.is_human_turn(1) is False
    assert GameMode.HvH.is_human_turn(1) is True
    assert GameMode.AIvAI.is_human_turn(0) is False


def test_play_records_history_and_notifies():
    """Test moves update the state, history and observers."""
    rules = create_rules()
    session = GameSession(rules, mode=GameMode.HvH)
    seen = []
    session.subscribe(seen.append)

    first = session.play(2)
    session.play(5)

    assert session.history == [(0, 2), (0, 5)]
    assert session.move_string == "cf"
    assert session.plies == 2
    assert session.state.to_move == 1
    assert [r.pit_index for r in seen] == [2, 5]
    assert seen[0] is first
    assert len(first.path) == 4


def test_illegal_play_raises_and_keeps_state():
    """Test an illegal move raises MoveError without changing the session."""
    rules = create_rules()
    session = GameSession(rules, mode=GameMode.HvH)
    session.play(2)
    before = session.state

    with pytest.raises(MoveError):
        session.play(2)
    with pytest.raises(MoveError):
        session.play(9)

    assert session.state is before
    assert session.history == [(0, 2)]


def test_undo_one():
    """Test undo replays the shortened history."""
    rules = create_rules()
    session = GameSession(rules, mode=GameMode.HvH)

    assert session.undo_one() is False

    session.play(2)
    after_first = session.state
    session.play(5)

    assert session.undo_one() is True
    assert session.state == after_first
    assert session.undo_one() is True
    assert session.state == init_standard(rules)


def test_undo_to_human_turn():
    """Test undo in an AI game goes back past the AI's reply."""
    rules = create_rules(pits_per_side=4, seeds_per_pit=3)
    session = GameSession(rules, mode=GameMode.HvAI, depth=2)

    session.play(0)  # Side 0 (human), turn passes to the AI
    assert session.is_human_turn() is False
    while not session.is_human_turn() and not session.is_over:
        assert session.play_ai() is not None

    assert session.undo_to_human_turn() is True
    assert session.history == []
    assert session.state == init_standard(rules)


def test_play_ai_uses_search():
    """Test the AI plays the recommended move."""
    rules = create_rules()
    session = GameSession(rules, mode=GameMode.AIvAI, depth=1)
    expected = best_move(session.state, rules, 1)

    result = session.play_ai()

    # Pit 5 scores one stone plus the empty near-store pit
    assert result.pit_index == expected.move == 5
    assert session.history == [(0, 5)]


def test_play_on_wide_board():
    """Test pits past 'z' can be played; only notation is limited to letters."""
    rules = create_rules(pits_per_side=30, seeds_per_pit=1)
    session = GameSession(rules, mode=GameMode.HvH)
    seen = []
    session.subscribe(seen.append)

    result = session.play(29)

    assert result.extra_turn is True
    assert session.history == [(0, 29)]
    assert session.state.store == (1, 0)
    assert seen == [result]


def test_load_moves():
    """Test loading a move string and atomic failure."""
    rules = create_rules()
    session = GameSession(rules, mode=GameMode.HvH)
    session.load("cfB")

    assert session.move_string == "cfB"

    with pytest.raises(NotationError):
        session.load("cA")
    assert session.move_string == "cfB"


def test_summary():
    """Test the completed-game summary payload."""
    rules = create_rules(pits_per_side=3, seeds_per_pit=1)
    session = GameSession(rules, mode=GameMode.HvAI, depth=3)

    assert session.summary() is None

    while not session.is_over:
        if session.is_human_turn():
            session.play(min(m for m in range(3) if session.state.pits[0][m] > 0))
        else:
            session.play_ai()

    summary = session.summary()
    payload = summary.to_dict()

    assert payload["mode"] == "HvAI"
    assert payload["depth"] == 3
    assert payload["moves"] == session.move_string
    assert payload["plies"] == session.plies
    assert payload["final_store0"] + payload["final_store1"] == rules.total_seeds


def test_summary_modes():
    """Test HvH summaries have no depth and AIvAI games are not summarised."""
    rules = create_rules()

    hvh = GameSession(rules, mode=GameMode.HvH, depth=5)
    hvh.play(0)
    assert hvh.summary().depth is None

    aivai = GameSession(rules, mode=GameMode.AIvAI)
    aivai.play(0)
    assert aivai.summary() is None
