"""Tests for evaluation, move ordering and alpha-beta search."""

import random

from mancala_advisor.core import (
    apply_move,
    create_rules,
    generate_legal_moves,
    init_from_arrays,
    init_standard,
    is_terminal,
)
from mancala_advisor.solver import (
    NO_MOVE_SCORE,
    SearchRoot,
    SearchStats,
    alphabeta,
    best_move,
    evaluate,
    order_moves,
    score_moves,
)


def reference_minimax(state, rules, depth, root, rep_root):
    """Plain minimax without pruning, for comparison."""
    if depth <= 0 or is_terminal(state, rules):
        return evaluate(state, rules, root, rep_root)
    moves = generate_legal_moves(state, rules)
    if not moves:
        return evaluate(state, rules, root, rep_root)

    values = []
    for move in moves:
        result = apply_move(state, rules, move)
        rep = rep_root + (1 if result.mover == root.root_player and result.extra_turn else 0)
        values.append(reference_minimax(result.state, rules, depth - 1, root, rep))

    return max(values) if state.to_move == root.root_player else min(values)


def test_evaluate_store_swing():
    """Test evaluation measures store changes since the root."""
    rules = create_rules(pits_per_side=3)
    root_state = init_from_arrays(rules, [1, 1, 1], [1, 1, 1], 4, 7, start_side=1)
    root = SearchRoot.from_state(root_state)

    assert root == SearchRoot(root_player=1, start_store_root=7, start_store_opp=4)

    # Side 1 gained 3, side 0 gained 1; side 1's near-store pit is empty
    leaf = init_from_arrays(rules, [1, 1, 0], [1, 1, 0], 5, 10)
    assert evaluate(leaf, rules, root, rep_root=2) == 10 * (3 - 1) + 2 + 5

    # Near-store pit holds seeds: no bonus
    leaf = init_from_arrays(rules, [1, 1, 0], [1, 1, 1], 5, 10)
    assert evaluate(leaf, rules, root, rep_root=0) == 20


def test_order_moves_prefers_extra_turn():
    """Test extra turns are ordered first, then store gains, then pit order."""
    rules = create_rules()
    state = init_from_arrays(rules, [2, 2, 2, 2, 3, 1], [4] * 6)

    assert order_moves(state, rules, generate_legal_moves(state, rules)) == [5, 4, 0, 1, 2, 3]


def test_order_moves_prefers_capture():
    """Test captures are ordered ahead of quiet moves."""
    rules = create_rules()
    state = init_from_arrays(rules, [1, 0, 1, 1, 1, 3], [4, 4, 4, 4, 5, 4])

    # Pit 0 captures 6 (priority 206); pit 5 sows into the store (priority 1)
    ordered = order_moves(state, rules, generate_legal_moves(state, rules))
    assert ordered[0] == 0
    assert ordered[1] == 5


def test_best_move_extra_turn_at_depth_one():
    """Test the only extra-turn move is recommended at depth 1."""
    rules = create_rules()
    state = init_from_arrays(rules, [2, 2, 2, 2, 3, 1], [4] * 6)

    rec = best_move(state, rules, 1)

    assert rec.has_move is True
    assert rec.move == 5
    assert rec.score == 10 + 1 + 5
    assert rec.nodes > 0

    # Depths below one search a single ply
    assert best_move(state, rules, 0).move == 5


def test_best_move_no_moves():
    """Test a position without legal moves is reported, not raised."""
    rules = create_rules(pits_per_side=3, sweep_on_game_end=False)
    state = init_from_arrays(rules, [0, 0, 0], [1, 2, 3], 10, 2)

    rec = best_move(state, rules, 4)

    assert rec.has_move is False
    assert rec.move is None
    assert rec.score == NO_MOVE_SCORE
    assert score_moves(state, rules, 4) == []


def test_consecutive_turns_keep_maximizing():
    """Test a node after an extra turn still maximizes for the root player."""
    rules = create_rules(pits_per_side=3)
    state = init_from_arrays(rules, [1, 2, 1], [1, 1, 1])

    # Pit 1 earns an extra turn, then pit 0 captures 2 (alternating plies would give 26)
    rec = best_move(state, rules, 2)
    assert rec.move == 1
    assert rec.score == 31

    scored = score_moves(state, rules, 2)
    assert [(s.move, s.score) for s in scored] == [(1, 31), (2, 22), (0, -10)]


def test_alphabeta_matches_minimax():
    """Test pruning never changes the value of a full-window search."""
    rules = create_rules(pits_per_side=4, seeds_per_pit=3)
    rng = random.Random(7)

    for _ in range(15):
        state = init_standard(rules)
        for _ in range(rng.randrange(0, 8)):
            moves = generate_legal_moves(state, rules)
            if not moves:
                break
            state = apply_move(state, rules, rng.choice(moves)).state

        root = SearchRoot.from_state(state)
        for depth in (1, 2, 3):
            expected = reference_minimax(state, rules, depth, root, 0)
            got = alphabeta(state, rules, depth, float("-inf"), float("inf"), root, 0)
            assert got == expected


def test_best_move_agrees_with_score_moves():
    """Test the recommendation scores as well as the best fully scored move."""
    rules = create_rules()
    rng = random.Random(11)
    state = init_standard(rules)

    for _ in range(6):
        scored = score_moves(state, rules, 3)
        rec = best_move(state, rules, 3)
        if not rec.has_move:
            break

        assert rec.score == scored[0].score
        assert rec.move in [s.move for s in scored if s.score == rec.score]
        assert sorted(s.move for s in scored) == generate_legal_moves(state, rules)

        state = apply_move(state, rules, rng.choice(generate_legal_moves(state, rules))).state


def test_best_move_is_deterministic():
    """Test repeated searches give identical results."""
    rules = create_rules()
    state = apply_move(init_standard(rules), rules, 2).state

    first = best_move(state, rules, 4)
    for _ in range(3):
        assert best_move(state, rules, 4) == first


def test_search_stats_count_nodes():
    """Test node counters are filled in per call."""
    rules = create_rules(pits_per_side=4, seeds_per_pit=3)
    state = init_standard(rules)
    root = SearchRoot.from_state(state)
    stats = SearchStats()

    alphabeta(state, rules, 2, float("-inf"), float("inf"), root, 0, stats)

    # Root plus at least one child per legal move
    assert stats.nodes >= 1 + len(generate_legal_moves(state, rules))
