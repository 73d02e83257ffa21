"""
Alpha-beta minimax search.

Recommends the move that maximizes the root player's outcome. Whether a node
maximizes is decided by comparing the side to move with the root player,
never by depth parity: extra turns let one side move several times in a row.

Each call is a fresh tree walk with no transposition table, so results are
fully deterministic for identical state, rules and depth.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..core import GameState, RulesConfig, apply_move, generate_legal_moves, is_terminal
from .evaluation import SearchRoot, evaluate, order_moves

logger = logging.getLogger(__name__)

NO_MOVE_SCORE = float("-inf")


@dataclass
class SearchStats:
    """Per-call search counters."""

    nodes: int = 0


@dataclass(frozen=True)
class Recommendation:
    """Result of best_move."""

    has_move: bool
    move: Optional[int]
    score: float
    nodes: int = 0


@dataclass(frozen=True)
class ScoredMove:
    """A root move with its search score."""

    move: int
    score: float


def alphabeta(
    state: GameState,
    rules: RulesConfig,
    depth: int,
    alpha: float,
    beta: float,
    root: SearchRoot,
    rep_root: int,
    stats: Optional[SearchStats] = None,
) -> float:
    """
    Fail-hard alpha-beta value of a state for the root player.

    Args:
        state: Node to search
        rules: Rules configuration
        depth: Remaining plies
        alpha: Lower bound of the window
        beta: Upper bound of the window
        root: Search root snapshot
        rep_root: Extra turns earned by the root player on the path so far
        stats: Optional counters updated in place

    Returns:
        Node value
    """
    if stats is not None:
        stats.nodes += 1

    if depth <= 0 or is_terminal(state, rules):
        return evaluate(state, rules, root, rep_root)

    moves = generate_legal_moves(state, rules)
    if not moves:
        return evaluate(state, rules, root, rep_root)

    maximizing = state.to_move == root.root_player
    best = float("-inf") if maximizing else float("inf")

    for move in order_moves(state, rules, moves):
        result = apply_move(state, rules, move)
        if not result.ok:
            continue

        child_rep = rep_root
        if result.mover == root.root_player and result.extra_turn:
            child_rep += 1

        value = alphabeta(
            result.state, rules, depth - 1, alpha, beta, root, child_rep, stats
        )

        if maximizing:
            best = max(best, value)
            alpha = max(alpha, best)
        else:
            best = min(best, value)
            beta = min(beta, best)

        if alpha >= beta:
            break

    return best


def _root_children(state: GameState, rules: RulesConfig, moves: List[int], root: SearchRoot):
    """Yield (move, child_state, rep_root) for each playable root move."""
    for move in moves:
        result = apply_move(state, rules, move)
        if not result.ok:
            continue
        rep_root = 1 if result.mover == root.root_player and result.extra_turn else 0
        yield move, result.state, rep_root


def best_move(state: GameState, rules: RulesConfig, depth: int) -> Recommendation:
    """
    Compute the best move for the side to move.

    Candidates are searched in move-ordering order and only a strictly
    better score replaces the incumbent, so ties go to the heuristically
    preferred move.

    Args:
        state: Position to analyse
        rules: Rules configuration
        depth: Search depth in plies (values below 1 search one ply)

    Returns:
        Recommendation; has_move is False when no legal move exists
    """
    moves = generate_legal_moves(state, rules)
    if not moves:
        return Recommendation(has_move=False, move=None, score=NO_MOVE_SCORE)

    root = SearchRoot.from_state(state)
    search_depth = max(depth, 1)
    stats = SearchStats()

    best_mv = moves[0]
    best_score = float("-inf")
    alpha = float("-inf")
    beta = float("inf")

    ordered = order_moves(state, rules, moves)
    for move, child, rep_root in _root_children(state, rules, ordered, root):
        value = alphabeta(child, rules, search_depth - 1, alpha, beta, root, rep_root, stats)
        if value > best_score:
            best_score = value
            best_mv = move
        alpha = max(alpha, best_score)

    logger.debug(
        f"best_move side={root.root_player} depth={search_depth} "
        f"move={best_mv} score={best_score} nodes={stats.nodes:,}"
    )
    return Recommendation(has_move=True, move=best_mv, score=best_score, nodes=stats.nodes)


def score_moves(state: GameState, rules: RulesConfig, depth: int) -> List[ScoredMove]:
    """
    Score every legal move with a full window.

    Returns:
        ScoredMove list sorted best-first (ties keep pit order); empty when
        there is no legal move
    """
    moves = generate_legal_moves(state, rules)
    root = SearchRoot.from_state(state)
    search_depth = max(depth, 1)

    scored = []
    for move, child, rep_root in _root_children(state, rules, moves, root):
        value = alphabeta(
            child, rules, search_depth - 1, float("-inf"), float("inf"), root, rep_root
        )
        scored.append(ScoredMove(move=move, score=value))

    scored.sort(key=lambda item: item.score, reverse=True)
    return scored
