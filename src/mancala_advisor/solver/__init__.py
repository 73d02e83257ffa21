"""Alpha-beta search and evaluation."""

from .alphabeta import (
    NO_MOVE_SCORE,
    Recommendation,
    ScoredMove,
    SearchStats,
    alphabeta,
    best_move,
    score_moves,
)
from .evaluation import SearchRoot, evaluate, order_moves

__all__ = [
    "NO_MOVE_SCORE",
    "Recommendation",
    "ScoredMove",
    "SearchStats",
    "alphabeta",
    "best_move",
    "score_moves",
    "SearchRoot",
    "evaluate",
    "order_moves",
]
