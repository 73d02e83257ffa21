"""
Leaf evaluation and move ordering for alpha-beta search.

Scores are always from the root player's perspective and measure the swing
in store counts since the search root, so absolute material does not matter.
"""

from dataclasses import dataclass
from typing import List, Sequence

from ..core import GameState, RulesConfig, apply_move

STORE_WEIGHT = 10
NEAR_STORE_EMPTY_BONUS = 5

EXTRA_TURN_PRIORITY = 1000
CAPTURE_PRIORITY = 200


@dataclass(frozen=True)
class SearchRoot:
    """Root player and the store counts at the search root."""

    root_player: int
    start_store_root: int
    start_store_opp: int

    @classmethod
    def from_state(cls, state: GameState) -> "SearchRoot":
        root = state.to_move
        return cls(
            root_player=root,
            start_store_root=state.store[root],
            start_store_opp=state.store[1 - root],
        )


def evaluate(state: GameState, rules: RulesConfig, root: SearchRoot, rep_root: int) -> int:
    """
    Evaluate a leaf for the root player.

    score = 10 * (root store gain - opponent store gain)
            + extra turns earned by the root on this line
            + 5 if the root's near-store pit is empty

    Args:
        state: Leaf state
        rules: Rules configuration
        root: Search root snapshot
        rep_root: Extra turns earned by the root player along the path

    Returns:
        Heuristic score
    """
    me = root.root_player
    gain = state.store[me] - root.start_store_root
    opp_gain = state.store[1 - me] - root.start_store_opp
    near_store_empty = 1 if state.pits[me][rules.near_store_pit] == 0 else 0

    return STORE_WEIGHT * (gain - opp_gain) + rep_root + NEAR_STORE_EMPTY_BONUS * near_store_empty


def move_priority(state: GameState, rules: RulesConfig, move: int) -> float:
    """One-ply ordering score: extra turn, then capture, then store gain."""
    result = apply_move(state, rules, move)
    if not result.ok:
        return float("-inf")

    mover = state.to_move
    score = result.state.store[mover] - state.store[mover]
    if result.extra_turn:
        score += EXTRA_TURN_PRIORITY
    if result.capture.happened:
        score += CAPTURE_PRIORITY
    return score


def order_moves(state: GameState, rules: RulesConfig, moves: Sequence[int]) -> List[int]:
    """
    Sort candidate moves best-first for pruning.

    The sort is stable, so equal priorities keep their incoming order.
    """
    scored = [(move_priority(state, rules, move), move) for move in moves]
    scored.sort(key=lambda item: item[0], reverse=True)
    return [move for _, move in scored]
