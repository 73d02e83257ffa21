"""
Single-character move notation.

Each ply is one letter: lowercase for side 0, uppercase for side 1, and the
letter's offset from 'a'/'A' is the pit index. "cCa" means side 0 plays
pit 2, side 1 plays pit 2, side 0 plays pit 0.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..core import GameState, RulesConfig, apply_move, init_standard


class NotationError(ValueError):
    """Malformed or unplayable move string (user input, not an engine fault)."""


@dataclass(frozen=True)
class NotatedMove:
    """A decoded ply."""

    side: int
    pit_index: int

    def __str__(self) -> str:
        return encode_move(self.side, self.pit_index)


@dataclass(frozen=True)
class ReplayResult:
    """Outcome of replaying a move string from the standard start."""

    state: GameState
    moves: Tuple[NotatedMove, ...]
    terminal: bool


def encode_move(mover: int, pit_index: int) -> str:
    """Letter for a ply."""
    if not 0 <= pit_index < 26:
        raise NotationError(f"Pit index {pit_index} cannot be written as a letter")
    base = "a" if mover == 0 else "A"
    return chr(ord(base) + pit_index)


def encode_moves(moves: Iterable[Tuple[int, int]]) -> str:
    """Encode (mover, pit_index) pairs as a move string."""
    return "".join(encode_move(mover, pit_index) for mover, pit_index in moves)


def decode_moves(text: str) -> List[NotatedMove]:
    """
    Decode a move string.

    Whitespace is ignored.

    Raises:
        NotationError: On any character that is not an ASCII letter
    """
    moves = []
    for ch in (text or "").strip():
        if "a" <= ch <= "z":
            moves.append(NotatedMove(side=0, pit_index=ord(ch) - ord("a")))
        elif "A" <= ch <= "Z":
            moves.append(NotatedMove(side=1, pit_index=ord(ch) - ord("A")))
        elif not ch.isspace():
            raise NotationError(f"Invalid character: {ch!r}")
    return moves


def replay_moves(rules: RulesConfig, text: str, start_side: int = 0) -> ReplayResult:
    """
    Replay a move string from the standard start position.

    Each ply's side must match the engine's side to move. Replay stops
    early if the game ends.

    Raises:
        NotationError: On a bad character, turn mismatch, out-of-range pit
            or illegal move
    """
    state = init_standard(rules, start_side)
    played = []
    terminal = False

    for move in decode_moves(text):
        if move.side != state.to_move:
            raise NotationError(
                f"Turn mismatch at {str(move)!r} (expected side {state.to_move})"
            )
        if move.pit_index >= rules.pits_per_side:
            raise NotationError(f"Pit out of range in move {str(move)!r}")

        result = apply_move(state, rules, move.pit_index)
        if not result.ok:
            raise NotationError(f"Illegal move {str(move)!r}: {result.error.reason}")

        played.append(move)
        state = result.state
        terminal = result.terminal
        if terminal:
            break

    return ReplayResult(state=state, moves=tuple(played), terminal=terminal)
