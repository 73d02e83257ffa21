"""Game sessions and move notation for front ends."""

from .notation import (
    NotatedMove,
    NotationError,
    ReplayResult,
    decode_moves,
    encode_move,
    encode_moves,
    replay_moves,
)
from .session import GameMode, GameSession, GameSummary

__all__ = [
    "NotatedMove",
    "NotationError",
    "ReplayResult",
    "decode_moves",
    "encode_move",
    "encode_moves",
    "replay_moves",
    "GameMode",
    "GameSession",
    "GameSummary",
]
