"""Core game state representation and rules."""

from .config import CaptureRule, RulesConfig, create_rules
from .errors import ConfigError, MoveError
from .game_state import GameState
from .rules import (
    NO_CAPTURE,
    CaptureInfo,
    MoveFailure,
    MoveResult,
    SowStep,
    init_standard,
    init_from_arrays,
    generate_legal_moves,
    sow_path,
    apply_move,
    apply_sweep,
    is_terminal,
    get_opposite_pit,
    final_margin,
    get_game_result,
)

__all__ = [
    "CaptureRule",
    "RulesConfig",
    "create_rules",
    "ConfigError",
    "MoveError",
    "GameState",
    "NO_CAPTURE",
    "CaptureInfo",
    "MoveFailure",
    "MoveResult",
    "SowStep",
    "init_standard",
    "init_from_arrays",
    "generate_legal_moves",
    "sow_path",
    "apply_move",
    "apply_sweep",
    "is_terminal",
    "get_opposite_pit",
    "final_margin",
    "get_game_result",
]
