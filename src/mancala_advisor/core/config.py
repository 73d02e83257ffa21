"""
Rules configuration for Kalah-family games.

A RulesConfig is created once per session and never changes. Standard
Kalah(6,4) is the default: extra turn on own store, sweep on game end,
Kalah capture, no moves from empty pits.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import ConfigError


class CaptureRule(str, Enum):
    """Capture variants."""

    KALAH = "kalah"  # Last seed in own empty pit takes the opposite pit
    NONE = "none"


def _is_int(value) -> bool:
    # bool is a subclass of int but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class RulesConfig:
    """
    Immutable game parameters.

    Attributes:
        pits_per_side: Number of pits per player (n)
        seeds_per_pit: Seeds placed in every pit at the start
        extra_turn_on_store: Mover plays again when the last seed lands in own store
        sweep_on_game_end: Remaining pit seeds go to their own side's store at the end
        capture_rule: Capture variant
        allow_move_from_empty: Empty pits may be chosen (sowing zero seeds)
    """

    pits_per_side: int = 6
    seeds_per_pit: int = 4
    extra_turn_on_store: bool = True
    sweep_on_game_end: bool = True
    capture_rule: CaptureRule = CaptureRule.KALAH
    allow_move_from_empty: bool = False

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not _is_int(self.pits_per_side) or self.pits_per_side <= 0:
            raise ConfigError(
                f"pits_per_side must be a positive integer, got {self.pits_per_side!r}"
            )
        if not _is_int(self.seeds_per_pit) or self.seeds_per_pit < 0:
            raise ConfigError(
                f"seeds_per_pit must be a non-negative integer, got {self.seeds_per_pit!r}"
            )
        try:
            capture_rule = CaptureRule(self.capture_rule)
        except ValueError:
            raise ConfigError(f"Unknown capture rule {self.capture_rule!r}") from None
        # Frozen dataclass: normalise string values through object.__setattr__
        object.__setattr__(self, "capture_rule", capture_rule)
        for flag in ("extra_turn_on_store", "sweep_on_game_end", "allow_move_from_empty"):
            object.__setattr__(self, flag, bool(getattr(self, flag)))

    @property
    def total_seeds(self) -> int:
        """Seeds in play for a standard start (conserved by every move)."""
        return 2 * self.pits_per_side * self.seeds_per_pit

    @property
    def near_store_pit(self) -> int:
        """Index of the pit closest to a side's own store."""
        return self.pits_per_side - 1

    def __str__(self) -> str:
        return f"Kalah({self.pits_per_side},{self.seeds_per_pit})"


def create_rules(
    pits_per_side: int = 6,
    seeds_per_pit: int = 4,
    extra_turn_on_store: bool = True,
    sweep_on_game_end: bool = True,
    capture_rule: Union[CaptureRule, str] = CaptureRule.KALAH,
    allow_move_from_empty: bool = False,
) -> RulesConfig:
    """
    Build a validated rules configuration.

    Raises:
        ConfigError: If the pit count is not a positive integer, the seed
            count is not a non-negative integer, or the capture rule is unknown
    """
    return RulesConfig(
        pits_per_side=pits_per_side,
        seeds_per_pit=seeds_per_pit,
        extra_turn_on_store=extra_turn_on_store,
        sweep_on_game_end=sweep_on_game_end,
        capture_rule=capture_rule,
        allow_move_from_empty=allow_move_from_empty,
    )
