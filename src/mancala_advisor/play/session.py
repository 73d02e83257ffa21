"""
Game session: move history, undo and observer callbacks around the engine.

The session is the boundary between the pure engine and a presentation
layer. Front ends subscribe to receive each MoveResult (for example to
animate its sow path) and ask for a GameSummary once the game is over to
hand to whatever telemetry transport they use.
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..core import (
    GameState,
    MoveResult,
    RulesConfig,
    apply_move,
    generate_legal_moves,
    init_standard,
    is_terminal,
)
from ..solver import best_move
from .notation import encode_moves, replay_moves

logger = logging.getLogger(__name__)

MoveObserver = Callable[[MoveResult], None]


class GameMode(str, Enum):
    """Who controls each side."""

    HvAI = "HvAI"  # Human first, AI second
    AIvH = "AIvH"  # AI first, human second
    HvH = "HvH"
    AIvAI = "AIvAI"

    def ai_side(self) -> Optional[int]:
        """Side played by the AI in single-AI modes."""
        if self is GameMode.HvAI:
            return 1
        if self is GameMode.AIvH:
            return 0
        return None

    def is_human_turn(self, to_move: int) -> bool:
        if self is GameMode.HvH:
            return True
        if self is GameMode.AIvAI:
            return False
        return to_move != self.ai_side()


@dataclass(frozen=True)
class GameSummary:
    """Completed-game record handed to a telemetry sink."""

    mode: str
    depth: Optional[int]  # None for HvH
    moves: str
    plies: int
    final_store0: int
    final_store1: int

    def to_dict(self) -> dict:
        return asdict(self)


class GameSession:
    """
    Authoritative game state plus the list of moves that produced it.

    Undo works by replaying the shortened history from the start position,
    so the state is always exactly what the engine produces.
    """

    def __init__(
        self,
        rules: RulesConfig,
        mode: GameMode = GameMode.HvAI,
        depth: int = 6,
        start_side: int = 0,
    ):
        """
        Initialize a session at the standard start.

        Args:
            rules: Rules configuration
            mode: Who controls each side
            depth: Default AI search depth
            start_side: Side to move first
        """
        self.rules = rules
        self.mode = GameMode(mode)
        self.depth = depth
        self.start_side = start_side
        self.state = init_standard(rules, start_side)
        self.history: List[Tuple[int, int]] = []  # (mover, pit_index)
        self._observers: List[MoveObserver] = []

    def subscribe(self, observer: MoveObserver) -> None:
        """Register a callback receiving every successful MoveResult."""
        self._observers.append(observer)

    @property
    def plies(self) -> int:
        return len(self.history)

    @property
    def move_string(self) -> str:
        return encode_moves(self.history)

    @property
    def is_over(self) -> bool:
        return is_terminal(self.state, self.rules) or not generate_legal_moves(
            self.state, self.rules
        )

    def is_human_turn(self) -> bool:
        return self.mode.is_human_turn(self.state.to_move)

    def play(self, pit_index: int) -> MoveResult:
        """
        Play a pit for the side to move.

        Raises:
            MoveError: If the move is illegal
        """
        result = apply_move(self.state, self.rules, pit_index)
        if not result.ok:
            result.raise_error()

        self.history.append((result.mover, result.pit_index))
        self.state = result.state
        logger.debug("Side %d played pit %d", result.mover, pit_index)

        for observer in self._observers:
            observer(result)
        return result

    def play_ai(self, depth: Optional[int] = None) -> Optional[MoveResult]:
        """
        Let the search pick and play a move.

        Returns:
            The MoveResult, or None when the side to move has no move
        """
        if self.is_over:
            return None
        rec = best_move(self.state, self.rules, self.depth if depth is None else depth)
        if not rec.has_move:
            return None
        return self.play(rec.move)

    def _replay(self, history: List[Tuple[int, int]]) -> GameState:
        state = init_standard(self.rules, self.start_side)
        for _, pit_index in history:
            result = apply_move(state, self.rules, pit_index)
            if not result.ok:
                result.raise_error()
            state = result.state
        return state

    def undo_one(self) -> bool:
        """Take back the last ply. Returns False if there was nothing to undo."""
        if not self.history:
            return False
        self.history.pop()
        self.state = self._replay(self.history)
        return True

    def undo_to_human_turn(self) -> bool:
        """
        Take back plies until it is a human's turn again.

        In single-AI modes this removes the AI's reply together with the
        human move before it; elsewhere it undoes one ply.
        """
        if self.mode.ai_side() is None:
            return self.undo_one()
        if not self.history:
            return False

        self.history.pop()
        while self.history and self.state_after(self.history).to_move == self.mode.ai_side():
            self.history.pop()
        self.state = self._replay(self.history)
        return True

    def state_after(self, history: List[Tuple[int, int]]) -> GameState:
        """State reached by a move history from this session's start."""
        return self._replay(history)

    def load(self, text: str) -> None:
        """
        Replace the game with the moves in a move string.

        The session is left unchanged if the string cannot be replayed.

        Raises:
            NotationError: On malformed or unplayable input
        """
        replay = replay_moves(self.rules, text, self.start_side)
        self.history = [(m.side, m.pit_index) for m in replay.moves]
        self.state = replay.state

    def reset(self) -> None:
        self.history = []
        self.state = init_standard(self.rules, self.start_side)

    def summary(self) -> Optional[GameSummary]:
        """
        Completed-game summary.

        Returns:
            None for AI-vs-AI games and games without moves
        """
        if self.mode is GameMode.AIvAI or not self.history:
            return None
        return GameSummary(
            mode=self.mode.value,
            depth=None if self.mode is GameMode.HvH else self.depth,
            moves=self.move_string,
            plies=self.plies,
            final_store0=self.state.store[0],
            final_store1=self.state.store[1],
        )
