"""
Kalah game rules implementation.

Implements configurable Kalah rules:
- Sowing along the mover's pits, the mover's store, then the opponent's pits
- The opponent's store is never sown into
- Capture when the last seed lands in an own pit that was empty before the move
  and the opposite pit holds seeds
- Extra turn when the last seed lands in the mover's store
- Game ends when either side's pits are all empty, optionally sweeping
  remaining seeds into their own stores

Every function is pure: states go in, new states come out.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from .config import CaptureRule, RulesConfig
from .errors import ConfigError, MoveError
from .game_state import GameState


@dataclass(frozen=True)
class SowStep:
    """One seed drop: a pit (side, index) or a store (side)."""

    kind: str  # "pit" or "store"
    side: int
    index: Optional[int] = None  # Pit index, None for stores

    @property
    def is_store(self) -> bool:
        return self.kind == "store"


@dataclass(frozen=True)
class CaptureInfo:
    """Capture descriptor attached to every move result."""

    happened: bool
    pit: Optional[int] = None  # Mover's landing pit
    opp_pit: Optional[int] = None  # Opponent pit emptied
    captured: int = 0  # Seeds added to the mover's store


NO_CAPTURE = CaptureInfo(happened=False)


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a successful move.

    Attributes:
        state: Resulting state (swept if the move ended the game)
        path: One SowStep per seed moved, in sowing order
        mover: Side that moved
        pit_index: Pit chosen
        extra_turn: Mover keeps the turn
        capture: Capture descriptor
        terminal: Game is over (checked before and after the sweep)
        swept: A sweep was applied by this move
    """

    state: GameState
    path: Tuple[SowStep, ...]
    mover: int
    pit_index: int
    extra_turn: bool
    capture: CaptureInfo
    terminal: bool
    swept: bool = False

    ok = True

    @property
    def last_step(self) -> Optional[SowStep]:
        """Where the last seed landed (None for a zero-seed move)."""
        return self.path[-1] if self.path else None


@dataclass(frozen=True)
class MoveFailure:
    """An illegal move attempt; the engine returns this instead of raising."""

    error: MoveError
    mover: int
    pit_index: int

    ok = False

    def raise_error(self) -> None:
        """Raise the carried MoveError."""
        raise self.error


ApplyResult = Union[MoveResult, MoveFailure]


def init_standard(rules: RulesConfig, start_side: int = 0) -> GameState:
    """
    Create the initial game state.

    Args:
        rules: Rules configuration
        start_side: Side to move first (anything other than 1 means side 0)

    Returns:
        Starting GameState
    """
    row = (rules.seeds_per_pit,) * rules.pits_per_side
    return GameState(pits=(row, row), store=(0, 0), to_move=1 if start_side == 1 else 0)


def init_from_arrays(
    rules: RulesConfig,
    pits0: Sequence[int],
    pits1: Sequence[int],
    store0: int = 0,
    store1: int = 0,
    start_side: int = 0,
) -> GameState:
    """
    Build an arbitrary position (openings, variants, midgame positions).

    Raises:
        ConfigError: If either pit array length differs from pits_per_side
    """
    n = rules.pits_per_side
    if len(pits0) != n:
        raise ConfigError(f"pits0 has {len(pits0)} pits, expected {n}")
    if len(pits1) != n:
        raise ConfigError(f"pits1 has {len(pits1)} pits, expected {n}")
    if any(seeds < 0 for seeds in (*pits0, *pits1, store0, store1)):
        raise ConfigError("Seed counts must be non-negative")

    return GameState(
        pits=(tuple(int(s) for s in pits0), tuple(int(s) for s in pits1)),
        store=(int(store0), int(store1)),
        to_move=1 if start_side == 1 else 0,
    )


def get_opposite_pit(pit_index: int, num_pits: int) -> int:
    """
    Get the opponent pit facing a pit, for the capture rule.

    Formula: opposite_of(i) = num_pits - 1 - i
    """
    if not 0 <= pit_index < num_pits:
        raise ValueError(f"Pit index {pit_index} out of range for {num_pits} pits")
    return num_pits - 1 - pit_index


def is_terminal(state: GameState, rules: RulesConfig) -> bool:
    """
    Check if the game has ended.

    Game ends when either side's pits are all empty, whatever the other
    side still holds.
    """
    return state.side_empty(0) or state.side_empty(1)


def apply_sweep(state: GameState, rules: RulesConfig) -> GameState:
    """
    Move each side's remaining pit seeds into its own store.

    Only applies to terminal states with seeds left in pits when
    sweep_on_game_end is enabled; otherwise the same state is returned.
    """
    if not rules.sweep_on_game_end or not is_terminal(state, rules):
        return state
    if state.seeds_in_pits == 0:
        return state

    n = state.num_pits
    return GameState(
        pits=((0,) * n, (0,) * n),
        store=(
            state.store[0] + state.side_seeds(0),
            state.store[1] + state.side_seeds(1),
        ),
        to_move=state.to_move,
    )


def generate_legal_moves(state: GameState, rules: RulesConfig) -> List[int]:
    """
    Generate all legal moves for the side to move.

    A move is legal if the chosen pit contains at least one seed, or any
    pit when allow_move_from_empty is set.

    Returns:
        Ascending list of legal pit indices
    """
    if rules.allow_move_from_empty:
        return list(range(state.num_pits))
    return [i for i, seeds in enumerate(state.pits[state.to_move]) if seeds > 0]


def sow_path(
    state: GameState, rules: RulesConfig, mover: int, pit_index: int
) -> Tuple[SowStep, ...]:
    """
    Compute the drop locations for the seeds in one pit.

    The board is a ring of 2n+1 positions relative to the mover:
    0..n-1 own pits, n own store, n+1..2n opponent pits. The opponent's
    store is not on the ring.
    """
    n = rules.pits_per_side
    ring_len = 2 * n + 1
    opponent = 1 - mover

    hand = state.pits[mover][pit_index]
    pos = (pit_index + 1) % ring_len
    path = []

    while hand > 0:
        if pos < n:
            path.append(SowStep("pit", mover, pos))
        elif pos == n:
            path.append(SowStep("store", mover))
        else:
            path.append(SowStep("pit", opponent, pos - (n + 1)))
        hand -= 1
        pos = (pos + 1) % ring_len

    return tuple(path)


def apply_move(state: GameState, rules: RulesConfig, pit_index: int) -> ApplyResult:
    """
    Apply a move and return the resulting state with move metadata.

    Implements full rules:
    1. Reject out-of-range pits and (unless allowed) empty pits
    2. Pick up all seeds from the chosen pit
    3. Sow one seed per ring position, skipping the opponent's store
    4. Kalah capture if the last seed lands in an own pit that was empty
       before the move and the opposite pit has seeds
    5. Extra turn if the last seed lands in the own store
    6. Sweep if the game is over

    Args:
        state: Current game state
        rules: Rules configuration
        pit_index: Pit on the mover's side

    Returns:
        MoveResult on success, MoveFailure for an illegal move
    """
    n = rules.pits_per_side
    mover = state.to_move
    opponent = 1 - mover

    if not 0 <= pit_index < n:
        return MoveFailure(MoveError(MoveError.OUT_OF_RANGE, pit_index), mover, pit_index)
    if state.pits[mover][pit_index] == 0 and not rules.allow_move_from_empty:
        return MoveFailure(MoveError(MoveError.EMPTY_PIT, pit_index), mover, pit_index)

    path = sow_path(state, rules, mover, pit_index)

    # Mutable copies; the input state is never touched
    pits = [list(state.pits[0]), list(state.pits[1])]
    store = list(state.store)

    pits[mover][pit_index] = 0
    for step in path:
        if step.is_store:
            store[step.side] += 1
        else:
            pits[step.side][step.index] += 1

    last = path[-1] if path else None
    capture = NO_CAPTURE

    if (
        rules.capture_rule == CaptureRule.KALAH
        and last is not None
        and not last.is_store
        and last.side == mover
    ):
        i = last.index
        # Emptiness is judged before the move began, not before the last seed
        if state.pits[mover][i] == 0 and pits[mover][i] == 1:
            opp_i = get_opposite_pit(i, n)
            opp_seeds = pits[opponent][opp_i]
            if opp_seeds > 0:
                pits[opponent][opp_i] = 0
                pits[mover][i] = 0
                store[mover] += opp_seeds + 1
                capture = CaptureInfo(
                    happened=True, pit=i, opp_pit=opp_i, captured=opp_seeds + 1
                )

    extra_turn = bool(
        rules.extra_turn_on_store
        and last is not None
        and last.is_store
        and last.side == mover
    )

    next_state = GameState(
        pits=(tuple(pits[0]), tuple(pits[1])),
        store=(store[0], store[1]),
        to_move=mover if extra_turn else opponent,
    )

    terminal_before_sweep = is_terminal(next_state, rules)
    final_state = apply_sweep(next_state, rules)
    terminal = terminal_before_sweep or is_terminal(final_state, rules)

    return MoveResult(
        state=final_state,
        path=path,
        mover=mover,
        pit_index=pit_index,
        extra_turn=extra_turn,
        capture=capture,
        terminal=terminal,
        swept=final_state is not next_state,
    )


def final_margin(state: GameState, rules: RulesConfig) -> int:
    """
    Score difference after every remaining seed is collected.

    Remaining seeds on each side count for that side, as in the sweep.

    Returns:
        Side 0 total minus side 1 total (positive = side 0 ahead)
    """
    return (state.store[0] + state.side_seeds(0)) - (state.store[1] + state.side_seeds(1))


def get_game_result(state: GameState, rules: RulesConfig) -> Optional[str]:
    """
    Get human-readable game result.

    Returns:
        Result string or None if not terminal
    """
    if not is_terminal(state, rules):
        return None

    value = final_margin(state, rules)

    if value > 0:
        return f"Side 0 wins by {value}"
    elif value < 0:
        return f"Side 1 wins by {-value}"
    else:
        return "Tie game"
