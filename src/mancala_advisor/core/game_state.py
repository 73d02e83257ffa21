"""
Game state representation.

A Kalah game state consists of:
- Two rows of pits, one per side, indexed 0..n-1 in sowing order
- Two stores
- The side to move

States are immutable values: every transition builds a new instance from
tuples, so a caller holding an earlier state never observes a change.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GameState:
    """
    Immutable game state representation.

    Board layout for n=6 (side 1 sows right-to-left along the top row):
          Side 1 pits (5-0)
       [5] [4] [3] [2] [1] [0]
    [S1]                       [S0]  <- Stores
       [0] [1] [2] [3] [4] [5]
          Side 0 pits (0-5)

    Pit n-1 of each side is the one next to that side's own store.
    """

    pits: Tuple[Tuple[int, ...], Tuple[int, ...]]  # pits[side][index]
    store: Tuple[int, int]  # store[side]
    to_move: int  # Side to move (0 or 1)

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if len(self.pits) != 2 or len(self.store) != 2:
            raise ValueError("A state needs exactly two pit rows and two stores")
        if len(self.pits[0]) != len(self.pits[1]):
            raise ValueError(
                f"Pit rows differ in length: {len(self.pits[0])} vs {len(self.pits[1])}"
            )
        if self.to_move not in (0, 1):
            raise ValueError(f"Invalid side to move {self.to_move}, must be 0 or 1")
        if any(seeds < 0 for row in self.pits for seeds in row):
            raise ValueError("Negative seed count not allowed")
        if any(seeds < 0 for seeds in self.store):
            raise ValueError("Negative store count not allowed")

    @property
    def num_pits(self) -> int:
        """Number of pits per side."""
        return len(self.pits[0])

    @property
    def total_seeds(self) -> int:
        """Total seeds on the board, stores included."""
        return sum(self.pits[0]) + sum(self.pits[1]) + self.store[0] + self.store[1]

    @property
    def seeds_in_pits(self) -> int:
        """Seeds remaining in pits (not in stores)."""
        return sum(self.pits[0]) + sum(self.pits[1])

    def side_seeds(self, side: int) -> int:
        """Seeds left in one side's pits."""
        return sum(self.pits[side])

    def side_empty(self, side: int) -> bool:
        """True when every pit on the side is empty."""
        return all(seeds == 0 for seeds in self.pits[side])

    def __str__(self) -> str:
        """Human-readable board representation."""
        pit_width = 3
        top = " ".join(f"{s:>{pit_width}}" for s in reversed(self.pits[1]))
        bottom = " ".join(f"{s:>{pit_width}}" for s in self.pits[0])
        store_width = len(top)

        board_str = f"""
      {top}
[{self.store[1]:>2}] {' ' * store_width} [{self.store[0]:>2}]
      {bottom}

Side {self.to_move} to move
"""
        return board_str
