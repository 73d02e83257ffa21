"""
Error types for the rules engine.

ConfigError is raised when rules or explicit positions are constructed with
bad parameters. MoveError describes an illegal move attempt; the engine
returns it inside a MoveFailure instead of raising it.
"""


class ConfigError(ValueError):
    """Invalid rules parameters or explicit position arrays."""


class MoveError(ValueError):
    """Illegal move attempt (pit out of range or empty pit)."""

    OUT_OF_RANGE = "out of range"
    EMPTY_PIT = "empty pit"

    def __init__(self, reason: str, pit_index: int):
        super().__init__(f"Illegal move {pit_index}: {reason}")
        self.reason = reason
        self.pit_index = pit_index
