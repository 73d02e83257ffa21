"""Kalah rules engine and alpha-beta move advisor."""

__version__ = "0.1.0"
