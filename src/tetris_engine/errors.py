from __future__ import annotations


class EngineError(Exception):
    """Base class for errors raised by the rules engine."""


class GridIndexError(EngineError, IndexError):
    """A cell lookup fell outside the playfield."""

    def __init__(self, col: int, row: int, cols: int, rows: int) -> None:
        super().__init__(f"cell ({col}, {row}) is outside the {cols}x{rows} grid")
        self.col = col
        self.row = row


class EngineStateError(EngineError):
    """Internal bookkeeping disagrees with the grid contents.

    Raised instead of silently repairing the board; it always points at a bug
    in the engine, never at a rejected move.
    """


class ConfigError(EngineError, ValueError):
    pass
