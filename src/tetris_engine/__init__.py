"""Falling-block puzzle rules engine."""

from tetris_engine.errors import ConfigError, EngineError, EngineStateError, GridIndexError
from tetris_engine.game import (
    Action,
    Cell,
    CellType,
    Direction,
    GameConfig,
    SessionState,
    TetrisGame,
    TickResult,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Cell",
    "CellType",
    "ConfigError",
    "Direction",
    "EngineError",
    "EngineStateError",
    "GameConfig",
    "GridIndexError",
    "SessionState",
    "TetrisGame",
    "TickResult",
]
