"""Rules engine for the falling-block game.

Exports the engine and supporting classes:
- PlayGrid / Cell / CellType: playfield cells and line clearing
- Point, TetrominoType, shape_points: the shape catalog
- PieceController: active piece movement, rotation and wall kicks
- ScoringRules / PacingRules / ProgressTracker: score, levels and tick pacing
- TetrisGame: session state machine driven by tick/move/rotate/drop
"""

from .grid import Cell, CellType, PlayGrid
from .pieces import (
    POINT_COUNT,
    SHAPE_COUNT,
    SYMMETRIC_SHAPE_INDEX,
    Point,
    TetrominoType,
    shape_points,
)
from .controller import PieceController
from .rules import PacingRules, ProgressTracker, ScoringRules
from .core import Action, Direction, GameConfig, SessionState, TetrisGame, TickResult

__all__ = [
    "Cell",
    "CellType",
    "PlayGrid",
    "POINT_COUNT",
    "SHAPE_COUNT",
    "SYMMETRIC_SHAPE_INDEX",
    "Point",
    "TetrominoType",
    "shape_points",
    "PieceController",
    "PacingRules",
    "ProgressTracker",
    "ScoringRules",
    "Action",
    "Direction",
    "GameConfig",
    "SessionState",
    "TetrisGame",
    "TickResult",
]
