from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Tuple

from tetris_engine.errors import ConfigError
from tetris_engine.game.controller import PieceController
from tetris_engine.game.grid import Cell, CellType, PlayGrid
from tetris_engine.game.pieces import Shape
from tetris_engine.game.rules import PacingRules, ProgressTracker, ScoringRules

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    DOWN = 2
    ROTATE_CW = 3
    ROTATE_CCW = 4
    HARD_DROP = 5
    TICK = 6


@dataclass
class GameConfig:
    cols: int = 10
    rows: int = 20
    random_seed: Optional[int] = None
    spawn_row: int = 0

    def __post_init__(self) -> None:
        if self.cols < 4 or self.rows < 4:
            raise ConfigError(f"board must be at least 4x4, got {self.cols}x{self.rows}")
        if not 0 <= self.spawn_row < self.rows:
            raise ConfigError(f"spawn_row {self.spawn_row} is outside 0..{self.rows - 1}")


@dataclass(frozen=True)
class TickResult:
    """Outcome of one `tick`. Falsy when the tick was rejected."""

    accepted: bool
    moved: bool = False
    locked: bool = False
    rows_completed: int = 0
    score_delta: int = 0
    level_up: bool = False
    game_over: bool = False

    def __bool__(self) -> bool:
        return self.accepted


REJECTED_TICK = TickResult(accepted=False)


class TetrisGame:
    """Falling-block session: Idle -> Running -> GameOver.

    Mutating commands are only honoured while running; otherwise they return a
    falsy value and leave everything untouched. The board stays readable after
    the game ends so a driver can draw the final position.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        pacing: Optional[PacingRules] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.pacing = pacing or PacingRules()
        self.rng = rng or random.Random(self.config.random_seed)
        self._grid = PlayGrid(self.config.cols, self.config.rows)
        self._piece = PieceController(self._grid, self.rng, self.config.spawn_row)
        self._progress = ProgressTracker(self.rules)
        self._state = SessionState.IDLE

    # lifecycle

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state == SessionState.RUNNING

    def start_game(self) -> bool:
        if self.running:
            logger.debug("start_game ignored: session already running")
            return False
        self._grid.reset()
        self._progress.reset()
        self._piece.draw_next()
        self._state = SessionState.RUNNING
        logger.info("new game on a %dx%d board", self._grid.cols, self._grid.rows)
        if not self._piece.spawn_next():
            self.end_game()
        return True

    def end_game(self) -> None:
        """Stop the session; the board is left as is."""
        if self._state == SessionState.GAME_OVER:
            return
        self._state = SessionState.GAME_OVER
        logger.info(
            "game over: score=%d level=%d rows=%d",
            self._progress.score,
            self._progress.level,
            self._progress.rows_completed,
        )

    def tick(self) -> TickResult:
        if not self.running:
            logger.debug("tick ignored in state %s", self._state.value)
            return REJECTED_TICK
        if self._piece.try_move(0, 1):
            return TickResult(accepted=True, moved=True)

        self._piece.lock()
        rows = self._complete_rows()
        delta = self._progress.apply_clear(rows)
        level_up = self._progress.maybe_level_up()
        if rows:
            logger.debug("cleared %d row(s) for %d points", rows, delta)
        if level_up:
            logger.info("level %d reached", self._progress.level)
        spawned = self._piece.spawn_next()
        if not spawned:
            self.end_game()
        return TickResult(
            accepted=True,
            locked=True,
            rows_completed=rows,
            score_delta=delta,
            level_up=level_up,
            game_over=not spawned,
        )

    def _complete_rows(self) -> int:
        rows = self._grid.clear_complete_rows()
        self._progress.record_rows(rows)
        return rows

    # commands

    def move(self, direction: Direction) -> bool:
        delta_col, delta_row = direction.value
        return self.try_move(delta_col, delta_row)

    def try_move(self, delta_col: int, delta_row: int) -> bool:
        if not self.running:
            return False
        return self._piece.try_move(delta_col, delta_row)

    def hard_drop(self) -> int:
        """Slide the piece down until it lands. Locking is left to the next tick."""
        if not self.running:
            return 0
        return self._piece.drop()

    def rotate(self, clockwise: bool = True) -> bool:
        if not self.running:
            return False
        return self._piece.rotate(clockwise)

    def set_col(self, col: int) -> bool:
        if not self.running or not 0 <= col < self._grid.cols:
            return False
        return self._piece.move_to(col, self._piece.row)

    def set_row(self, row: int) -> bool:
        if not self.running or not 0 <= row < self._grid.rows:
            return False
        return self._piece.move_to(self._piece.col, row)

    def apply(self, action: Action) -> bool:
        """Dispatch an input-driver action; returns whether it had any effect."""
        if action == Action.LEFT:
            return self.move(Direction.LEFT)
        if action == Action.RIGHT:
            return self.move(Direction.RIGHT)
        if action == Action.DOWN:
            return self.move(Direction.DOWN)
        if action == Action.ROTATE_CW:
            return self.rotate(True)
        if action == Action.ROTATE_CCW:
            return self.rotate(False)
        if action == Action.HARD_DROP:
            return self.hard_drop() > 0
        if action == Action.TICK:
            return bool(self.tick())
        raise ValueError(f"unknown action {action!r}")

    # queries

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def rows(self) -> int:
        return self._grid.rows

    def cell_at(self, col: int, row: int) -> Cell:
        return self._grid.cell_at(col, row)

    def next_shape(self) -> Shape:
        return self._piece.next_shape

    def next_shape_index(self) -> int:
        return self._piece.next_shape_index

    def shape(self) -> Shape:
        return self._piece.shape

    def shape_index(self) -> int:
        return self._piece.shape_index

    def col(self) -> int:
        return self._piece.col

    def row(self) -> int:
        return self._piece.row

    def ghost_row(self) -> int:
        return self._piece.ghost_row

    def score(self) -> int:
        return self._progress.score

    def level(self) -> int:
        return self._progress.level

    def rows_completed(self) -> int:
        return self._progress.rows_completed

    def is_game_over(self) -> bool:
        return self._state == SessionState.GAME_OVER

    def tick_interval(self) -> float:
        return self.pacing.tick_interval(self._progress.level)

    def get_state(self) -> Dict[str, Any]:
        cell_types, shape_indices = self._grid.clone_state()
        return {
            "cell_types": cell_types,
            "shape_indices": shape_indices,
            "anchor": (self._piece.col, self._piece.row),
            "shape_index": self._piece.shape_index,
            "next_shape_index": self._piece.next_shape_index,
            "ghost_row": self._piece.ghost_row,
            "score": self._progress.score,
            "level": self._progress.level,
            "rows_completed": self._progress.rows_completed,
            "state": self._state.value,
        }

    def get_game_stats(self) -> Dict[str, Any]:
        return {
            "final_score": self._progress.score,
            "level": self._progress.level,
            "rows_completed": self._progress.rows_completed,
            "fixed_cells": self._grid.count(CellType.FIXED),
            "stack_height": self._grid.get_max_height(),
            "holes": self._grid.count_holes(),
        }

    def anchor(self) -> Tuple[int, int]:
        return self._piece.col, self._piece.row
