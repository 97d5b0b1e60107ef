from __future__ import annotations

import logging
import random
from typing import Iterator, Optional, Sequence, Tuple

from tetris_engine.errors import EngineStateError
from tetris_engine.game.grid import CellType, PlayGrid
from tetris_engine.game.pieces import (
    SHAPE_COUNT,
    SYMMETRIC_SHAPE_INDEX,
    Point,
    Shape,
    cells_at,
    rotate_points,
    shape_points,
)

logger = logging.getLogger(__name__)


class PieceController:
    """Owns the falling piece: its points, anchor, ghost preview and the next piece.

    All grid writes made on behalf of the active piece go through here. The
    footprint (SHAPE cells plus GHOST cells) is always erased before the anchor
    or the points change and redrawn afterwards.
    """

    def __init__(self, grid: PlayGrid, rng: random.Random, spawn_row: int = 0) -> None:
        self.grid = grid
        self.rng = rng
        self.spawn_row = spawn_row
        self.shape: Shape = shape_points(0)
        self.shape_index = 0
        self.next_shape: Shape = shape_points(0)
        self.next_shape_index = 0
        self.col = 0
        self.row = 0
        self.ghost_row = 0
        self.placed = False

    @property
    def spawn_col(self) -> int:
        return self.grid.cols // 2

    def draw_next(self) -> int:
        self.next_shape_index = self.rng.randrange(SHAPE_COUNT)
        self.next_shape = shape_points(self.next_shape_index)
        return self.next_shape_index

    def spawn_next(self) -> bool:
        """Promote the next piece to active at the spawn anchor.

        Returns False when the spawn position collides, which ends the game.
        """
        self.col = self.spawn_col
        self.row = self.spawn_row
        self.shape_index = self.next_shape_index
        self.shape = self.next_shape
        self.draw_next()
        if not self.is_valid(self.shape, self.col, self.row):
            logger.debug("spawn of shape %d blocked at (%d, %d)", self.shape_index, self.col, self.row)
            self.placed = False
            return False
        self._draw()
        self.placed = True
        return True

    # validity

    def is_valid(self, shape: Sequence[Point], col: int, row: int, check_sides: bool = True) -> bool:
        for x, y in cells_at(shape, col, row):
            if y >= self.grid.rows:
                return False
            if check_sides and not 0 <= x < self.grid.cols:
                return False
            # Rows above the board never collide.
            if self.grid.is_inside(x, y) and self.grid.is_fixed(x, y):
                return False
        return True

    # movement

    def try_move(self, delta_col: int, delta_row: int) -> bool:
        return self.move_to(self.col + delta_col, self.row + delta_row)

    def move_to(self, col: int, row: int) -> bool:
        if not self.placed or not self.is_valid(self.shape, col, row):
            return False
        self._erase()
        self.col = col
        self.row = row
        self._draw()
        return True

    def drop(self) -> int:
        rows = 0
        while self.try_move(0, 1):
            rows += 1
        return rows

    def rotate(self, clockwise: bool = True) -> bool:
        if not self.placed or self.shape_index == SYMMETRIC_SHAPE_INDEX:
            return False
        rotated = rotate_points(self.shape, clockwise)
        # Side walls are ignored here; the kick below pulls the piece back in.
        if not self.is_valid(rotated, self.col, self.row, check_sides=False):
            return False
        kick_col = self._wall_kick(rotated)
        if kick_col is None:
            return False
        self._erase()
        self.shape = rotated
        self.col = kick_col
        self._draw()
        return True

    def _wall_kick(self, shape: Shape) -> Optional[int]:
        """Return the first column where the rotated shape fits, or None."""
        step = 1 if self.col < self.grid.cols // 2 else -1
        for point in shape:
            kick_col = self.col
            slid = 0
            while not 0 <= kick_col + point.x < self.grid.cols and slid <= self.grid.cols:
                kick_col += step
                slid += 1
            if slid > self.grid.cols:
                continue
            if self.is_valid(shape, kick_col, self.row):
                return kick_col
        return None

    def lock(self) -> None:
        """Turn the active piece into FIXED cells. Blocks above row 0 are dropped."""
        if not self.placed:
            raise EngineStateError("no active piece to lock")
        self._erase_ghost()
        for x, y in self._visible_cells(self.row):
            if self.grid.type_at(x, y) != CellType.SHAPE:
                raise EngineStateError(f"cell ({x}, {y}) under the active piece is not a shape cell")
            self.grid.set_cell(x, y, CellType.FIXED, self.shape_index)
        self.placed = False

    # footprint

    def _visible_cells(self, row: int) -> Iterator[Tuple[int, int]]:
        for x, y in cells_at(self.shape, self.col, row):
            if self.grid.is_inside(x, y):
                yield x, y

    def _erase(self) -> None:
        for x, y in self._visible_cells(self.row):
            if self.grid.type_at(x, y) != CellType.SHAPE:
                raise EngineStateError(f"expected shape cell at ({x}, {y})")
            self.grid.clear_cell(x, y)
        self._erase_ghost()

    def _draw(self) -> None:
        for x, y in self._visible_cells(self.row):
            if self.grid.type_at(x, y) not in (CellType.VOID, CellType.GHOST):
                raise EngineStateError(f"cannot draw active piece over ({x}, {y})")
            self.grid.set_cell(x, y, CellType.SHAPE, self.shape_index)
        self._draw_ghost()

    def _erase_ghost(self) -> None:
        for x, y in self._visible_cells(self.ghost_row):
            if self.grid.type_at(x, y) == CellType.GHOST:
                self.grid.clear_cell(x, y)

    def _draw_ghost(self) -> None:
        self.ghost_row = self.row
        while self.is_valid(self.shape, self.col, self.ghost_row + 1):
            self.ghost_row += 1
        for x, y in self._visible_cells(self.ghost_row):
            if self.grid.type_at(x, y) == CellType.VOID:
                self.grid.set_cell(x, y, CellType.GHOST, self.shape_index)
