from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

import numpy as np

from tetris_engine.errors import GridIndexError


class CellType(IntEnum):
    VOID = 0
    SHAPE = 1
    GHOST = 2
    FIXED = 3


NO_SHAPE = -1


@dataclass(frozen=True)
class Cell:
    """Snapshot of one grid position. `shape_index` is -1 for void cells."""

    cell_type: CellType = CellType.VOID
    shape_index: int = NO_SHAPE

    @property
    def is_void(self) -> bool:
        return self.cell_type == CellType.VOID


class PlayGrid:
    """Dense cols x rows playfield.

    Two parallel int8 arrays indexed ``[row, col]`` hold the cell type and the
    shape index of every cell. Row 0 is the top of the board.
    """

    def __init__(self, cols: int, rows: int) -> None:
        self.cols = int(cols)
        self.rows = int(rows)
        self.cell_types = np.zeros((self.rows, self.cols), dtype=np.int8)
        self.shape_indices = np.full((self.rows, self.cols), NO_SHAPE, dtype=np.int8)

    def reset(self) -> None:
        self.cell_types.fill(CellType.VOID)
        self.shape_indices.fill(NO_SHAPE)

    def is_inside(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def _check(self, col: int, row: int) -> None:
        if not self.is_inside(col, row):
            raise GridIndexError(col, row, self.cols, self.rows)

    def cell_at(self, col: int, row: int) -> Cell:
        self._check(col, row)
        return Cell(CellType(int(self.cell_types[row, col])), int(self.shape_indices[row, col]))

    def type_at(self, col: int, row: int) -> CellType:
        self._check(col, row)
        return CellType(int(self.cell_types[row, col]))

    def is_fixed(self, col: int, row: int) -> bool:
        return self.type_at(col, row) == CellType.FIXED

    def set_cell(self, col: int, row: int, cell_type: CellType, shape_index: int = NO_SHAPE) -> None:
        self._check(col, row)
        if cell_type == CellType.VOID:
            shape_index = NO_SHAPE
        self.cell_types[row, col] = int(cell_type)
        self.shape_indices[row, col] = int(shape_index)

    def clear_cell(self, col: int, row: int) -> None:
        self.set_cell(col, row, CellType.VOID)

    def is_row_complete(self, row: int) -> bool:
        return bool(np.all(self.cell_types[row] != CellType.VOID))

    def clear_complete_rows(self) -> int:
        """Remove every row without a void cell and collapse the rows above it.

        The scan runs bottom-up and re-examines the same row index after a
        collapse, so stacked completions all disappear in one call.
        """
        cleared = 0
        row = self.rows - 1
        while row >= 0:
            if not self.is_row_complete(row):
                row -= 1
                continue
            cleared += 1
            if row > 0:
                self.cell_types[1 : row + 1] = self.cell_types[0:row].copy()
                self.shape_indices[1 : row + 1] = self.shape_indices[0:row].copy()
            self.cell_types[0].fill(CellType.VOID)
            self.shape_indices[0].fill(NO_SHAPE)
        return cleared

    def count(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self.cell_types == cell_type))

    def get_max_height(self) -> int:
        """Height of the settled stack, counted from the floor."""
        fixed_rows = np.where(np.any(self.cell_types == CellType.FIXED, axis=1))[0]
        if fixed_rows.size == 0:
            return 0
        return self.rows - int(fixed_rows[0])

    def count_holes(self) -> int:
        holes = 0
        for col in range(self.cols):
            seen_block = False
            for cell in self.cell_types[:, col]:
                if cell == CellType.FIXED:
                    seen_block = True
                elif seen_block and cell != CellType.SHAPE:
                    holes += 1
        return holes

    def clone_state(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.cell_types.copy(), self.shape_indices.copy()
