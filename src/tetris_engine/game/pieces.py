from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class Point:
    """Offset of one block from the piece anchor (x grows right, y grows down)."""

    x: int
    y: int

    def rotated(self, clockwise: bool) -> "Point":
        if clockwise:
            return Point(-self.y, self.x)
        return Point(self.y, -self.x)


class TetrominoType(IntEnum):
    I = 0
    O = 1
    S = 2
    Z = 3
    L = 4
    J = 5
    T = 6


Shape = Tuple[Point, Point, Point, Point]

POINT_COUNT = 4
SHAPE_COUNT = len(TetrominoType)

# The square looks the same in every orientation, so it never rotates.
SYMMETRIC_SHAPE_INDEX = int(TetrominoType.O)


def _shape(*coords: Tuple[int, int]) -> Shape:
    return tuple(Point(x, y) for x, y in coords)  # type: ignore[return-value]


# Every shape lists its pivot (0, 0) first.
BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _shape((0, 0), (-1, 0), (-2, 0), (1, 0)),
    TetrominoType.O: _shape((0, 0), (-1, 0), (-1, -1), (0, -1)),
    TetrominoType.S: _shape((0, 0), (0, -1), (1, -1), (-1, 0)),
    TetrominoType.Z: _shape((0, 0), (0, -1), (-1, -1), (1, 0)),
    TetrominoType.L: _shape((0, 0), (1, 0), (1, -1), (-1, 0)),
    TetrominoType.J: _shape((0, 0), (-1, 0), (-1, -1), (1, 0)),
    TetrominoType.T: _shape((0, 0), (-1, 0), (0, -1), (1, 0)),
}


def shape_points(index: int) -> Shape:
    """Return the four catalog points of shape `index` (0..SHAPE_COUNT-1)."""
    try:
        kind = TetrominoType(int(index))
    except ValueError:
        raise ValueError(f"unknown shape index {index!r}, expected 0..{SHAPE_COUNT - 1}") from None
    return BASE_SHAPES[kind]


def rotate_points(points: Iterable[Point], clockwise: bool) -> Shape:
    return tuple(p.rotated(clockwise) for p in points)  # type: ignore[return-value]


def cells_at(points: Iterable[Point], col: int, row: int) -> Tuple[Tuple[int, int], ...]:
    """Absolute (col, row) of each point for an anchor at (col, row). May be off-board."""
    return tuple((col + p.x, row + p.y) for p in points)
