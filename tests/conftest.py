# tests/conftest.py
from __future__ import annotations

import random
from typing import Callable, Iterable, Sequence, Tuple

import pytest

from tetris_engine.game import CellType, GameConfig, TetrisGame


class ScriptedRandom:
    """Hands out queued shape indices first, then falls back to a seeded stream."""

    def __init__(self, values: Sequence[int]) -> None:
        self._values = list(values)
        self._fallback = random.Random(1234)

    def randrange(self, stop: int) -> int:
        if self._values:
            return int(self._values.pop(0))
        return self._fallback.randrange(stop)


@pytest.fixture
def make_game() -> Callable[..., TetrisGame]:
    def _make(shapes: Sequence[int] = (), cols: int = 10, rows: int = 20, start: bool = True) -> TetrisGame:
        game = TetrisGame(GameConfig(cols=cols, rows=rows), rng=ScriptedRandom(shapes))  # type: ignore[arg-type]
        if start:
            assert game.start_game()
        return game

    return _make


@pytest.fixture
def fill_fixed() -> Callable[..., None]:
    def _fill(game: TetrisGame, cells: Iterable[Tuple[int, int]], shape_index: int = 2) -> None:
        for col, row in cells:
            game._grid.set_cell(col, row, CellType.FIXED, shape_index)

    return _fill


@pytest.fixture
def scripted() -> Callable[[Sequence[int]], ScriptedRandom]:
    return ScriptedRandom
