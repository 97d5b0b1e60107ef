# tests/test_rules.py
from __future__ import annotations

import pytest

from tetris_engine.game.rules import PacingRules, ProgressTracker, ScoringRules


@pytest.mark.parametrize("lines,points", [(0, 0), (1, 40), (2, 100), (3, 300), (4, 1200), (5, 0), (-1, 0)])
def test_score_table_at_level_zero(lines: int, points: int) -> None:
    assert ScoringRules().score_for_lines(lines, level=0) == points


def test_score_scales_with_level_plus_one() -> None:
    rules = ScoringRules()
    assert rules.score_for_lines(1, level=1) == 80
    assert rules.score_for_lines(4, level=9) == 12000


@pytest.mark.parametrize(
    "level,seconds",
    [(0, 1.0), (1, 0.92), (5, 0.6), (9, 0.28), (10, 0.25), (11, 0.238), (20, 0.13)],
)
def test_tick_interval_has_two_linear_regimes(level: int, seconds: float) -> None:
    assert PacingRules().tick_interval(level) == pytest.approx(seconds)


def test_tick_interval_keeps_shrinking_past_the_slope_change() -> None:
    pacing = PacingRules()
    intervals = [pacing.tick_interval(level) for level in range(30)]
    assert all(a > b for a, b in zip(intervals, intervals[1:]))
    assert intervals[-1] > 0


def test_level_changes_only_after_more_than_rows_per_level() -> None:
    tracker = ProgressTracker(ScoringRules())
    tracker.record_rows(10)
    assert not tracker.maybe_level_up()
    assert tracker.level == 0

    tracker.record_rows(1)
    assert tracker.maybe_level_up()
    assert tracker.level == 1
    assert tracker.rows_completed_level == 0
    assert tracker.rows_completed == 11


def test_clear_is_scored_at_the_level_before_any_level_up() -> None:
    tracker = ProgressTracker(ScoringRules())
    tracker.record_rows(8)
    tracker.maybe_level_up()
    tracker.record_rows(4)
    assert tracker.apply_clear(4) == 1200
    assert tracker.maybe_level_up()
    assert tracker.apply_clear(1) == 80
    assert tracker.score == 1280


def test_reset_zeroes_every_counter() -> None:
    tracker = ProgressTracker(ScoringRules(), level=3, score=900, rows_completed=40, rows_completed_level=7)
    tracker.reset()
    assert (tracker.level, tracker.score, tracker.rows_completed, tracker.rows_completed_level) == (0, 0, 0, 0)


def test_custom_rules_are_honoured() -> None:
    tracker = ProgressTracker(ScoringRules(line_clear_scores=(1, 2, 3, 4), rows_per_level=2))
    tracker.record_rows(3)
    assert tracker.apply_clear(3) == 3
    assert tracker.maybe_level_up()
