from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int] = (40, 100, 300, 1200)
    rows_per_level: int = 10

    def score_for_lines(self, lines: int, level: int = 0) -> int:
        """Points for clearing `lines` rows at once, scaled by level + 1."""
        if 1 <= lines <= len(self.line_clear_scores):
            return self.line_clear_scores[lines - 1] * (level + 1)
        return 0


@dataclass
class PacingRules:
    """Seconds between automatic advances, as a function of level.

    Two straight lines: a steep ramp up to `slope_change_level`, then a
    shallow one. The result is not clamped.
    """

    starting_slope: float = -0.08
    starting_time: float = 1.0
    ending_slope: float = -0.012
    ending_time: float = 0.25
    slope_change_level: int = 10

    def tick_interval(self, level: int) -> float:
        if level < self.slope_change_level:
            return self.starting_slope * level + self.starting_time
        return self.ending_slope * (level - self.slope_change_level) + self.ending_time


@dataclass
class ProgressTracker:
    """Cumulative score, level and row counters for one session."""

    rules: ScoringRules
    level: int = 0
    score: int = 0
    rows_completed: int = 0
    rows_completed_level: int = 0

    def reset(self) -> None:
        self.level = 0
        self.score = 0
        self.rows_completed = 0
        self.rows_completed_level = 0

    def record_rows(self, count: int) -> None:
        self.rows_completed += count
        self.rows_completed_level += count

    def apply_clear(self, lines: int) -> int:
        """Add the score for a clear event at the current level; return the delta."""
        delta = self.rules.score_for_lines(lines, self.level)
        self.score += delta
        return delta

    def maybe_level_up(self) -> bool:
        # Strictly greater: the level changes on the eleventh row, not the tenth.
        if self.rows_completed_level > self.rules.rows_per_level:
            self.rows_completed_level = 0
            self.level += 1
            return True
        return False
