from __future__ import annotations

import argparse
from typing import List, Optional

from tetris_engine.errors import ConfigError
from tetris_engine.game import CellType, Direction, GameConfig, TetrisGame
from tetris_engine.utils.logging import setup_logger

GLYPHS = {
    CellType.VOID: "·",
    CellType.SHAPE: "▓",
    CellType.GHOST: "░",
    CellType.FIXED: "█",
}


def format_grid(game: TetrisGame) -> str:
    lines: List[str] = []
    for row in range(game.rows):
        lines.append("".join(GLYPHS[game.cell_at(col, row).cell_type] for col in range(game.cols)))
    return "\n".join(lines)


def play_scripted(game: TetrisGame, pieces: int) -> int:
    """Drop `pieces` pieces, fanning them out across the board; return how many landed."""
    if not game.start_game():
        return 0
    landed = 0
    for i in range(pieces):
        if game.is_game_over():
            break
        if i % 2:
            game.rotate(clockwise=True)
        offset = (i % 5) * 2 - 4
        direction = Direction.RIGHT if offset > 0 else Direction.LEFT
        for _ in range(abs(offset)):
            if not game.move(direction):
                break
        game.hard_drop()
        if game.tick().locked:
            landed += 1
    return landed


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play a scripted falling-block session and print the board.")
    p.add_argument("--pieces", type=int, default=30)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--cols", type=int, default=10)
    p.add_argument("--rows", type=int, default=20)
    p.add_argument("--log-level", type=str, default="info")
    p.add_argument("--plain-log", action="store_true", help="log without rich formatting")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    log = setup_logger(name="tetris_engine", use_rich=not args.plain_log, level=args.log_level)

    try:
        config = GameConfig(cols=args.cols, rows=args.rows, random_seed=args.seed)
    except ConfigError as exc:
        parser.error(str(exc))
    game = TetrisGame(config)
    landed = play_scripted(game, args.pieces)

    print(format_grid(game))
    stats = game.get_game_stats()
    print(f"pieces landed: {landed}")
    print(f"score: {stats['final_score']}  level: {stats['level']}  rows: {stats['rows_completed']}")
    log.info("next tick interval %.3fs", game.tick_interval())
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
