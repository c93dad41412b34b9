"""Command-line entry point for the game."""

from __future__ import annotations

import argparse
import logging
import os
import platform
import sys
import time

import psutil

from .build_info import current
from .checks import BYTES_PER_GB, run_all_checks
from .reporter import print_report
from .tictactoe import BOARD_SIZE, GameStateKind, Tile
from .world import World

logger = logging.getLogger("oilpool")

LOG_ENV_VAR = "OILPOOL_LOG"
HEADLESS_FRAMES = 60
FRAME_TIME = 1.0 / 60.0
QUIT_WORDS = frozenset({"q", "quit", "exit"})

_TILE_CHARS = {Tile.EMPTY: ".", Tile.X: "X", Tile.O: "O"}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="game", description="Oil Pool Game")
    parser.add_argument("--health-check", action="store_true", help="run health checks and exit")
    parser.add_argument("--headless", action="store_true", help="run without a board display")
    return parser.parse_args(argv)


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_ENV_VAR, "DEBUG").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)


def _log_build_info() -> None:
    info = current()
    logger.info("Starting Oil Pool Game: %s", info.version_string())
    logger.debug(
        "Build details: %s opt-%s | runtime %s (%s) | built %s | commit %s",
        info.target_triple,
        info.opt_level,
        info.runtime_version,
        info.runtime_channel,
        info.build_timestamp,
        info.git_commit_timestamp,
    )


def _log_system_info() -> None:
    os_name = platform.system() or "Unknown"
    os_version = platform.version() or "Unknown"
    kernel_version = platform.release() or "Unknown"
    physical_cores = psutil.cpu_count(logical=False) or 0
    logical_cores = psutil.cpu_count(logical=True) or 0
    total_memory_gb = psutil.virtual_memory().total / BYTES_PER_GB
    logger.info(
        "Runtime: %s %s | %d cores | %.1f GB RAM",
        os_name,
        os_version,
        logical_cores,
        total_memory_gb,
    )
    logger.debug(
        "System details: kernel %s | %d physical cores | %s",
        kernel_version,
        physical_cores,
        current().target_triple,
    )


def _run_headless() -> int:
    world = World()
    for _ in range(HEADLESS_FRAMES):
        world.tick(FRAME_TIME)
    leaf = world.leaf()
    logger.info(
        "Headless run finished: %d ticks, %.2fs simulated, %d leaves",
        world.tick_count,
        world.sim_time,
        len(leaf.leaves) if leaf is not None else 0,
    )
    return 0


def _render_board(board) -> str:
    return "\n".join(" ".join(_TILE_CHARS[tile] for tile in row) for row in board)


def _parse_cell(text: str) -> tuple[int, int] | None:
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        return None
    return row, col


def _play(world: World) -> int:
    game = world.tictactoe()
    if game is None:
        logger.error("No tic-tac-toe simulation in the world")
        return 1

    print("Tic-Tac-Toe")
    print("Enter a cell as 'row col' (0-2); 'q' quits.")
    last_update = time.monotonic()
    while True:
        print(_render_board(game.board))
        print(f"{game.current_player.name} to move> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            return 0
        text = line.strip()
        if text.lower() in QUIT_WORDS:
            return 0

        now = time.monotonic()
        world.tick(now - last_update)
        last_update = now

        cell = _parse_cell(text)
        if cell is None:
            print(f"Click outside board: {text}")
            continue
        row, col = cell
        if not game.make_move(row, col):
            print(f"Cell ({row}, {col}) already occupied")
            continue

        print(f"Placed piece at ({row}, {col})")
        logger.info("Placed piece at (%d, %d)", row, col)
        state = game.game_state
        if state.kind is GameStateKind.WON:
            print(f"Player {state.winner.name} won!")
            game.reset()
        elif state.kind is GameStateKind.DRAW:
            print("Game is a draw!")
            game.reset()


def main(argv: list[str] | None = None) -> int:
    """Run the game; returns the process exit code."""
    args = _parse_args(argv)
    _configure_logging()
    _log_build_info()
    _log_system_info()

    if args.health_check:
        logger.info("Running health checks...")
        report = run_all_checks()
        print_report(report)
        return report.exit_code()

    if args.headless:
        logger.info("Running in headless mode")
        return _run_headless()

    return _play(World())


if __name__ == "__main__":
    raise SystemExit(main())