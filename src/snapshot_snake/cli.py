"""Command-line entry point for playing and benchmarking."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snapshot-snake",
        description="Terminal snake with a lock-free render/simulation split.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Play in the terminal.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    play_p.add_argument("--rows", type=_positive_int, default=None)
    play_p.add_argument("--cols", type=_positive_int, default=None)
    play_p.add_argument("--tick-ms", type=_positive_int, default=None)
    play_p.add_argument("--starting-length", type=_positive_int, default=None)
    play_p.add_argument("--points-per-food", type=int, default=None)
    play_p.add_argument("--walls", type=int, default=None)
    play_p.add_argument(
        "--direction", type=str, default=None,
        choices=["up", "down", "left", "right"],
    )
    play_p.add_argument("--high-score-file", type=str, default=None)
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs here; the screen is never logged to.",
    )

    # --- highscore ---
    hs_p = sub.add_parser("highscore", help="Show or reset the high score.")
    hs_p.add_argument("--high-score-file", type=str, default="game_highest.txt")
    hs_p.add_argument("--reset", action="store_true")

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure tick throughput with concurrent readers.",
    )
    bench_p.add_argument("--num-games", type=_positive_int, default=100)
    bench_p.add_argument("--rows", type=_positive_int, default=20)
    bench_p.add_argument("--cols", type=_positive_int, default=40)
    bench_p.add_argument("--max-ticks", type=_positive_int, default=500)
    bench_p.add_argument("--readers", type=int, default=1)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _load_config(args: argparse.Namespace):
    from snapshot_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()
    return config.with_overrides(
        rows=args.rows,
        cols=args.cols,
        tick_ms=args.tick_ms,
        starting_length=args.starting_length,
        points_per_food=args.points_per_food,
        wall_count=args.walls,
        initial_direction=args.direction,
        high_score_path=args.high_score_file,
    )


def _run_play(args: argparse.Namespace) -> int:
    import curses

    from snapshot_snake.engine import GameEngine
    from snapshot_snake.highscore import HighScoreStore
    from snapshot_snake.session import GameSession
    from snapshot_snake.terminal import CursesInput, CursesRenderer

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file, level=logging.INFO, format=_LOG_FORMAT,
        )
    else:
        logging.basicConfig(handlers=[logging.NullHandler()])

    try:
        config = _load_config(args)
    except (OSError, TypeError, ValueError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)  # noqa: T201
        return 2

    def _screen(stdscr) -> int:
        session = GameSession(
            engine=GameEngine(seed=args.seed),
            renderer=CursesRenderer(stdscr),
            input_source=CursesInput(stdscr),
            high_scores=HighScoreStore(config.high_score_path),
            config=config,
        )
        return session.run()

    games = curses.wrapper(_screen)
    print(f"\n  Thanks for playing! ({games} game(s))\n")  # noqa: T201
    return 0


def _run_highscore(args: argparse.Namespace) -> int:
    from snapshot_snake.highscore import HighScoreStore

    logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT)
    store = HighScoreStore(args.high_score_file)
    if args.reset:
        store.reset()
    print(f"High score: {store.high_score}")  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from snapshot_snake.benchmark import benchmark_throughput

    logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT)
    if args.readers < 0:
        print("--readers must be >= 0", file=sys.stderr)  # noqa: T201
        return 2
    result = benchmark_throughput(
        num_games=args.num_games,
        rows=args.rows,
        cols=args.cols,
        max_ticks=args.max_ticks,
        readers=args.readers,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0 if result.ordering_violations == 0 else 1


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snapshot-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "highscore": _run_highscore,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
