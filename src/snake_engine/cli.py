"""Command-line tools for running autopilot games."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from snake_engine.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from snake_engine.config import GameConfig

logger = logging.getLogger(__name__)

_MODES = ["walls", "wrap", "passthrough"]


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-engine",
        description="Run, watch and benchmark autopilot snake games.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- autoplay ---
    play_p = sub.add_parser("autoplay", help="Play one autopilot game.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (overrides other flags).",
    )
    play_p.add_argument("--mode", type=str, default=None, choices=_MODES)
    play_p.add_argument("--grid-size", type=int, default=None)
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument("--max-ticks", type=_positive_int, default=1_000)
    play_p.add_argument(
        "--username", type=str, default=None,
        help="Submit the final score to the leaderboard under this name.",
    )

    # --- spectate ---
    spec_p = sub.add_parser(
        "spectate", help="Run several autopilot games side by side.",
    )
    spec_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (overrides other flags).",
    )
    spec_p.add_argument("--sessions", type=_positive_int, default=3)
    spec_p.add_argument("--mode", type=str, default=None, choices=_MODES)
    spec_p.add_argument("--grid-size", type=int, default=None)
    spec_p.add_argument("--interval-ms", type=_positive_int, default=None)
    spec_p.add_argument("--seed", type=int, default=None)
    spec_p.add_argument("--ticks", type=_positive_int, default=100)

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure autopilot scores over many games.",
    )
    bench_p.add_argument("--num-games", type=_positive_int, default=100)
    bench_p.add_argument("--mode", type=str, default="walls", choices=_MODES)
    bench_p.add_argument("--grid-size", type=int, default=20)
    bench_p.add_argument("--max-steps", type=_positive_int, default=1_000)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _load_config(
    args: argparse.Namespace, flag_map: dict[str, str],
) -> GameConfig:
    from snake_engine.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _run_autoplay(args: argparse.Namespace) -> int:
    from snake_engine.autopilot import get_ai_direction
    from snake_engine.leaderboard import Leaderboard
    from snake_engine.session import GameSession

    config = _load_config(
        args, {"mode": "mode", "grid_size": "grid_size", "seed": "seed"},
    )
    leaderboard = Leaderboard()
    session = GameSession(
        config,
        username=args.username,
        score_sink=leaderboard.submit_score,
    )
    state = session.run(args.max_ticks, policy=get_ai_direction)
    if state.is_game_over:
        outcome = f"game over ({session.death_cause} collision)"
    else:
        outcome = "tick limit reached"
    print(  # noqa: T201
        f"Autoplay ({state.mode.value}, {state.grid_size}x{state.grid_size}): "
        f"score {state.score}, length {len(state.snake)}, "
        f"{session.ticks} ticks, {outcome}"
    )
    for rank, entry in enumerate(leaderboard.top(), start=1):
        print(f"{rank}. {entry.username} {entry.score} ({entry.mode.value})")  # noqa: T201
    return 0


def _run_spectate(args: argparse.Namespace) -> int:
    from snake_engine.spectator import SpectatorHub

    config = _load_config(
        args,
        {
            "mode": "mode",
            "grid_size": "spectator_grid_size",
            "interval_ms": "spectator_tick_interval_ms",
            "seed": "seed",
        },
    )
    hub = SpectatorHub(config)
    for i in range(args.sessions):
        hub.add_session(f"autopilot-{i + 1}", config.boundary_mode)

    asyncio.run(hub.run(ticks=args.ticks))

    for session in hub.list_sessions():
        print(  # noqa: T201
            f"{session.username} ({session.mode.value}): "
            f"score {session.score}, {session.ticks} ticks, "
            f"{session.restarts} restarts"
        )
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from snake_engine.benchmark import benchmark_autopilot

    result = benchmark_autopilot(
        num_games=args.num_games,
        mode=args.mode,
        grid_size=args.grid_size,
        max_steps=args.max_steps,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-engine`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "autoplay": _run_autoplay,
        "spectate": _run_spectate,
        "benchmark": _run_benchmark,
    }
    try:
        return handlers[args.command](args)
    except InvalidArgumentError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
