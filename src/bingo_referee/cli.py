# Area: Shared
"""
bingo_referee.cli — Command-line interface
==========================================

Provides CLI entry point for running a local round.

Usage:
    python -m bingo_referee --demo                         # Default settings
    python -m bingo_referee --demo --config config.json    # Settings from file
    python -m bingo_referee --demo --players 4 --interval 0.5 --policy auto

Settings can also come from a .env file or BINGO_* environment variables.
"""

import argparse
import asyncio
import sys
from typing import Any, Dict

from ._shared import setup_logging
from .config import load_config, build_config
from .demo_round import run_demo_round
from .errors import ConfigurationError


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Bingo referee - run the authoritative round logic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m bingo_referee --demo
  python -m bingo_referee --demo --config config.json
  python -m bingo_referee --demo --players 3 --interval 0.2
  BINGO_WIN_POLICY=auto python -m bingo_referee --demo
        """,
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Play a simulated round locally",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--players",
        type=int,
        help="Number of simulated players (overrides required_players)",
    )

    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds between called numbers",
    )

    parser.add_argument(
        "--policy",
        choices=["claim", "auto"],
        help="Win detection policy",
    )

    return parser.parse_args(argv)


def apply_overrides(config_values: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Apply CLI flags on top of loaded settings."""
    values = dict(config_values)
    if args.players is not None:
        values["required_players"] = args.players
    if args.interval is not None:
        values["call_interval_seconds"] = args.interval
    if args.policy is not None:
        values["win_policy"] = args.policy
    return values


def print_summary(snapshot: Dict[str, Any]) -> None:
    """Print the outcome of a round."""
    print()
    print("=" * 60)
    print(f"  Round {snapshot['round_number']}: {snapshot['state']}")
    print("=" * 60)
    print(f"  Players:  {', '.join(snapshot['players'])}")
    print(f"  Draws:    {len(snapshot['called_numbers'])}")
    if snapshot["winners"]:
        print(f"  Winner:   {', '.join(snapshot['winners'])}")
    else:
        print(f"  Winner:   none ({snapshot['finish_reason']})")
    print()


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    if not args.demo:
        print("Error: only demo mode runs from the command line.", file=sys.stderr)
        print("Embed BingoGame/BingoService in your transport to serve players.", file=sys.stderr)
        return 1

    try:
        loaded = load_config(args.config)
        config = build_config(apply_overrides(loaded.model_dump(), args))
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(log_file_path=config.log_file)

    snapshot = asyncio.run(run_demo_round(config))
    print_summary(snapshot)
    return 0
