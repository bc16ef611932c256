# Area: Runner
"""
tx_battle.cli — Command-line interface
======================================

Provides the CLI entry point for playing rounds in the terminal.

Usage:
    python -m tx_battle --demo --tx-count 2500             # Offline demo chain
    python -m tx_battle --tx-count 3000 --block-size 1600000
    python -m tx_battle --config config.json --rounds 3

Demo mode can be enabled via:
    1. CLI flag: --demo
    2. Config key: demo_mode: true
    3. Environment variable: DEMO_MODE=true

Environment variables may also be placed in a .env file.
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from dotenv import load_dotenv

from ._round import parse_prediction
from ._shared import log_battle_error
from .errors import DataUnavailableError, InvalidPredictionError
from .runner import BattleRunner
from .types import Prediction

# env var -> (config key, converter)
ENV_MAPPINGS: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "TX_BATTLE_API_URL": ("api_base_url", str),
    "TX_BATTLE_REQUEST_TIMEOUT": ("request_timeout_seconds", float),
    "TX_BATTLE_CACHE_SECONDS": ("cache_freshness_seconds", float),
    "TX_BATTLE_ROUND_SECONDS": ("round_seconds", int),
    "TX_BATTLE_POLL_INTERVAL": ("poll_interval_seconds", float),
    "TX_BATTLE_LOG_FILE": ("log_file", str),
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Bitcoin TX Battle - predict the next Bitcoin block",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Scoring:
  tx count    within 50 transactions of the actual block   100 points
  block size  within 50,000 bytes                          150 points
  difficulty  within 10% of the actual difficulty          200 points

Examples:
  python -m tx_battle --demo --tx-count 2500
  python -m tx_battle --tx-count 3000 --block-size 1600000 --rounds 3
  DEMO_MODE=true python -m tx_battle --difficulty 5.5e13
        """,
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Play against an offline demo chain instead of the Esplora API",
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--tx-count", type=str, help="Predicted transaction count")
    parser.add_argument("--block-size", type=str, help="Predicted block size in bytes")
    parser.add_argument("--difficulty", type=str, help="Predicted difficulty")
    parser.add_argument(
        "--rounds", type=int, default=1, help="Number of rounds to play (default: 1)",
    )
    parser.add_argument(
        "--round-seconds", type=int, help="Round window in seconds (default: 600)",
    )
    parser.add_argument(
        "--demo-block-interval",
        type=float,
        help="Seconds between demo blocks (default: 45)",
    )

    return parser.parse_args(argv)


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """
    Load config from file, then apply environment overrides.

    Raises:
        ValueError: If the file is not valid JSON or an env value has the wrong type
    """
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config = json.load(f)

    for env_key, (config_key, convert) in ENV_MAPPINGS.items():
        if env_key in os.environ:
            try:
                config[config_key] = convert(os.environ[env_key])
            except ValueError as e:
                raise ValueError(f"{env_key}: {e}") from e

    return config


def is_demo_mode(args: argparse.Namespace, config: Dict[str, Any]) -> bool:
    """Check if demo mode is enabled via CLI, config, or environment."""
    if args.demo:
        return True
    if config.get("demo_mode"):
        return True
    if os.environ.get("DEMO_MODE", "").lower() in ("true", "1", "yes"):
        return True
    return False


def build_prediction(args: argparse.Namespace) -> Optional[Prediction]:
    """
    Build the prediction from CLI flags; None when no flag was given.

    Raises:
        InvalidPredictionError: If a flag value is not a positive number
    """
    payload = {
        "tx_count": args.tx_count,
        "block_size": args.block_size,
        "difficulty": args.difficulty,
    }
    payload = {k: v for k, v in payload.items() if v is not None}
    if not payload:
        return None
    return parse_prediction(payload)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    config["demo_mode"] = is_demo_mode(args, config)
    if args.round_seconds is not None:
        config["round_seconds"] = args.round_seconds
    if args.demo_block_interval is not None:
        config["demo_block_interval_seconds"] = args.demo_block_interval

    try:
        prediction = build_prediction(args)
    except InvalidPredictionError as e:
        print(e.format_error_log(), file=sys.stderr)
        return 1

    try:
        runner = BattleRunner(config=config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if prediction is None:
        print("No prediction given; the round will be played for display only.", file=sys.stderr)

    try:
        runner.run(prediction=prediction, rounds=args.rounds)
    except DataUnavailableError as e:
        log_battle_error(e)
        return 2
    return 0
