# Area: Runner
# PRD: docs/prd-hilo-client.md
"""
hilo_client.cli — Command-line interface
========================================

Provides the CLI entry points for playing a seat and for watching events.

Usage:
    hilo-client 0 <private-key>                     # Play seat 0 (Alice)
    hilo-client 1 --variant cards                   # Key from HILO_PRIVATE_KEY
    hilo-client 0 <private-key> --demo              # Bet automatically
    hilo-listen --variant dice                      # Print every contract event

Demo mode can be enabled via:
    1. CLI flag: --demo
    2. Config key: demo: true
    3. Environment variable: HILO_DEMO=true
"""

import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from ._runner_config import (
    ClientConfig,
    ListenerConfig,
    build_config,
    load_config_sources,
)
from .errors import ConfigurationError, LedgerReadError
from .operator import ConsoleOperator, Operator

VARIANTS = ["cards", "dice"]

# CLI destination -> config key
CLI_OVERRIDES = {
    "seat": "seat",
    "private_key": "private_key",
    "variant": "variant",
    "rpc_url": "rpc_url",
    "contracts_out": "contracts_out",
    "poll_interval": "poll_interval_seconds",
    "log_file": "log_file",
}


def _add_connection_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--variant",
        choices=VARIANTS,
        help="Game variant: cards or dice (default: dice)",
    )
    parser.add_argument(
        "--rpc-url",
        type=str,
        help="JSON-RPC endpoint of the node (default: http://127.0.0.1:8545)",
    )
    parser.add_argument(
        "--contracts-out",
        type=str,
        help="Contract build output directory holding ABIs and deployment.json",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        help="Seconds between event polls (default: 1.0)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments for hilo-client."""
    parser = argparse.ArgumentParser(
        prog="hilo-client",
        description="HiLo player client - play one seat of a commit-reveal HiLo game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hilo-client 0 ac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80
  hilo-client 1 --variant cards --rpc-url http://127.0.0.1:8545
  HILO_PRIVATE_KEY=... hilo-client 0 --demo
        """,
    )

    parser.add_argument(
        "seat",
        type=int,
        help="Seat index: 0 (Alice) or 1 (Bob)",
    )
    parser.add_argument(
        "private_key",
        nargs="?",
        help="Seat private key in hex (default: HILO_PRIVATE_KEY)",
    )
    _add_connection_args(parser)
    parser.add_argument(
        "--log-file",
        type=str,
        help="Path of the JSON log file (default: hilo_client.log)",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Bet automatically instead of prompting",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logs on the terminal",
    )

    return parser.parse_args(argv)


def parse_listen_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments for hilo-listen."""
    parser = argparse.ArgumentParser(
        prog="hilo-listen",
        description="Print every HiLo contract event as it happens",
    )
    _add_connection_args(parser)
    return parser.parse_args(argv)


def cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the config values given on the command line."""
    overrides = {}
    for dest, config_key in CLI_OVERRIDES.items():
        value = getattr(args, dest, None)
        if value is not None:
            overrides[config_key] = value
    return overrides


def is_demo_mode(args: argparse.Namespace, config: Dict[str, Any]) -> bool:
    """Check if demo mode is enabled via CLI, config, or environment."""
    if args.demo:
        return True
    if config.get("demo"):
        return True
    if os.environ.get("HILO_DEMO", "").lower() in ("true", "1", "yes"):
        return True
    return False


def get_operator(demo: bool) -> Operator:
    """Get the operator for the requested mode."""
    if demo:
        from .demo_operator import DemoOperator
        return DemoOperator()
    return ConsoleOperator()


def _print_config_error(error: ConfigurationError, usage: str) -> None:
    print(f"Error: {error}", file=sys.stderr)
    for problem in error.problems:
        print(f"  - {problem}", file=sys.stderr)
    print(usage, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    args = parse_args(argv)

    try:
        values = load_config_sources(args.config)
        values.update(cli_overrides(args))
        values["demo"] = is_demo_mode(args, values)
        values["verbose"] = args.verbose
        config = build_config(ClientConfig, values)
    except ConfigurationError as e:
        _print_config_error(e, "Usage: hilo-client SEAT PRIVATE_KEY (seat is 0 or 1)")
        return 1

    from .runner import HiLoRunner

    try:
        runner = HiLoRunner(config=config, operator=get_operator(config.demo))
    except ConfigurationError as e:
        _print_config_error(e, "Check --contracts-out and --variant.")
        return 1

    runner.run()
    return 0


def listen_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for hilo-listen."""
    load_dotenv()
    args = parse_listen_args(argv)

    try:
        values = load_config_sources(args.config)
        values.update(cli_overrides(args))
        config = build_config(ListenerConfig, values)
    except ConfigurationError as e:
        _print_config_error(e, "Usage: hilo-listen [--variant cards|dice]")
        return 1

    from ._core import get_mark_formatter
    from ._shared import Web3Ledger, load_artifacts
    from .listener import EventListener

    try:
        artifacts = load_artifacts(
            config.contracts_out,
            get_mark_formatter(config.variant).contract_name,
        )
    except ConfigurationError as e:
        _print_config_error(e, "Check --contracts-out and --variant.")
        return 1

    ledger = Web3Ledger(rpc_url=config.rpc_url, abi=artifacts.abi, address=artifacts.address)
    try:
        EventListener(ledger, poll_interval=config.poll_interval_seconds).run()
    except LedgerReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
