#!/usr/bin/env python
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from vouchgraph.config.defaults import (
    DEFAULT_OUTPUT_FILE,
    DEFAULT_SCORE_CONCURRENCY,
    DEFAULT_SCORE_DEPTH,
    DEFAULT_VOUCH_DEPTH,
    NETWORK_TESTNET,
)
from vouchgraph.config.settings import LedgerConfig


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # Keep vouchgraph at INFO level for run progress
    logging.getLogger("vouchgraph").setLevel(logging.DEBUG if verbose else logging.INFO)
    # Suppress per-request logs from the HTTP stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vouchgraph",
        description="Explore vouching and trust scores on an Open Libra ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Global options
    parser.add_argument("--testnet", action="store_true", help="Use the testnet instead of mainnet")
    parser.add_argument("--url", help="Ledger REST API base URL (overrides the network default)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("block-number", help="Get the current block number")

    roots_p = subparsers.add_parser("get-roots", help="Get the current set of root addresses")
    roots_p.add_argument("--json", action="store_true", help="JSON output")

    vouches_p = subparsers.add_parser("vouches", help="Get received vouches for an address")
    vouches_p.add_argument("address", help="Account address")

    graph_p = subparsers.add_parser(
        "vouch-graph", help="Generate a Mermaid graph of the vouching network for an address"
    )
    graph_p.add_argument("address", help="Account address")
    graph_p.add_argument(
        "--vouch-depth", type=int, default=DEFAULT_VOUCH_DEPTH,
        help=f"Maximum depth to traverse for fetching vouches (default: {DEFAULT_VOUCH_DEPTH})",
    )
    graph_p.add_argument(
        "--score-depth", type=int, default=DEFAULT_SCORE_DEPTH,
        help=f"Maximum depth to traverse for calculating scores, 0 = unlimited (default: {DEFAULT_SCORE_DEPTH})",
    )
    graph_p.add_argument(
        "--output", "-o", type=Path, default=Path(DEFAULT_OUTPUT_FILE),
        help=f"Output file path (default: {DEFAULT_OUTPUT_FILE})",
    )
    graph_p.add_argument(
        "--name-mappings", nargs="+", default=[], metavar="SOURCE",
        help="JSON files or URLs containing address-to-name mappings",
    )
    graph_p.add_argument(
        "--no-default-names", action="store_true",
        help="Disable loading default name mappings",
    )
    graph_p.add_argument(
        "--concurrency", type=int, default=DEFAULT_SCORE_CONCURRENCY,
        help=f"Addresses scored in parallel (default: {DEFAULT_SCORE_CONCURRENCY})",
    )

    subparsers.add_parser("version", help="Show version")

    return parser


def _ledger_config(args: argparse.Namespace) -> LedgerConfig:
    config = LedgerConfig.from_env()
    if args.testnet:
        config.network = NETWORK_TESTNET
    if args.url:
        config.url = args.url
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    load_dotenv(Path.cwd() / ".env")
    _configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "version":
        from vouchgraph import __version__
        print(f"vouchgraph {__version__}")
        return 0

    from vouchgraph.cli.commands import block_number, get_roots, vouch_graph, vouches

    try:
        config = _ledger_config(args)
        if args.command == "block-number":
            return asyncio.run(block_number.run(config))
        elif args.command == "get-roots":
            return asyncio.run(get_roots.run(config, json_output=args.json))
        elif args.command == "vouches":
            return asyncio.run(vouches.run(args.address, config))
        elif args.command == "vouch-graph":
            return asyncio.run(vouch_graph.run(
                args.address,
                config,
                vouch_depth=args.vouch_depth,
                score_depth=args.score_depth,
                output=args.output,
                name_sources=args.name_mappings,
                use_default_names=not args.no_default_names,
                concurrency=args.concurrency,
            ))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
