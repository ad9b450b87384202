#!/usr/bin/env python
"""Vouch graph command - Render the scored vouch graph of an address as Mermaid."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import aiofiles

from vouchgraph.address import shorten_address, validate_and_normalize_address
from vouchgraph.cli.formatting.output import ConsoleOutput
from vouchgraph.cli.utils import ledger_session
from vouchgraph.config.defaults import (
    DEFAULT_OUTPUT_FILE,
    DEFAULT_SCORE_CONCURRENCY,
    DEFAULT_SCORE_DEPTH,
    DEFAULT_VOUCH_DEPTH,
)
from vouchgraph.config.settings import LedgerConfig
from vouchgraph.errors import VouchGraphError
from vouchgraph.ledger.client import LedgerClient
from vouchgraph.names import load_all_name_mappings
from vouchgraph.pipeline import analyze_vouch_graph
from vouchgraph.render import generate_mermaid_graph

logger = logging.getLogger(__name__)


async def run(
    address: str,
    config: LedgerConfig,
    vouch_depth: int = DEFAULT_VOUCH_DEPTH,
    score_depth: int = DEFAULT_SCORE_DEPTH,
    output: Path = Path(DEFAULT_OUTPUT_FILE),
    name_sources: Optional[Sequence[str]] = None,
    use_default_names: bool = True,
    concurrency: int = DEFAULT_SCORE_CONCURRENCY,
    client: Optional[LedgerClient] = None,
    console: Optional[ConsoleOutput] = None,
) -> int:
    """Run the vouch-graph command."""
    console = console or ConsoleOutput()

    if vouch_depth < 1:
        console.print_error("Vouch depth must be a positive number")
        return 1
    if score_depth < 0:
        console.print_error("Score depth must be a non-negative number (0 for unlimited)")
        return 1
    if concurrency < 1:
        console.print_error("Concurrency must be a positive number")
        return 1

    try:
        start = validate_and_normalize_address(address)
    except VouchGraphError as e:
        console.print_error(str(e))
        return 1

    depth_text = "unlimited" if score_depth == 0 else str(score_depth)
    console.print(
        f"Fetching vouch graph for {shorten_address(start)} with vouch depth "
        f"{vouch_depth} and score depth {depth_text}..."
    )

    names = await load_all_name_mappings(name_sources or [], use_default=use_default_names)

    try:
        async with ledger_session(config, client) as ledger:
            report = await analyze_vouch_graph(
                ledger,
                ledger,
                start,
                vouch_depth=vouch_depth,
                score_depth=score_depth,
                concurrency=concurrency,
            )
    except VouchGraphError as e:
        logger.debug("vouch-graph failed", exc_info=True)
        console.print_error(f"generating vouch graph: {e}")
        return 1

    graph = report.graph
    console.print(
        f"Found {len(report.root_set)} root addresses, {len(graph.visited)} addresses "
        f"and {len(graph.edges)} vouching relationships"
    )

    content = generate_mermaid_graph(
        graph.edges, start, report.root_set, report.scores, names
    )

    try:
        async with aiofiles.open(output, "w", encoding="utf-8") as f:
            await f.write(content)
    except OSError as e:
        console.print_error(f"writing {output}: {e}")
        return 1

    console.print_success(f"Mermaid graph written to {output}")
    console.print_dim(f"You can generate a visual graph using: mmdc -i {output} -o graph.png")
    return 0
