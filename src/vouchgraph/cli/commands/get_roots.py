#!/usr/bin/env python
"""Get roots command - List the current root-of-trust addresses."""

from __future__ import annotations

import json
import logging
from typing import Optional

from vouchgraph.cli.formatting.output import ConsoleOutput
from vouchgraph.cli.utils import ledger_session
from vouchgraph.config.settings import LedgerConfig
from vouchgraph.errors import VouchGraphError
from vouchgraph.ledger.client import LedgerClient

logger = logging.getLogger(__name__)


async def run(
    config: LedgerConfig,
    json_output: bool = False,
    client: Optional[LedgerClient] = None,
    console: Optional[ConsoleOutput] = None,
) -> int:
    """Run the get-roots command."""
    console = console or ConsoleOutput()

    try:
        async with ledger_session(config, client) as ledger:
            roots = await ledger.get_root_addresses()
    except VouchGraphError as e:
        logger.debug("get-roots failed", exc_info=True)
        if json_output:
            print(json.dumps({"status": "error", "error": str(e)}))
        else:
            console.print_error(f"fetching root addresses: {e}")
        return 1

    # Ensure the 0x prefix is present exactly once
    roots = [addr if addr.startswith("0x") else "0x" + addr for addr in roots]

    if json_output:
        print(json.dumps({"roots": roots}, indent=2))
        return 0

    if not roots:
        console.print("No root addresses found in the registry")
    else:
        console.print(f"[bold]Found {len(roots)} root addresses:[/bold]")
        for addr in roots:
            console.print(f"  {addr}")
    return 0
