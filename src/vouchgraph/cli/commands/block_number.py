#!/usr/bin/env python
"""Block number command - Print the ledger's current block height."""

from __future__ import annotations

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
    client: Optional[LedgerClient] = None,
    console: Optional[ConsoleOutput] = None,
) -> int:
    """Run the block-number command."""
    console = console or ConsoleOutput()

    try:
        async with ledger_session(config, client) as ledger:
            height = await ledger.get_block_height()
    except VouchGraphError as e:
        logger.debug("block-number failed", exc_info=True)
        console.print_error(f"fetching block number: {e}")
        return 1

    console.print(str(height))
    return 0
