#!/usr/bin/env python
"""Vouches command - Print the vouches received by an address as JSON."""

from __future__ import annotations

import json
import logging
from typing import Optional

from vouchgraph.address import validate_and_normalize_address
from vouchgraph.cli.formatting.output import ConsoleOutput
from vouchgraph.cli.utils import ledger_session
from vouchgraph.config.settings import LedgerConfig
from vouchgraph.errors import VouchGraphError
from vouchgraph.ledger.client import LedgerClient

logger = logging.getLogger(__name__)


async def run(
    address: str,
    config: LedgerConfig,
    client: Optional[LedgerClient] = None,
    console: Optional[ConsoleOutput] = None,
) -> int:
    """Run the vouches command."""
    console = console or ConsoleOutput()

    try:
        normalized = validate_and_normalize_address(address)
        async with ledger_session(config, client) as ledger:
            vouches = await ledger.get_received_vouches(normalized)
    except VouchGraphError as e:
        logger.debug("vouches failed", exc_info=True)
        console.print_error(f"fetching vouches: {e}")
        return 1

    print(json.dumps(
        [{"address": v.address, "epoch": v.epoch} for v in vouches],
        indent=2,
    ))
    return 0
