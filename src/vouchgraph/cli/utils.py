"""Shared helpers for CLI commands."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from vouchgraph.config.settings import LedgerConfig
from vouchgraph.ledger.client import LedgerClient


@asynccontextmanager
async def ledger_session(
    config: LedgerConfig,
    client: Optional[LedgerClient] = None,
) -> AsyncIterator[LedgerClient]:
    """Yield `client` if given, else a new LedgerClient closed on exit."""
    if client is not None:
        yield client
        return

    async with LedgerClient(config) as owned:
        yield owned
