"""Voucher lookup helpers shared by the graph walk and the score engine."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List

from vouchgraph.address import shorten_address
from vouchgraph.errors import LedgerLookupError
from vouchgraph.models import Vouch
from vouchgraph.protocols import VoucherLookup

logger = logging.getLogger(__name__)


async def fetch_voucher_addresses(
    lookup: VoucherLookup,
    address: str,
    purpose: str = "graph walk",
) -> List[str]:
    """Return the addresses vouching for `address`, or [] if the lookup fails.

    A failed lookup is logged and degrades to an empty voucher list so the
    caller can prune that branch and carry on.
    """
    try:
        vouches = await lookup.get_received_vouches(address)
    except LedgerLookupError as e:
        logger.warning(
            "Could not fetch received vouches for %s during %s: %s",
            shorten_address(address),
            purpose,
            e,
        )
        return []
    return [vouch.address for vouch in vouches]


class CachedVoucherLookup:
    """Memoize a VoucherLookup for the duration of one run.

    Each address is looked up at most once; concurrent callers share the
    in-flight request. Failures are cached too, so a failed lookup stays
    failed for the rest of the run.
    """

    def __init__(self, lookup: VoucherLookup):
        self._lookup = lookup
        self._entries: Dict[str, asyncio.Future] = {}
        self.hits = 0
        self.misses = 0

    async def get_received_vouches(self, address: str) -> List[Vouch]:
        entry = self._entries.get(address)
        if entry is None:
            self.misses += 1
            entry = asyncio.ensure_future(self._lookup.get_received_vouches(address))
            self._entries[address] = entry
        else:
            self.hits += 1
        vouches = await asyncio.shield(entry)
        return list(vouches)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
