"""Shared fixtures for vouchgraph tests."""

from __future__ import annotations

import io
from typing import Dict, Iterable, List, Optional

import pytest
from rich.console import Console

from vouchgraph.cli.formatting.output import ConsoleOutput
from vouchgraph.errors import MalformedResponseError, TransientLookupError
from vouchgraph.models import Vouch


class FakeLedger:
    """In-memory ledger implementing RootProvider and VoucherLookup.

    `vouches` maps an address to the addresses vouching for it, in the order
    the ledger would return them. Unknown addresses have no vouchers.
    """

    def __init__(
        self,
        vouches: Optional[Dict[str, List[str]]] = None,
        roots: Iterable[str] = (),
        failing: Iterable[str] = (),
        malformed: Iterable[str] = (),
        roots_error: Optional[Exception] = None,
        block_height: int = 0,
    ):
        self.vouches = vouches or {}
        self.roots = list(roots)
        self.failing = set(failing)
        self.malformed = set(malformed)
        self.roots_error = roots_error
        self.block_height = block_height
        self.calls: List[str] = []

    async def get_root_addresses(self) -> List[str]:
        if self.roots_error is not None:
            raise self.roots_error
        return list(self.roots)

    async def get_received_vouches(self, address: str) -> List[Vouch]:
        self.calls.append(address)
        if address in self.failing:
            raise TransientLookupError(f"node unavailable for {address}", address=address)
        if address in self.malformed:
            raise MalformedResponseError(f"garbage for {address}", address=address)
        return [
            Vouch(address=voucher, epoch=epoch)
            for epoch, voucher in enumerate(self.vouches.get(address, []), start=100)
        ]

    async def get_block_height(self) -> int:
        return self.block_height


@pytest.fixture
def make_ledger():
    """Factory for FakeLedger instances."""
    return FakeLedger


@pytest.fixture
def console_buffer():
    """ConsoleOutput writing into a StringIO; returns (console, buffer)."""
    buffer = io.StringIO()
    console = ConsoleOutput(Console(file=buffer, force_terminal=False, width=200))
    return console, buffer
