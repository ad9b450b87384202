"""
Protocols for the ledger capabilities the graph walk and scoring depend on.

The ledger client implements both; tests substitute in-memory fakes.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from vouchgraph.models import Vouch


@runtime_checkable
class RootProvider(Protocol):
    """Source of the current root-of-trust addresses."""

    async def get_root_addresses(self) -> List[str]:
        """Return the current root addresses.

        Raises:
            LedgerLookupError: On transport or format problems.
        """
        ...


@runtime_checkable
class VoucherLookup(Protocol):
    """Source of the vouches an address has received."""

    async def get_received_vouches(self, address: str) -> List[Vouch]:
        """Return the vouches received by `address`, in ledger order.

        Raises:
            LedgerLookupError: On transport or format problems.
        """
        ...


__all__ = [
    "RootProvider",
    "VoucherLookup",
]
