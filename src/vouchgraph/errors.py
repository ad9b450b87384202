"""Exception hierarchy for vouchgraph.

Fatal errors abort a run before (or as soon as) traversal begins. Lookup
errors are raised by ledger lookups; the graph walk and the score engine
recover from them locally by pruning the affected branch.
"""

from __future__ import annotations

from typing import Optional


class VouchGraphError(Exception):
    """Base class for all vouchgraph errors."""


class FatalInputError(VouchGraphError):
    """The run cannot proceed (bad start address, no root set)."""


class InvalidAddressError(FatalInputError, ValueError):
    """An address string failed validation."""

    def __init__(self, message: str, address: Optional[str] = None):
        super().__init__(message)
        self.address = address


class LedgerLookupError(VouchGraphError, LookupError):
    """A query against the ledger service failed."""

    def __init__(self, message: str, address: Optional[str] = None):
        super().__init__(message)
        self.address = address


class TransientLookupError(LedgerLookupError):
    """Transport-level failure (connection, timeout, HTTP error status)."""


class MalformedResponseError(LedgerLookupError):
    """The ledger answered, but with a shape we cannot interpret."""
