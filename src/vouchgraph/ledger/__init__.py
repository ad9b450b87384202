"""Ledger service access."""

from __future__ import annotations

from .client import LedgerClient
from .views import current_roots_payload, received_vouches_payload, view_payload

__all__ = [
    "LedgerClient",
    "current_roots_payload",
    "received_vouches_payload",
    "view_payload",
]
