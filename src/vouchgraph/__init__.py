"""
vouchgraph - vouch graphs and trust scores from an Open Libra ledger.

Walks the "received vouches" relation outward from an address, then scores
every address found by its decayed, summed paths back to the roots of trust.
"""

from __future__ import annotations

from .address import shorten_address, validate_and_normalize_address
from .config.defaults import ROOT_SCORE
from .errors import (
    FatalInputError,
    InvalidAddressError,
    LedgerLookupError,
    MalformedResponseError,
    TransientLookupError,
    VouchGraphError,
)
from .graph import GraphBuilder, build_graph
from .lookup import CachedVoucherLookup, fetch_voucher_addresses
from .models import GraphResult, ScoreMap, Vouch, VouchEdge, VouchGraphReport
from .pipeline import analyze_vouch_graph, fetch_root_set
from .protocols import RootProvider, VoucherLookup
from .render import format_score, generate_mermaid_graph
from .scoring import ScoreEngine, compute_scores, path_contribution

__version__ = "0.3.0"

__all__ = [
    "ROOT_SCORE",
    "CachedVoucherLookup",
    "FatalInputError",
    "GraphBuilder",
    "GraphResult",
    "InvalidAddressError",
    "LedgerLookupError",
    "MalformedResponseError",
    "RootProvider",
    "ScoreEngine",
    "ScoreMap",
    "TransientLookupError",
    "Vouch",
    "VouchEdge",
    "VouchGraphError",
    "VouchGraphReport",
    "VoucherLookup",
    "analyze_vouch_graph",
    "build_graph",
    "compute_scores",
    "fetch_root_set",
    "fetch_voucher_addresses",
    "format_score",
    "generate_mermaid_graph",
    "path_contribution",
    "shorten_address",
    "validate_and_normalize_address",
]
