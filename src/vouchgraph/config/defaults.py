"""Default configuration values for vouchgraph.

This module centralizes the hard-coded constants (scores, depths, network
endpoints, view function ids, timeouts) in a single location. All modules
should import these constants instead of hard-coding values.

Usage:
    from vouchgraph.config import (
        ROOT_SCORE,
        DEFAULT_VOUCH_DEPTH,
        MAINNET_URL,
    )
"""

from __future__ import annotations

# =============================================================================
# Scoring Defaults
# =============================================================================

# Fixed score carried by every root of trust; halved at each hop away from it
ROOT_SCORE = 200_000


# =============================================================================
# Traversal Defaults
# =============================================================================

DEFAULT_VOUCH_DEPTH = 4
DEFAULT_SCORE_DEPTH = 4  # 0 = unlimited
DEFAULT_SCORE_CONCURRENCY = 1


# =============================================================================
# Output Defaults
# =============================================================================

DEFAULT_OUTPUT_FILE = "vouch-graph.md"

DEFAULT_NAME_MAPPING_URL = (
    "https://raw.githubusercontent.com/0LNetworkCommunity/v7-addresses/"
    "refs/heads/main/validator-handle.json"
)


# =============================================================================
# Ledger Network Defaults
# =============================================================================

NETWORK_MAINNET = "mainnet"
NETWORK_TESTNET = "testnet"

MAINNET_URL = "https://rpc.openlibra.space:8080/v1"
TESTNET_URL = "https://testnet.openlibra.io/v1"

NETWORK_URLS = {
    NETWORK_MAINNET: MAINNET_URL,
    NETWORK_TESTNET: TESTNET_URL,
}

# Registry account holding the root-of-trust list
ROOT_REGISTRY_ADDRESS = "0x1"

VIEW_GET_CURRENT_ROOTS = "0x1::root_of_trust::get_current_roots_at_registry"
VIEW_GET_RECEIVED_VOUCHES = "0x1::vouch::get_received_vouches"


# =============================================================================
# HTTP Timeouts
# =============================================================================

LEDGER_CONNECT_TIMEOUT = 10.0  # seconds
LEDGER_READ_TIMEOUT = 30.0  # seconds
NAME_MAPPING_TIMEOUT = 15.0  # seconds
