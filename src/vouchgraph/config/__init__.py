"""Configuration for vouchgraph."""

from __future__ import annotations

from .defaults import (
    DEFAULT_NAME_MAPPING_URL,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_SCORE_CONCURRENCY,
    DEFAULT_SCORE_DEPTH,
    DEFAULT_VOUCH_DEPTH,
    LEDGER_CONNECT_TIMEOUT,
    LEDGER_READ_TIMEOUT,
    MAINNET_URL,
    NAME_MAPPING_TIMEOUT,
    NETWORK_MAINNET,
    NETWORK_TESTNET,
    NETWORK_URLS,
    ROOT_REGISTRY_ADDRESS,
    ROOT_SCORE,
    TESTNET_URL,
    VIEW_GET_CURRENT_ROOTS,
    VIEW_GET_RECEIVED_VOUCHES,
)
from .settings import LedgerConfig, get_ledger_config, set_ledger_config

__all__ = [
    "DEFAULT_NAME_MAPPING_URL",
    "DEFAULT_OUTPUT_FILE",
    "DEFAULT_SCORE_CONCURRENCY",
    "DEFAULT_SCORE_DEPTH",
    "DEFAULT_VOUCH_DEPTH",
    "LEDGER_CONNECT_TIMEOUT",
    "LEDGER_READ_TIMEOUT",
    "MAINNET_URL",
    "NAME_MAPPING_TIMEOUT",
    "NETWORK_MAINNET",
    "NETWORK_TESTNET",
    "NETWORK_URLS",
    "ROOT_REGISTRY_ADDRESS",
    "ROOT_SCORE",
    "TESTNET_URL",
    "VIEW_GET_CURRENT_ROOTS",
    "VIEW_GET_RECEIVED_VOUCHES",
    "LedgerConfig",
    "get_ledger_config",
    "set_ledger_config",
]
