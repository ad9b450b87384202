"""Ledger connection configuration.

Provides the network endpoint and HTTP timeouts used by the ledger client,
overridable from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from vouchgraph.config.defaults import (
    LEDGER_CONNECT_TIMEOUT,
    LEDGER_READ_TIMEOUT,
    NETWORK_MAINNET,
    NETWORK_URLS,
)


@dataclass
class LedgerConfig:
    """Configuration for talking to a ledger node."""

    network: str = NETWORK_MAINNET
    # Explicit base URL; wins over the network's default endpoint
    url: Optional[str] = None

    # Timeouts in seconds
    connect_timeout: float = LEDGER_CONNECT_TIMEOUT
    read_timeout: float = LEDGER_READ_TIMEOUT

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        return cls(
            network=os.environ.get("VOUCHGRAPH_NETWORK", NETWORK_MAINNET),
            url=os.environ.get("VOUCHGRAPH_URL") or None,
            connect_timeout=float(
                os.environ.get("VOUCHGRAPH_CONNECT_TIMEOUT", str(LEDGER_CONNECT_TIMEOUT))
            ),
            read_timeout=float(
                os.environ.get("VOUCHGRAPH_READ_TIMEOUT", str(LEDGER_READ_TIMEOUT))
            ),
        )

    @property
    def base_url(self) -> str:
        """Resolved base URL of the node's REST API, without trailing slash."""
        if self.url:
            return self.url.rstrip("/")
        try:
            return NETWORK_URLS[self.network]
        except KeyError:
            raise ValueError(
                f"Unknown network: {self.network}. Known networks: {sorted(NETWORK_URLS)}"
            ) from None


# Global config instance
_config: Optional[LedgerConfig] = None


def get_ledger_config() -> LedgerConfig:
    """Get global ledger config."""
    global _config
    if _config is None:
        _config = LedgerConfig.from_env()
    return _config


def set_ledger_config(config: Optional[LedgerConfig]) -> None:
    """Set global ledger config (None resets to environment defaults)."""
    global _config
    _config = config
