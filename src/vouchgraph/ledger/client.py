"""
Async client for the ledger node's REST API.

Implements the RootProvider and VoucherLookup protocols on top of the
node's ``/view`` endpoint, and exposes ledger info for the block height.

Usage:
    async with LedgerClient(LedgerConfig(network="testnet")) as client:
        roots = await client.get_root_addresses()
        vouches = await client.get_received_vouches("0x...")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from vouchgraph.address import shorten_address
from vouchgraph.config.settings import LedgerConfig, get_ledger_config
from vouchgraph.errors import MalformedResponseError, TransientLookupError
from vouchgraph.ledger.views import current_roots_payload, received_vouches_payload
from vouchgraph.models import Vouch

logger = logging.getLogger(__name__)


class LedgerClient:
    """Ledger REST client with typed view helpers."""

    def __init__(
        self,
        config: Optional[LedgerConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_ledger_config()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(
                    self.config.read_timeout,
                    connect=self.config.connect_timeout,
                ),
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "LedgerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # === Raw requests ===

    async def _request(
        self,
        method: str,
        path: str,
        address: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """Send a request and decode its JSON body, mapping failures to lookup errors."""
        try:
            response = await self._http().request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise TransientLookupError(
                f"Ledger request {method} {path} timed out", address=address
            ) from e
        except httpx.HTTPStatusError as e:
            raise TransientLookupError(
                f"Ledger error {e.response.status_code}: {e.response.text}",
                address=address,
            ) from e
        except httpx.HTTPError as e:
            raise TransientLookupError(
                f"Ledger request {method} {path} failed: {e}", address=address
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Ledger returned invalid JSON for {method} {path}", address=address
            ) from e

    async def view(self, payload: Dict[str, Any], address: Optional[str] = None) -> Any:
        """Call a view function and return its decoded result list."""
        logger.debug("view %s %s", payload["function"], payload["arguments"])
        return await self._request("POST", "/view", address=address, json=payload)

    async def get_ledger_info(self) -> Dict[str, Any]:
        """Fetch the node's ledger info object."""
        info = await self._request("GET", "/")
        if not isinstance(info, dict):
            raise MalformedResponseError(f"Unexpected ledger info format: {info!r}")
        return info

    async def get_block_height(self) -> int:
        """Current block height of the ledger."""
        info = await self.get_ledger_info()
        try:
            return int(info["block_height"])
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponseError(
                f"Ledger info has no usable block_height: {info!r}"
            ) from e

    # === RootProvider / VoucherLookup ===

    async def get_root_addresses(self) -> List[str]:
        """Fetch the current root-of-trust addresses from the registry.

        The view returns ``[[addr, ...]]``.
        """
        result = await self.view(current_roots_payload())
        if not isinstance(result, list) or not result or not isinstance(result[0], list):
            raise MalformedResponseError(
                f"Unexpected response format from root registry: {result!r}"
            )
        return [str(addr) for addr in result[0]]

    async def get_received_vouches(self, address: str) -> List[Vouch]:
        """Fetch the vouches received by `address`.

        The view returns ``[[voucher, ...], [epoch, ...]]`` with the two
        lists aligned by index.
        """
        result = await self.view(received_vouches_payload(address), address=address)
        if not (isinstance(result, list) and len(result) == 2):
            raise MalformedResponseError(
                f"Unexpected vouch format for {shorten_address(address)}: {result!r}",
                address=address,
            )

        addresses, epochs = result
        if not (
            isinstance(addresses, list)
            and isinstance(epochs, list)
            and len(addresses) == len(epochs)
        ):
            raise MalformedResponseError(
                f"Unexpected vouch format for {shorten_address(address)}: {result!r}",
                address=address,
            )

        try:
            return [
                Vouch(address=str(voucher), epoch=int(epoch))
                for voucher, epoch in zip(addresses, epochs)
            ]
        except (TypeError, ValueError) as e:
            raise MalformedResponseError(
                f"Non-numeric epoch in vouches for {shorten_address(address)}",
                address=address,
            ) from e
