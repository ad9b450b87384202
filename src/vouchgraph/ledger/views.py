"""Payload builders for ledger view functions."""

from __future__ import annotations

from typing import Any, Dict, List

from vouchgraph.config.defaults import (
    ROOT_REGISTRY_ADDRESS,
    VIEW_GET_CURRENT_ROOTS,
    VIEW_GET_RECEIVED_VOUCHES,
)


def view_payload(function: str, arguments: List[Any]) -> Dict[str, Any]:
    """Build the JSON body of a ``POST /view`` request."""
    return {
        "function": function,
        "type_arguments": [],
        "arguments": list(arguments),
    }


def current_roots_payload(registry: str = ROOT_REGISTRY_ADDRESS) -> Dict[str, Any]:
    return view_payload(VIEW_GET_CURRENT_ROOTS, [registry])


def received_vouches_payload(address: str) -> Dict[str, Any]:
    return view_payload(VIEW_GET_RECEIVED_VOUCHES, [address])
