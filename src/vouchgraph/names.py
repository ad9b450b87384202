"""
Address -> display name mappings.

Mappings are JSON documents with a ``validators`` object keyed by address:

    {"validators": {"0xabc...": "alice", "def...": "bob"}}

They can be loaded from local files or URLs; a community-maintained list
is loaded by default. Load failures are logged and yield an empty map.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import aiofiles
import httpx

from vouchgraph.config.defaults import DEFAULT_NAME_MAPPING_URL, NAME_MAPPING_TIMEOUT

logger = logging.getLogger(__name__)

AddressNameMap = Dict[str, str]


def _normalize_key(address: str) -> str:
    address = address.lower()
    return address if address.startswith("0x") else "0x" + address


def parse_name_mapping(data: Any) -> AddressNameMap:
    """Extract the address -> name pairs from a decoded mapping document."""
    names: AddressNameMap = {}
    if not isinstance(data, dict):
        return names
    validators = data.get("validators")
    if not isinstance(validators, dict):
        return names
    for address, name in validators.items():
        if isinstance(name, str):
            names[_normalize_key(address)] = name
    return names


async def load_name_mapping_from_file(path: Union[str, Path]) -> AddressNameMap:
    """Load name mappings from a local JSON file."""
    try:
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            content = await f.read()
        names = parse_name_mapping(json.loads(content))
    except (OSError, ValueError) as e:
        logger.warning("Failed to load name mappings from %s: %s", path, e)
        return {}

    logger.info("Loaded %d name mappings from %s", len(names), path)
    return names


async def load_name_mapping_from_url(
    url: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AddressNameMap:
    """Load name mappings from a URL."""
    try:
        async with httpx.AsyncClient(timeout=NAME_MAPPING_TIMEOUT, transport=transport) as client:
            response = await client.get(url, follow_redirects=True)
            response.raise_for_status()
            names = parse_name_mapping(response.json())
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Failed to load name mappings from %s: %s", url, e)
        return {}

    logger.info("Loaded %d name mappings from %s", len(names), url)
    return names


def is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


async def load_all_name_mappings(
    sources: Iterable[str],
    use_default: bool = True,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AddressNameMap:
    """Load and merge name mappings from files and URLs.

    The default mapping (if enabled) is loaded first; later sources override
    earlier ones for the same address.
    """
    merged: AddressNameMap = {}

    if use_default:
        merged.update(await load_name_mapping_from_url(DEFAULT_NAME_MAPPING_URL, transport))

    for source in sources:
        if is_url(source):
            merged.update(await load_name_mapping_from_url(source, transport))
        else:
            merged.update(await load_name_mapping_from_file(source))

    logger.info("Total name mappings loaded: %d", len(merged))
    return merged
