"""Address validation and display helpers."""

from __future__ import annotations

import re

from vouchgraph.errors import InvalidAddressError

_HEX_RE = re.compile(r"^[0-9A-Fa-f]+$")
_PREFIX_RE = re.compile(r"^0x", re.IGNORECASE)

SHORT_ADDRESS_LENGTH = 32
FULL_ADDRESS_LENGTH = 64


def strip_prefix(address: str) -> str:
    """Remove a leading 0x/0X, if any."""
    return _PREFIX_RE.sub("", address)


def validate_and_normalize_address(address: str) -> str:
    """Validate an account address and return its canonical form.

    Accepts addresses with or without a ``0x`` prefix, made of hex digits
    only, 32 or 64 characters long. Legacy 32-character addresses are
    left-padded with zeros to the full 64 characters.

    Returns:
        ``0x`` followed by 64 lowercase hex digits.

    Raises:
        InvalidAddressError: If the address is not hex or has a bad length.
    """
    bare = strip_prefix(address.strip())

    if not _HEX_RE.match(bare):
        raise InvalidAddressError(
            "Address must contain only hexadecimal characters (0-9, A-F)",
            address=address,
        )

    if len(bare) not in (SHORT_ADDRESS_LENGTH, FULL_ADDRESS_LENGTH):
        raise InvalidAddressError(
            f"Address must be {SHORT_ADDRESS_LENGTH} or {FULL_ADDRESS_LENGTH} "
            f"characters long (got {len(bare)})",
            address=address,
        )

    return "0x" + bare.rjust(FULL_ADDRESS_LENGTH, "0").lower()


def shorten_address(address: str) -> str:
    """Shorten an address for display: 0x + first 4 ... last 4 characters."""
    bare = strip_prefix(address)
    if len(bare) <= 8:
        return "0x" + bare
    return f"0x{bare[:4]}...{bare[-4:]}"
