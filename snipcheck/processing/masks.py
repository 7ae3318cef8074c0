# snipcheck/processing/masks.py

from __future__ import annotations
import ipaddress
from types import MappingProxyType
from typing import Mapping, Optional

from snipcheck.errors import UnknownSubnetMaskError

# Dotted-decimal subnet mask -> CIDR prefix length. /8 through /32 only.
SUBNET_MASKS: Mapping[str, int] = MappingProxyType({
    "255.0.0.0": 8,
    "255.128.0.0": 9,
    "255.192.0.0": 10,
    "255.224.0.0": 11,
    "255.240.0.0": 12,
    "255.248.0.0": 13,
    "255.252.0.0": 14,
    "255.254.0.0": 15,
    "255.255.0.0": 16,
    "255.255.128.0": 17,
    "255.255.192.0": 18,
    "255.255.224.0": 19,
    "255.255.240.0": 20,
    "255.255.248.0": 21,
    "255.255.252.0": 22,
    "255.255.254.0": 23,
    "255.255.255.0": 24,
    "255.255.255.128": 25,
    "255.255.255.192": 26,
    "255.255.255.224": 27,
    "255.255.255.240": 28,
    "255.255.255.248": 29,
    "255.255.255.252": 30,
    "255.255.255.254": 31,
    "255.255.255.255": 32,
})

MIN_PREFIX_LEN = 8
MAX_PREFIX_LEN = 32


def convert_mask(mask: str, line_number: Optional[int] = None) -> str:
    """
    Convert a dotted-decimal mask to its CIDR suffix, e.g. "255.255.255.0" -> "/24".

    Raises UnknownSubnetMaskError for anything outside the table instead of
    handing back a bare "/".
    """
    try:
        prefix_len = SUBNET_MASKS[mask]
    except KeyError:
        raise UnknownSubnetMaskError(mask, line_number, nearest_mask(mask)) from None
    return f"/{prefix_len}"


def prefix_to_mask(prefix_len: int) -> str:
    """Expand a prefix length (8-32) to its dotted-decimal mask."""
    if not MIN_PREFIX_LEN <= prefix_len <= MAX_PREFIX_LEN:
        raise ValueError(f"prefix length must be {MIN_PREFIX_LEN}-{MAX_PREFIX_LEN}, got {prefix_len}")
    bits = (0xFFFFFFFF << (32 - prefix_len)) & 0xFFFFFFFF
    return ".".join(str((bits >> shift) & 0xFF) for shift in (24, 16, 8, 0))


def nearest_mask(mask: str) -> Optional[str]:
    """
    Best guess at the mask that was meant: keep the leading one bits.

    "255.255.255.1" -> "255.255.255.0". None when ``mask`` is not a dotted
    quad or has fewer than 8 leading one bits.
    """
    try:
        value = int(ipaddress.IPv4Address(mask))
    except ValueError:
        return None
    prefix_len = 32 - (~value & 0xFFFFFFFF).bit_length()
    if prefix_len < MIN_PREFIX_LEN:
        return None
    return prefix_to_mask(prefix_len)
