"""
Conversion between dotted-quad text and 32-bit integer addresses.

Accepted notations:

    192.168.1.7         a single address
    192.168.1.0/24      a block with an explicit prefix length
    192.168..           a block whose prefix length is inferred from the
                        first empty octet field (16 here)

Octet fields that are not valid 8-bit decimal numbers read as 0. This lenient
policy is intentional: an empty field is the wildcard notation above, and any
other garbage field behaves the same way without being flagged.
"""

import re
from typing import Optional

from .data_models import AddressSpec
from .dotted_quad import format_address
from ..utils.error_handler import AddressFormatError

__all__ = ["parse_address", "format_address"]

_DECIMAL = re.compile(r"\+?[0-9]+")

OCTET_COUNT = 4
MAX_PREFIX = 32


def _parse_octet(field: str) -> int:
    if not _DECIMAL.fullmatch(field):
        return 0
    value = int(field)
    if value > 0xFF:
        return 0
    return value


def _parse_mask(text: str, original: str) -> int:
    if not _DECIMAL.fullmatch(text):
        raise AddressFormatError("mask is not an integer", original)
    mask = int(text)
    if mask > MAX_PREFIX:
        raise AddressFormatError(f"mask out of range 0-{MAX_PREFIX}", original)
    return mask


def parse_address(text: str) -> AddressSpec:
    """
    Parse an address with an optional ``/mask`` suffix.

    Args:
        text: Address specification, e.g. "10.0.0.0/24" or "10.0.."

    Returns:
        AddressSpec with the assembled address and the resolved prefix length

    Raises:
        AddressFormatError: On multiple masks, a bad mask or a field count
            other than four
    """
    parts = text.split("/")
    if len(parts) > 2:
        raise AddressFormatError("multiple masks for one address", text)

    mask: Optional[int] = None
    if len(parts) == 2:
        mask = _parse_mask(parts[1], text)

    fields = parts[0].split(".")
    if len(fields) != OCTET_COUNT:
        raise AddressFormatError("invalid number of octets", text)

    address = 0
    for index, field in enumerate(fields):
        address = (address << 8) | _parse_octet(field)
        # First omitted octet wins; an explicit mask always wins.
        if field == "" and mask is None:
            mask = index * 8

    return AddressSpec(address=address, mask=mask)
