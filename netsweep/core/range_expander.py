"""
Expansion of address specifications into the addresses to probe.

Expansions are returned as ``range`` objects: they behave as ordered,
indexable sequences of integer addresses and stay cheap even for a /0 block.
"""

from typing import Sequence

from .address_codec import parse_address
from .data_models import AddressSpec
from ..utils.error_handler import AddressFormatError

ADDRESS_SPACE = 1 << 32
ALL_ONES = ADDRESS_SPACE - 1


def mask_word(prefix: int) -> int:
    """Return the 32-bit word with the top ``prefix`` bits set."""
    return (ALL_ONES << (32 - prefix)) & ALL_ONES


def block_size(prefix: int) -> int:
    """Number of addresses in a block of the given prefix length."""
    return 1 << (32 - prefix)


def expand_spec(spec: AddressSpec) -> Sequence[int]:
    """
    Expand a parsed specification.

    A maskless spec yields exactly its address. A spec with prefix length M
    yields every address of its block, network and broadcast addresses
    included.

    Args:
        spec: Parsed address specification

    Returns:
        Ascending sequence of addresses
    """
    if spec.mask is None:
        return range(spec.address, spec.address + 1)

    base = spec.address & mask_word(spec.mask)
    return range(base, base + block_size(spec.mask))


def expand_range(text: str) -> Sequence[int]:
    """
    Expand an inclusive ``A-B`` range.

    Masks on either endpoint are parsed but ignored. A start above the end
    gives an empty sequence.
    """
    start_text, _, end_text = text.partition("-")
    start = parse_address(start_text).address
    end = parse_address(end_text).address
    return range(start, end + 1)


def expand(text: str) -> Sequence[int]:
    """
    Expand one command-line address specification.

    Args:
        text: A single address, a masked or partial block, or an ``A-B`` range

    Returns:
        Ascending sequence of addresses to probe

    Raises:
        AddressFormatError: If the text is empty or cannot be parsed
    """
    if not text:
        raise AddressFormatError("empty argument")

    if "-" in text:
        return expand_range(text)

    return expand_spec(parse_address(text))
