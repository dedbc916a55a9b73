"""
Core data models for netsweep.

This module defines the value types passed between the sweep stages:
parsed address specifications, per-address probe results, and the report
produced by a complete sweep.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .dotted_quad import format_address


@dataclass(frozen=True)
class AddressSpec:
    """
    A parsed address specification.

    Attributes:
        address: 32-bit IPv4 address, most-significant octet first
        mask: Prefix length in [0, 32], or None for "this exact address"
    """
    address: int
    mask: Optional[int] = None

    @property
    def is_block(self) -> bool:
        return self.mask is not None


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of probing one address.

    Attributes:
        address: Probed 32-bit IPv4 address
        alive: Whether the liveness probe succeeded
        name: Reverse-resolved host name, if any
    """
    address: int
    alive: bool
    name: Optional[str] = None

    @property
    def ip(self) -> str:
        return format_address(self.address)


@dataclass
class SweepReport:
    """
    Result of a complete sweep.

    Attributes:
        timestamp: When the sweep started
        specs: Address specifications that were expanded (empty for interfaces)
        total_addresses: Number of addresses submitted to the probe pipeline
        results: Live hosts in submission order
        duration: Wall time of the sweep in seconds
    """
    timestamp: datetime
    specs: List[str] = field(default_factory=list)
    total_addresses: int = 0
    results: List[ScanResult] = field(default_factory=list)
    duration: float = 0.0

    @property
    def alive_count(self) -> int:
        return len(self.results)
