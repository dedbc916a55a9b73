"""
Detection of the locally configured IPv4 networks.

When a sweep is started without address arguments, the networks of the local
interfaces are swept instead. InterfaceDetector lists them as
``address/prefix`` strings, skipping loopback interfaces, link-layer entries
and IPv6 addresses.
"""

import ipaddress
import socket
from typing import List, Optional

import psutil

from ..utils.logger import Logger, get_logger


class InterfaceDetector:
    """
    Lists ``address/prefix`` strings for the host's IPv4 interfaces.

    psutil reports every address family of every interface; only AF_INET
    entries with a netmask on non-loopback addresses are kept.
    """

    def __init__(self, logger: Optional[Logger] = None):
        """Initialize the InterfaceDetector."""
        self.logger = logger or get_logger(__name__)

    def list_interfaces(self) -> List[str]:
        """
        Return the configured IPv4 networks of the local interfaces.

        Returns:
            List of strings such as "192.168.1.20/24", in interface order
        """
        specs = []

        for interface_name, addresses in psutil.net_if_addrs().items():
            for address in addresses:
                if address.family != socket.AF_INET:
                    continue

                spec = self._to_spec(interface_name, address.address, address.netmask)
                if spec:
                    specs.append(spec)

        self.logger.info(f"Found {len(specs)} local IPv4 networks: {', '.join(specs) or 'none'}")
        return specs

    def _to_spec(self, interface_name: str, ip: str, netmask: Optional[str]) -> Optional[str]:
        try:
            ip_addr = ipaddress.IPv4Address(ip)
        except ipaddress.AddressValueError:
            self.logger.debug(f"Ignoring invalid address on {interface_name}: {ip}")
            return None

        if ip_addr.is_loopback:
            return None

        if not netmask:
            self.logger.debug(f"Ignoring {ip} on {interface_name}: no netmask")
            return None

        prefix = self._netmask_to_prefix(netmask)
        if prefix is None:
            self.logger.debug(f"Ignoring {ip} on {interface_name}: bad netmask {netmask}")
            return None

        self.logger.debug(f"Interface {interface_name}: {ip}/{prefix}")
        return f"{ip}/{prefix}"

    @staticmethod
    def _netmask_to_prefix(netmask: str) -> Optional[int]:
        """Convert a dotted-decimal netmask to a prefix length."""
        try:
            return ipaddress.IPv4Network(f"0.0.0.0/{netmask}").prefixlen
        except ValueError:
            return None
