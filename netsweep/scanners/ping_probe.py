"""
Liveness probe backed by the system ping utility.
"""

import platform
from typing import List, Optional

from .base_scanner import LivenessProbe
from ..config.config_loader import ProbeConfig
from ..utils.logger import Logger

# Extra seconds granted to ping beyond its own deadline before it is killed.
KILL_GRACE = 2


class PingProbe(LivenessProbe):
    """
    Sends a single ICMP echo request through ``ping``.

    A host is live when ping exits with status 0. A missing executable, an
    OS error or a hung process all count as "not live"; there is no retry.
    """

    tool_name = "ping"

    def __init__(self, config: Optional[ProbeConfig] = None, logger: Optional[Logger] = None,
                 system: Optional[str] = None):
        """
        Initialize the ping probe.

        Args:
            config: Probe configuration (timeout in seconds)
            logger: Logger instance for debug output
            system: Operating system name, defaults to platform.system()
        """
        super().__init__(logger)
        self.config = config or ProbeConfig()
        self.system = (system or platform.system()).lower()

    def build_command(self, address: str) -> List[str]:
        """Build the ping command line for the current operating system."""
        timeout = self.config.timeout
        if self.system == "windows":
            # Windows ping: ping -n 1 -w <milliseconds> IP
            return ["ping", "-n", "1", "-w", str(timeout * 1000), address]
        # Unix ping: one packet, per-reply and overall deadline, quiet output
        return ["ping", "-W", str(timeout), "-w", str(timeout), "-c", "1", "-q", address]

    def is_alive(self, address: str) -> bool:
        result = self._run(self.build_command(address), timeout=self.config.timeout + KILL_GRACE)
        if result is None:
            return False

        alive = result.returncode == 0
        self._log_debug(f"Ping {'successful' if alive else 'failed'}: {address}")
        return alive
