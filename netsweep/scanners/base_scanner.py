"""
Collaborator interfaces for netsweep.

The probe pipeline never shells out itself: it is handed a liveness probe and
an optional name resolver implementing the interfaces below. The concrete
implementations wrap the operating system's ping and nslookup utilities;
tests substitute in-memory fakes.
"""

import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional

from ..utils.logger import Logger


class ExternalTool(ABC):
    """
    Common plumbing for collaborators backed by an external executable.

    Attributes:
        tool_name: Executable name, also used for pre-flight checks
    """

    tool_name: str = ""

    def __init__(self, logger: Optional[Logger] = None):
        """
        Initialize the collaborator.

        Args:
            logger: Logger instance for debug output
        """
        self.logger = logger

    def _run(self, cmd: List[str], timeout: float) -> Optional[subprocess.CompletedProcess]:
        """
        Run the external command and capture its output.

        Args:
            cmd: Command line to execute
            timeout: Seconds after which the process is killed

        Returns:
            The completed process, or None if it could not be run to completion
        """
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='ignore',
                timeout=timeout
            )
        except subprocess.TimeoutExpired:
            self._log_debug(f"{self.tool_name} timed out after {timeout} seconds: {' '.join(cmd)}")
        except OSError as e:
            self._log_debug(f"Cannot run {self.tool_name}: {e}")
        return None

    def _log_debug(self, message: str) -> None:
        """Log a debug message if logger is available."""
        if self.logger:
            self.logger.debug(message)


class LivenessProbe(ExternalTool):
    """Single-attempt reachability check."""

    @abstractmethod
    def is_alive(self, address: str) -> bool:
        """
        Check whether a host answers.

        Args:
            address: Dotted-quad address to probe

        Returns:
            True if the host responded; any failure reads as False
        """


class NameResolver(ExternalTool):
    """Reverse lookup of a host name."""

    @abstractmethod
    def resolve(self, address: str) -> Optional[str]:
        """
        Look up the name of a host.

        Args:
            address: Dotted-quad address to resolve

        Returns:
            Host name, or None if it could not be determined
        """
