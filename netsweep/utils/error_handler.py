"""
Error taxonomy and external tool validation for netsweep.

Input errors (malformed address specifications) are raised as
AddressFormatError and only the CLI entry point turns them into an exit
status. Failures of the external utilities are never raised: the probe and
resolver collaborators recover from them locally.
"""

import shutil
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .logger import Logger, get_logger


class ErrorType(Enum):
    """Enumeration for different types of errors."""
    INPUT_ERROR = "input_error"
    CONFIGURATION_ERROR = "configuration_error"


class ErrorSeverity(Enum):
    """Enumeration for error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """
    Context information attached to a NetSweepError.

    Attributes:
        error_type: Type of error that occurred
        severity: Severity level of the error
        operation: Operation that was being performed when error occurred
        component: Component/module where error occurred
        additional_info: Additional context information
    """
    error_type: ErrorType
    severity: ErrorSeverity
    operation: str
    component: str
    additional_info: Dict[str, Any] = field(default_factory=dict)


class NetSweepError(Exception):
    """Base exception class for netsweep."""

    def __init__(self, message: str, error_context: Optional[ErrorContext] = None):
        super().__init__(message)
        self.error_context = error_context


class AddressFormatError(NetSweepError):
    """Exception for malformed address specifications."""

    def __init__(self, message: str, text: Optional[str] = None):
        context = ErrorContext(
            error_type=ErrorType.INPUT_ERROR,
            severity=ErrorSeverity.CRITICAL,
            operation="parse_address",
            component="AddressCodec",
            additional_info={"text": text},
        )
        super().__init__(message, context)
        self.text = text

    def __str__(self) -> str:
        message = super().__str__()
        if self.text is not None:
            return f"{message}: {self.text!r}"
        return message


class ConfigurationError(NetSweepError):
    """Exception for configuration-related errors."""
    pass


class ToolValidator:
    """
    Validator for external tool availability.

    Checks that the utilities the sweep shells out to are on PATH and logs
    installation hints for the missing ones.
    """

    INSTALL_HINTS = {
        "ping": [
            "Ubuntu/Debian: sudo apt-get install iputils-ping",
            "CentOS/RHEL: sudo yum install iputils",
            "Alpine: apk add iputils",
        ],
        "nslookup": [
            "Ubuntu/Debian: sudo apt-get install dnsutils",
            "CentOS/RHEL: sudo yum install bind-utils",
            "Alpine: apk add bind-tools",
        ],
    }

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger or get_logger(__name__)

    def validate_tools(self, tool_names: List[str]) -> Tuple[bool, List[str]]:
        """
        Validate a set of external tools.

        Args:
            tool_names: Names of the executables to look up

        Returns:
            Tuple of (all_valid, missing_tools)
        """
        missing_tools = [name for name in tool_names if not self.validate_tool(name)]
        return not missing_tools, missing_tools

    def validate_tool(self, tool_name: str) -> bool:
        """
        Check if a tool is available in the system PATH.

        Args:
            tool_name: Name of the tool to check

        Returns:
            bool: True if tool is available, False otherwise
        """
        tool_path = shutil.which(tool_name)
        if tool_path:
            self.logger.debug(f"Found {tool_name} at: {tool_path}")
            return True

        self.logger.error(f"Required tool '{tool_name}' not found in PATH")
        self._suggest_tool_installation(tool_name)
        return False

    def _suggest_tool_installation(self, tool_name: str) -> None:
        """Provide tool installation suggestions."""
        suggestions = self.INSTALL_HINTS.get(tool_name)
        if suggestions:
            self.logger.info(f"Installation suggestions for {tool_name}:")
            for suggestion in suggestions:
                self.logger.info(f"  • {suggestion}")
        else:
            self.logger.info(f"Please install {tool_name} using your system's package manager")
