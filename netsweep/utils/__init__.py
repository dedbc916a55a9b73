"""
Utility functions and helper classes.
"""

from .logger import Logger, LogLevel, logger, set_log_level, get_logger
from .error_handler import (
    ErrorContext, ErrorType, ErrorSeverity, NetSweepError,
    AddressFormatError, ConfigurationError, ToolValidator
)

__all__ = [
    'Logger',
    'LogLevel',
    'logger',
    'set_log_level',
    'get_logger',
    'ErrorContext',
    'ErrorType',
    'ErrorSeverity',
    'NetSweepError',
    'AddressFormatError',
    'ConfigurationError',
    'ToolValidator'
]
