"""
Colored console logging for netsweep.

Log lines carry a timestamp, a colored level tag and the short name of the
emitting component. They are written to stderr so that stdout only ever
carries the host table; the stream can be replaced per logger.
"""

import sys
from datetime import datetime
from enum import Enum
from typing import Optional, TextIO
from colorama import Fore, Style, init

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class LogLevel(Enum):
    """Log levels, lowest first."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class Logger:
    """
    Console logger with levels and a progress indicator.

    Attributes:
        name: Component name; only its last dotted part is printed
        min_level: Lines below this level are dropped
        stream: Output stream, stderr when None
    """

    # Tag and color per level; SUCCESS lines are INFO lines with their own tag
    LEVEL_STYLES = {
        LogLevel.DEBUG: ("DEBUG", Fore.CYAN),
        LogLevel.INFO: ("INFO", Fore.GREEN),
        LogLevel.WARNING: ("WARNING", Fore.YELLOW),
        LogLevel.ERROR: ("ERROR", Fore.RED),
    }
    SUCCESS_STYLE = ("OK", Fore.GREEN + Style.BRIGHT)
    PROGRESS_STYLE = ("PROGRESS", Fore.BLUE)

    def __init__(self, name: str = "netsweep", min_level: LogLevel = LogLevel.INFO,
                 stream: Optional[TextIO] = None):
        self.name = name
        self.min_level = min_level
        self.stream = stream
        self._progress_total: Optional[int] = None

    @property
    def short_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level.value >= self.min_level.value

    def _emit(self, style, message: str, context: dict) -> None:
        tag, color = style
        line = (
            f"{Style.DIM}{datetime.now():%H:%M:%S}{Style.RESET_ALL} "
            f"{color}{tag:<8}{Style.RESET_ALL} "
            f"{Style.DIM}{self.short_name}:{Style.RESET_ALL} {message}"
        )
        if context:
            details = " ".join(f"{key}={value}" for key, value in context.items())
            line += f" {Style.DIM}[{details}]{Style.RESET_ALL}"
        print(line, file=self.stream or sys.stderr, flush=True)

    def log(self, level: LogLevel, message: str, **context) -> None:
        """
        Log a message at the given level.

        Keyword arguments are appended to the line as key=value pairs.
        """
        if self.is_enabled_for(level):
            self._emit(self.LEVEL_STYLES[level], message, context)

    def debug(self, message: str, **context) -> None:
        self.log(LogLevel.DEBUG, message, **context)

    def info(self, message: str, **context) -> None:
        self.log(LogLevel.INFO, message, **context)

    def warning(self, message: str, **context) -> None:
        self.log(LogLevel.WARNING, message, **context)

    def error(self, message: str, exception: Optional[Exception] = None, **context) -> None:
        """
        Log an error, optionally naming the exception that caused it.

        Args:
            message: Error message
            exception: Exception to describe in the context
            **context: Additional key=value details
        """
        if exception is not None:
            context["exception"] = f"{type(exception).__name__}: {exception}"
        self.log(LogLevel.ERROR, message, **context)

    def success(self, message: str, **context) -> None:
        """Log the successful end of an operation (shown at INFO level)."""
        if self.is_enabled_for(LogLevel.INFO):
            self._emit(self.SUCCESS_STYLE, message, context)

    def progress_start(self, message: str, total: int) -> None:
        """
        Begin tracking a long-running operation of ``total`` steps.

        Args:
            message: Description of the operation
            total: Number of steps expected
        """
        self._progress_total = total
        if self.is_enabled_for(LogLevel.INFO):
            self._emit(self.PROGRESS_STYLE, message, {"total": total})

    def progress_update(self, done: int) -> None:
        """Report that ``done`` steps have finished."""
        total = self._progress_total
        if total is None or not self.is_enabled_for(LogLevel.INFO):
            return
        percent = 100 * done // total if total else 100
        self._emit(self.PROGRESS_STYLE, f"{done}/{total} ({percent}%)", {})

    def progress_end(self, final_message: Optional[str] = None) -> None:
        """Stop tracking progress and log the final message, if any."""
        if self._progress_total is None:
            return
        self._progress_total = None
        if final_message:
            self.success(final_message)


# Process-wide logger; holds the level handed to new loggers
logger = Logger()


def set_log_level(level: LogLevel) -> None:
    """
    Set the global log level.

    Loggers handed out by get_logger() afterwards inherit this level.
    """
    logger.min_level = level


def get_logger(name: str = "netsweep") -> Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name, usually ``__name__``

    Returns:
        Logger using the current global level
    """
    return Logger(name, min_level=logger.min_level)
