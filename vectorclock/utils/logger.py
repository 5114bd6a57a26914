# vectorclock/utils/logger.py
# This file is part of vectorclock - Causal ordering for distributed events
#
# Logging utility for vector clock operations with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, TextIO


class LogLevel(Enum):
    """Log levels for vector clock diagnostics."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ClockLogger:
    """Centralized logger for vector clock operations with structured output."""

    def __init__(self, name: str = "vectorclock", level: LogLevel = LogLevel.WARNING):
        """Initialize the clock logger.

        Records propagate to the application's handlers until
        `attach_console` is called; a NullHandler keeps an unconfigured
        application from printing them.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)
        self.console_handler: Optional[logging.Handler] = None

        if not any(isinstance(h, logging.NullHandler) for h in self.logger.handlers):
            self.logger.addHandler(logging.NullHandler())

    def attach_console(self, stream: Optional[TextIO] = None) -> logging.Handler:
        """Print records with `ClockFormatter` instead of propagating them.

        Args:
            stream: Output stream (defaults to stdout)

        Returns:
            The console handler; calling again reuses it
        """
        if self.console_handler is None:
            console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
            console_handler.setLevel(self.logger.level)
            console_handler.setFormatter(ClockFormatter())
            self.logger.addHandler(console_handler)
            self.console_handler = console_handler

            # Prevent duplicate output through the root logger
            self.logger.propagate = False
        return self.console_handler

    def detach_console(self):
        """Remove the console handler and propagate records again."""
        if self.console_handler is not None:
            self.logger.removeHandler(self.console_handler)
            self.console_handler = None
        self.logger.propagate = True

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        if self.console_handler is not None:
            self.console_handler.setLevel(level.value)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return self.logger.isEnabledFor(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for clock operations
    def clock_incremented(self, host: str, before: str, after: str):
        """Log a local event advancing one host's counter."""
        self.debug(f"increment {host}: {before} → {after}")

    def clocks_merged(self, left: str, right: str, result: str):
        """Log a pointwise-maximum join."""
        self.debug(f"merge {left} ⊔ {right} → {result}")

    def clocks_compared(self, left: str, right: str, relation: str):
        """Log a partial-order comparison."""
        self.debug(f"compare {left} vs {right} → {relation}")

    def invalid_input(self, reason: str):
        """Log rejected construction input."""
        self.warning(f"Rejected clock entries: {reason}")


class ClockFormatter(logging.Formatter):
    """Custom formatter for clock logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[ClockLogger] = None


def get_logger(name: str = "vectorclock") -> ClockLogger:
    """Get or create the global clock logger instance.

    Args:
        name: Logger name used when the instance is first created

    Returns:
        ClockLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ClockLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False, stream: Optional[TextIO] = None):
    """Print clock diagnostics to the console at the level the flags select.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
        stream: Console stream (defaults to stdout)
    """
    get_logger().attach_console(stream)
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
