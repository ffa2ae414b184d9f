# utils/logger.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# Logging utility for formula normalization with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula normalization."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class CNFLogger:
    """Centralized logger for the normalizer with structured pass output."""

    def __init__(self, name: str = "cnf_normalizer", level: LogLevel = LogLevel.WARNING):
        """Initialize the normalizer logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(CNFFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug_enabled(self) -> bool:
        """Return True when debug messages would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

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

    # Specialized methods for normalization events
    def pass_start(self, stage: str, formula: Optional[str] = None):
        """Log the start of a rewrite pass."""
        if formula is None:
            self.debug(f"--- {stage}: start ---")
        else:
            self.debug(f"--- {stage}: start on {formula} ---")

    def pass_complete(self, stage: str, result_type: str):
        """Log the completion of a rewrite pass."""
        self.debug(f"--- {stage}: complete, root is {result_type} ---")

    def expansion(self, connective: str, singles: int, choice_sets: int, combinations: int):
        """Log one Cartesian product expansion during distribution."""
        self.debug(
            f"    Expanding {connective}: {singles} singles x {choice_sets} choice sets "
            f"-> {combinations} combinations"
        )

    def budget_exceeded(self, requested: int, limit: int):
        """Log an aborted expansion."""
        self.debug(f"    Clause budget exceeded: {requested} > {limit}")

    def normalization_result(self, source: str, result: str):
        """Log a finished normalization."""
        self.info(f"{source} => {result}")


class CNFFormatter(logging.Formatter):
    """Custom formatter for normalizer logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[CNFLogger] = None


def get_logger(name: str = "cnf_normalizer") -> CNFLogger:
    """Get or create the global normalizer logger instance.

    Args:
        name: Logger name (default: "cnf_normalizer")

    Returns:
        CNFLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = CNFLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging from caller flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
