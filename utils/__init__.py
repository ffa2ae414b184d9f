# utils/__init__.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# Utility module exports

from .logger import (
    CNFLogger,
    LogLevel,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "CNFLogger",
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
