"""Mini README: Core package initializer for the Food Corner ledger.

This module exposes convenience imports so callers can reach the ledger
store and logging helpers without knowing the exact module structure. It is
kept lightweight so importing the package never pulls in the web stack.
"""

from .ledger import LedgerStore
from .logging_utils import get_logger

__all__ = ["LedgerStore", "get_logger"]
