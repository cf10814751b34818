"""Mini README: Bookkeeping core for the restaurant's income and expenses.

The package exposes an in-memory ``LedgerStore`` holding two ordered
collections of entries, the domain exceptions it raises, and small display
helpers used by the web interface and CLI. Nothing here depends on the web
stack so the store can be unit tested on its own.
"""

from .exceptions import EntryNotFound, InvalidAmount, LedgerError
from .presentation import (
    CLASSIFICATION_COLORS,
    StatusLine,
    format_amount,
    format_entry_line,
    status_line,
)
from .store import Classification, Entry, EntryKind, LedgerStore, parse_amount

__all__ = [
    "CLASSIFICATION_COLORS",
    "Classification",
    "Entry",
    "EntryKind",
    "EntryNotFound",
    "InvalidAmount",
    "LedgerError",
    "LedgerStore",
    "StatusLine",
    "format_amount",
    "format_entry_line",
    "parse_amount",
    "status_line",
]
