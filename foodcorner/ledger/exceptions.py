"""Domain-specific exceptions raised by the ledger store."""


class LedgerError(Exception):
    """Base class for recoverable ledger failures."""


class InvalidAmount(LedgerError, ValueError):
    """Raised when an amount cannot be parsed as a finite decimal number."""

    def __init__(self, raw: object, reason: str = "is not a valid decimal number") -> None:
        super().__init__(f"Amount {raw!r} {reason}")
        self.raw = raw


class EntryNotFound(LedgerError, KeyError):
    """Raised when no entry with the given identifier exists in a collection."""

    def __init__(self, kind: str, entry_id: str) -> None:
        super().__init__(f"{kind.capitalize()} entry {entry_id} not found")
        self.kind = kind
        self.entry_id = entry_id

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes.
        return str(self.args[0])
