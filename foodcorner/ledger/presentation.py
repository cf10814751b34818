"""Mini README: Display helpers shared by the web screens and the CLI.

Structure:
    * format_amount / format_entry_line - two-decimal money rendering.
    * StatusLine - text plus colour describing the ledger's profit/loss.
    * status_line - builds the summary line from a ``LedgerStore``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

from .store import Classification, Entry, LedgerStore

CLASSIFICATION_COLORS: Dict[Classification, str] = {
    Classification.PROFIT: "green",
    Classification.LOSS: "red",
    Classification.BREAK_EVEN: "blue",
}

_LABELS: Dict[Classification, str] = {
    Classification.PROFIT: "Profit",
    Classification.LOSS: "Loss",
    Classification.BREAK_EVEN: "Break-even",
}


def format_amount(amount: Decimal) -> str:
    return f"${amount:.2f}"


def format_entry_line(entry: Entry) -> str:
    return f"{entry.name}: {format_amount(entry.amount)}"


@dataclass(frozen=True, slots=True)
class StatusLine:
    """Rendered profit/loss indicator."""

    text: str
    classification: Classification
    color: str


def status_line(store: LedgerStore) -> StatusLine:
    """Describe the ledger as ``Profit: x%``, ``Loss: x%`` or ``Break-even``.

    The label follows ``classify`` so an undefined percentage (no income) still
    reports the correct sign, rendered as ``n/a``.
    """

    classification = store.classify()
    label = _LABELS[classification]
    if classification is Classification.BREAK_EVEN:
        text = label
    else:
        percentage = store.profit_loss_percentage()
        rendered = "n/a" if percentage is None else f"{percentage:.2f}%"
        text = f"{label}: {rendered}"
    return StatusLine(
        text=text,
        classification=classification,
        color=CLASSIFICATION_COLORS[classification],
    )
