"""Mini README: Tests for the status line and amount formatting helpers."""

from __future__ import annotations

from decimal import Decimal

from foodcorner.ledger import Classification, LedgerStore, format_amount, format_entry_line, status_line


def test_format_amount_uses_two_decimals() -> None:
    assert format_amount(Decimal("1000")) == "$1000.00"
    assert format_amount(Decimal("0.5")) == "$0.50"


def test_entry_line_matches_list_screen() -> None:
    entry = LedgerStore().list_income()[0]
    assert format_entry_line(entry) == "Food Sales: $1000.00"


def test_status_line_for_seeded_profit() -> None:
    """The default ledger renders a green profit line."""

    status = status_line(LedgerStore())

    assert status.text == "Profit: 1.82%"
    assert status.classification is Classification.PROFIT
    assert status.color == "green"


def test_status_line_profit_and_break_even() -> None:
    store = LedgerStore(income=[], expenses=[])
    assert status_line(store).text == "Break-even"
    assert status_line(store).color == "blue"

    store.add_income("Sales", "200", "")
    store.add_expense("Rent", "50", "")
    status = status_line(store)
    assert status.text == "Profit: 75.00%"
    assert status.color == "green"


def test_status_line_without_income_is_not_a_number() -> None:
    """An undefined percentage keeps the loss label and shows n/a."""

    store = LedgerStore(income=[], expenses=[])
    store.add_expense("Rent", "600", "")

    assert status_line(store).text == "Loss: n/a"
