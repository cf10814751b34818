"""Mini README: In-memory ledger of restaurant income and expense sources.

Structure:
    * EntryKind - enum naming the two collections (income versus expense).
    * Entry - immutable record holding a named monthly amount and a free-text note.
    * Classification - profit, loss or break-even outcome of the ledger.
    * LedgerStore - owns both ordered collections and derives aggregates.

The store is created once per session, seeded with the restaurant's sample
figures unless explicit collections are supplied. Entries are appended and
annotated but never removed or reordered. Amounts are kept as ``Decimal`` so
totals stay exact. All mutations go through the store's methods, which log
every change for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from .exceptions import EntryNotFound, InvalidAmount

LOGGER = get_logger(__name__)

HUNDRED = Decimal("100")
# Largest accepted amount is just under 10**16; totals stay far inside the decimal context.
MAX_AMOUNT_EXPONENT = 15


class EntryKind(str, Enum):
    """Enumerate the two ledger collections."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "EntryKind":
        """Coerce arbitrary casing into a valid entry kind."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported entry kind: {value}") from error

    @property
    def id_prefix(self) -> str:
        return "inc" if self is EntryKind.INCOME else "exp"


class Classification(str, Enum):
    """Sign of the ledger's profit/loss figure."""

    PROFIT = "profit"
    LOSS = "loss"
    BREAK_EVEN = "break_even"


@dataclass(frozen=True, slots=True)
class Entry:
    """A single income or expense source."""

    entry_id: str
    name: str
    amount: Decimal
    additional_info: str = ""

    def as_dict(self) -> Dict[str, str]:
        """Export the entry with JSON-friendly values."""

        return {
            "entry_id": self.entry_id,
            "name": self.name,
            "amount": f"{self.amount:.2f}",
            "additional_info": self.additional_info,
        }


def parse_amount(raw: object) -> Decimal:
    """Convert user input into a finite ``Decimal`` or raise ``InvalidAmount``."""

    if isinstance(raw, bool) or raw is None:
        raise InvalidAmount(raw)
    if isinstance(raw, Decimal):
        amount = raw
    else:
        text = str(raw).strip()
        try:
            amount = Decimal(text)
        except InvalidOperation as error:
            raise InvalidAmount(raw) from error
    if not amount.is_finite():
        raise InvalidAmount(raw)
    if amount.adjusted() > MAX_AMOUNT_EXPONENT:
        raise InvalidAmount(raw, reason="is too large")
    return amount


_SEED_INCOME = [
    ("Food Sales", "1000", "Best-selling item: Biryani"),
    ("Catering", "500", "Events: Wedding, Birthday"),
    ("Beverage Sales", "300", "Best-Selling drink: Iced Tea, soft drinks in the second place"),
    (
        "Delivery Services",
        "500",
        "Most delivered item: Biryani Combo with soft drinks, Gulab Jamun",
    ),
    ("Online Orders", "450", "More orders from 3.00 p.m to 8.30 p.m"),
]

_SEED_EXPENSES = [
    ("Utilities", "500", "Electricity, Water"),
    ("Employee Salaries", "800", "Chefs, Waiters"),
    ("Food Costs - Meat", "400", "All kinds of meat, eggs"),
    ("Other Food costs", "400", "Rice, Dough"),
    ("Rent payment", "600", "Rent per month"),
]


class LedgerStore:
    """Own the income and expense collections and derive profit/loss figures."""

    def __init__(
        self,
        income: Optional[Iterable[Entry]] = None,
        expenses: Optional[Iterable[Entry]] = None,
    ) -> None:
        self._entries: Dict[EntryKind, List[Entry]] = {
            EntryKind.INCOME: [],
            EntryKind.EXPENSE: [],
        }
        self._sequences: Dict[EntryKind, int] = {EntryKind.INCOME: 0, EntryKind.EXPENSE: 0}
        if income is None and expenses is None:
            self._seed_demo_entries()
        else:
            for entry in income or ():
                self._register(EntryKind.INCOME, entry)
            for entry in expenses or ():
                self._register(EntryKind.EXPENSE, entry)
        LOGGER.debug(
            "Ledger initialised with %s income and %s expense entries",
            len(self._entries[EntryKind.INCOME]),
            len(self._entries[EntryKind.EXPENSE]),
        )

    def _seed_demo_entries(self) -> None:
        """Populate both collections with the restaurant's sample figures."""

        for kind, rows in ((EntryKind.INCOME, _SEED_INCOME), (EntryKind.EXPENSE, _SEED_EXPENSES)):
            for name, amount, info in rows:
                self._register(
                    kind,
                    Entry(
                        entry_id=self._next_id(kind),
                        name=name,
                        amount=Decimal(amount),
                        additional_info=info,
                    ),
                )

    def _next_id(self, kind: EntryKind) -> str:
        """Generate the next identifier for a collection; ids are never reused."""

        self._sequences[kind] += 1
        return f"{kind.id_prefix}_{self._sequences[kind]:04d}"

    def _register(self, kind: EntryKind, entry: Entry) -> None:
        """Append an entry ensuring identifiers remain unique within its collection."""

        entries = self._entries[kind]
        if any(existing.entry_id == entry.entry_id for existing in entries):
            raise ValueError(f"{kind.value.capitalize()} entry {entry.entry_id} already exists.")
        entries.append(entry)
        # Keep generated ids clear of explicitly supplied ones.
        prefix, _, suffix = entry.entry_id.rpartition("_")
        if prefix == kind.id_prefix and suffix.isdigit():
            self._sequences[kind] = max(self._sequences[kind], int(suffix))

    def _index_of(self, kind: EntryKind, entry_id: str) -> int:
        for index, entry in enumerate(self._entries[kind]):
            if entry.entry_id == entry_id:
                return index
        raise EntryNotFound(kind.value, entry_id)

    # Kind-generic operations ----------------------------------------------
    def list_entries(self, kind: EntryKind) -> List[Entry]:
        """Return the entries of one collection in insertion order."""

        return list(self._entries[kind])

    def get_entry(self, kind: EntryKind, entry_id: str) -> Entry:
        """Retrieve an entry, raising ``EntryNotFound`` when missing."""

        return self._entries[kind][self._index_of(kind, entry_id)]

    def add_entry(
        self, kind: EntryKind, name: str, amount: object, additional_info: str = ""
    ) -> Entry:
        """Parse the amount, append a new entry and return it.

        The amount is parsed before an id is allocated, so a rejected amount
        leaves both the collection and the id sequence untouched.
        """

        try:
            parsed = parse_amount(amount)
        except InvalidAmount:
            LOGGER.warning("Rejected %s entry %r with amount %r", kind.value, name, amount)
            raise
        entry = Entry(
            entry_id=self._next_id(kind),
            name=name,
            amount=parsed,
            additional_info=additional_info,
        )
        self._register(kind, entry)
        LOGGER.info("Added %s entry %s (%s: %s)", kind.value, entry.entry_id, name, parsed)
        return entry

    def update_info(self, kind: EntryKind, entry_id: str, new_info: str) -> Entry:
        """Replace one entry's additional info, keeping its position."""

        try:
            index = self._index_of(kind, entry_id)
        except EntryNotFound:
            LOGGER.warning("Cannot update info: %s entry %s not found", kind.value, entry_id)
            raise
        updated = replace(self._entries[kind][index], additional_info=new_info)
        self._entries[kind][index] = updated
        LOGGER.info("Updated additional info for %s entry %s", kind.value, entry_id)
        return updated

    def replace_entry(
        self,
        kind: EntryKind,
        entry_id: str,
        *,
        name: Optional[str] = None,
        amount: Optional[object] = None,
        additional_info: Optional[str] = None,
    ) -> Entry:
        """Swap in a new version of an entry with the same id and position."""

        changes: Dict[str, object] = {}
        try:
            index = self._index_of(kind, entry_id)
            if amount is not None:
                changes["amount"] = parse_amount(amount)
        except (EntryNotFound, InvalidAmount) as error:
            LOGGER.warning("Cannot replace %s entry %s: %s", kind.value, entry_id, error)
            raise
        if name is not None:
            changes["name"] = name
        if additional_info is not None:
            changes["additional_info"] = additional_info
        updated = replace(self._entries[kind][index], **changes)
        self._entries[kind][index] = updated
        LOGGER.info("Replaced %s entry %s (%s)", kind.value, entry_id, ", ".join(sorted(changes)))
        return updated

    def total(self, kind: EntryKind) -> Decimal:
        """Sum the amounts of one collection; zero when it is empty."""

        return sum((entry.amount for entry in self._entries[kind]), start=Decimal("0"))

    # Income ---------------------------------------------------------------
    def list_income(self) -> List[Entry]:
        return self.list_entries(EntryKind.INCOME)

    def get_income(self, entry_id: str) -> Entry:
        return self.get_entry(EntryKind.INCOME, entry_id)

    def add_income(self, name: str, amount: object, additional_info: str = "") -> Entry:
        return self.add_entry(EntryKind.INCOME, name, amount, additional_info)

    def update_income_info(self, entry_id: str, new_info: str) -> Entry:
        return self.update_info(EntryKind.INCOME, entry_id, new_info)

    def total_income(self) -> Decimal:
        return self.total(EntryKind.INCOME)

    # Expense --------------------------------------------------------------
    def list_expense(self) -> List[Entry]:
        return self.list_entries(EntryKind.EXPENSE)

    def get_expense(self, entry_id: str) -> Entry:
        return self.get_entry(EntryKind.EXPENSE, entry_id)

    def add_expense(self, name: str, amount: object, additional_info: str = "") -> Entry:
        return self.add_entry(EntryKind.EXPENSE, name, amount, additional_info)

    def update_expense_info(self, entry_id: str, new_info: str) -> Entry:
        return self.update_info(EntryKind.EXPENSE, entry_id, new_info)

    def total_expense(self) -> Decimal:
        return self.total(EntryKind.EXPENSE)

    # Aggregates -----------------------------------------------------------
    def profit_loss(self) -> Decimal:
        """Total income minus total expense."""

        return self.total_income() - self.total_expense()

    def profit_loss_percentage(self) -> Optional[Decimal]:
        """Profit/loss as a percentage of income.

        Returns ``None`` when total income is exactly zero: the ratio is
        undefined and callers must check before formatting it.
        """

        income = self.total_income()
        if income == 0:
            LOGGER.debug("Profit/loss percentage undefined for zero income")
            return None
        return self.profit_loss() / income * HUNDRED

    def classify(self) -> Classification:
        """Classify the ledger by the sign of its profit/loss figure."""

        profit_loss = self.profit_loss()
        if profit_loss > 0:
            return Classification.PROFIT
        if profit_loss < 0:
            return Classification.LOSS
        return Classification.BREAK_EVEN

    def export_snapshot(self) -> Dict[str, object]:
        """Export both collections and the derived summary for JSON responses."""

        percentage = self.profit_loss_percentage()
        return {
            "income": [entry.as_dict() for entry in self.list_income()],
            "expenses": [entry.as_dict() for entry in self.list_expense()],
            "summary": {
                "total_income": f"{self.total_income():.2f}",
                "total_expense": f"{self.total_expense():.2f}",
                "profit_loss": f"{self.profit_loss():.2f}",
                "profit_loss_percentage": None if percentage is None else f"{percentage:.2f}",
                "classification": self.classify().value,
            },
        }
