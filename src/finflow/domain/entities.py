"""Domain model entities for finflow.

These are pure data classes representing ledger concepts, independent of how
the entry collection is persisted. Persisted and exported records use the
camelCase wire keys handled in ``finflow.database.mappers``.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class EntryType(str, Enum):
    """Direction of money for an entry."""

    INCOME = "income"
    OUTFLOW = "outflow"


class Period(str, Enum):
    """Named calendar window used to bound a query."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"

    @classmethod
    def parse(cls, value: str) -> "Period":
        """Resolve a period name, raising ValueError on unknown values."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown period: '{value}'. Supported periods: {choices}")


class SortKey(str, Enum):
    """Ordering applied to a query result."""

    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"
    AMOUNT_ASC = "amount-asc"
    AMOUNT_DESC = "amount-desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortKey":
        """Resolve a sort key; anything unrecognized falls back to DATE_DESC."""
        if value is None:
            return cls.DATE_DESC
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.DATE_DESC


def parse_entry_date(value: str) -> Optional[date]:
    """Parse a stored Y-M-D entry date, returning None when it is not valid."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        return None


@dataclass(frozen=True)
class Entry:
    """Ledger entry domain entity."""

    id: str
    type: EntryType
    date: str
    amount: Decimal
    description: str
    category: str
    created_at: int

    @property
    def parsed_date(self) -> Optional[date]:
        """Calendar date of the entry, or None if the stored date is unparsable."""
        return parse_entry_date(self.date)

    @property
    def is_income(self) -> bool:
        return self.type is EntryType.INCOME


@dataclass(frozen=True)
class PeriodBounds:
    """Half-open date range ``[start, end)`` with a display label.

    Both bounds are None for the all-time period.
    """

    start: Optional[date]
    end: Optional[date]
    label: str

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None

    def contains(self, day: date) -> bool:
        """Check whether a day falls inside the range."""
        if not self.is_bounded:
            return True
        return self.start <= day < self.end


@dataclass(frozen=True)
class LedgerQuery:
    """Query parameters collected from the user."""

    period: Period = Period.MONTH
    reference_date: Optional[date] = None
    search_text: str = ""
    sort_key: SortKey = SortKey.DATE_DESC


@dataclass(frozen=True)
class Totals:
    """Summary totals over a query result."""

    income: Decimal
    outflow: Decimal
    net: Decimal
    count: int


@dataclass(frozen=True)
class LedgerView:
    """A query result ready for display: bounds, ordered entries and totals."""

    bounds: PeriodBounds
    entries: tuple[Entry, ...]
    totals: Totals


@dataclass(frozen=True)
class MergeReport:
    """Outcome of merging incoming records into an entry collection."""

    entries: tuple[Entry, ...]
    received: int
    accepted: int
    added: int
    replaced: int

    @property
    def rejected(self) -> int:
        return self.received - self.accepted
