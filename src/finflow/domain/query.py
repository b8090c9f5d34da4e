"""Entry filtering and ordering."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import Callable

from finflow.domain.entities import Entry, LedgerQuery, PeriodBounds, SortKey
from finflow.domain.normalizer import Clock, system_clock
from finflow.domain.periods import bounds


def _date_key(entry: Entry) -> date:
    # Unparsable dates order as the earliest possible date.
    return entry.parsed_date or date.min


def _amount_key(entry: Entry) -> Decimal:
    amount = entry.amount
    return amount if amount.is_finite() else Decimal(0)


SORT_ORDERS: dict[SortKey, tuple[Callable[[Entry], object], bool]] = {
    SortKey.DATE_ASC: (_date_key, False),
    SortKey.DATE_DESC: (_date_key, True),
    SortKey.AMOUNT_ASC: (_amount_key, False),
    SortKey.AMOUNT_DESC: (_amount_key, True),
}


def filter_by_bounds(entries: Iterable[Entry], period_bounds: PeriodBounds) -> list[Entry]:
    """Keep entries dated inside the bounds.

    Entries whose date cannot be parsed are excluded from bounded ranges and
    kept when the range is unbounded.
    """
    if not period_bounds.is_bounded:
        return list(entries)

    result = []
    for entry in entries:
        day = entry.parsed_date
        if day is not None and period_bounds.contains(day):
            result.append(entry)
    return result


def matches_search(entry: Entry, search_text: str) -> bool:
    """Check whether an entry's description or category contains the search text."""
    needle = search_text.strip().casefold()
    if not needle:
        return True
    haystack = f"{entry.description} {entry.category}".casefold()
    return needle in haystack


def sort_entries(entries: Iterable[Entry], sort_key: SortKey) -> list[Entry]:
    """Stable sort; ties keep their input order."""
    key, reverse = SORT_ORDERS.get(sort_key, SORT_ORDERS[SortKey.DATE_DESC])
    return sorted(entries, key=key, reverse=reverse)


def query(
    entries: Iterable[Entry],
    ledger_query: LedgerQuery,
    clock: Clock = system_clock,
) -> tuple[Entry, ...]:
    """Filter and order entries for display.

    Args:
        entries: Entry collection snapshot (not modified)
        ledger_query: Period, reference date, search text and sort key
        clock: Source of the current instant; its local date is the
            reference date when the query has none

    Returns:
        New tuple of matching entries in display order
    """
    reference_date = ledger_query.reference_date or clock().astimezone().date()
    period_bounds = bounds(ledger_query.period, reference_date)

    filtered = filter_by_bounds(entries, period_bounds)
    if ledger_query.search_text.strip():
        filtered = [e for e in filtered if matches_search(e, ledger_query.search_text)]

    return tuple(sort_entries(filtered, ledger_query.sort_key))
