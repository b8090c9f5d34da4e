"""Tests for entry filtering and ordering."""

from datetime import date, datetime

import pytest

from finflow.domain.entities import EntryType, LedgerQuery, Period, SortKey
from finflow.domain.query import matches_search, query, sort_entries
from finflow.domain.summary import totals

from conftest import make_entry


def _ids(entries):
    return [e.id for e in entries]


def test_day_period_includes_start_and_excludes_next_day():
    """Test day filtering."""
    entries = [
        make_entry("on", date="2024-01-05"),
        make_entry("next", date="2024-01-06"),
        make_entry("before", date="2024-01-04"),
    ]

    result = query(entries, LedgerQuery(Period.DAY, date(2024, 1, 5)))

    assert _ids(result) == ["on"]


def test_month_period_excludes_first_of_next_month():
    """Test month filtering at both edges."""
    entries = [
        make_entry("first", date="2024-01-01"),
        make_entry("last", date="2024-01-31"),
        make_entry("feb", date="2024-02-01"),
    ]

    result = query(entries, LedgerQuery(Period.MONTH, date(2024, 1, 15), sort_key=SortKey.DATE_ASC))

    assert _ids(result) == ["first", "last"]


def test_unparsable_dates_excluded_from_bounded_periods():
    """Test that unparsable dates only appear in all-time queries."""
    entries = [make_entry("bad", date="garbage"), make_entry("good", date="2024-01-05")]

    bounded = query(entries, LedgerQuery(Period.YEAR, date(2024, 1, 5)))
    unbounded = query(entries, LedgerQuery(Period.ALL, date(2024, 1, 5)))

    assert _ids(bounded) == ["good"]
    assert set(_ids(unbounded)) == {"bad", "good"}


def test_unparsable_dates_sort_as_earliest():
    """Test that unparsable dates sort before every real date."""
    entries = [make_entry("bad", date="2024-13-45"), make_entry("good", date="2024-01-05")]

    ascending = query(entries, LedgerQuery(Period.ALL, date(2024, 1, 5), sort_key=SortKey.DATE_ASC))
    descending = query(entries, LedgerQuery(Period.ALL, date(2024, 1, 5), sort_key=SortKey.DATE_DESC))

    assert _ids(ascending) == ["bad", "good"]
    assert _ids(descending) == ["good", "bad"]


def test_search_matches_description_and_category_case_insensitively():
    """Test case-insensitive search over description and category."""
    entries = [
        make_entry("desc", description="Weekly GROCERIES"),
        make_entry("cat", description="Market", category="Groceries"),
        make_entry("none", description="Rent", category="Housing"),
    ]

    result = query(
        entries,
        LedgerQuery(Period.ALL, date(2024, 1, 5), search_text="  groceries ", sort_key=SortKey.DATE_ASC),
    )

    assert _ids(result) == ["desc", "cat"]


def test_blank_search_is_noop():
    """Test that blank search text matches everything."""
    entry = make_entry("1", description="anything")
    assert matches_search(entry, "   ")
    assert len(query([entry], LedgerQuery(Period.ALL, date(2024, 1, 5), search_text=" "))) == 1


@pytest.mark.parametrize(
    "sort_key,expected",
    [
        (SortKey.DATE_ASC, ["a", "b", "c"]),
        (SortKey.DATE_DESC, ["c", "b", "a"]),
        (SortKey.AMOUNT_ASC, ["b", "c", "a"]),
        (SortKey.AMOUNT_DESC, ["a", "c", "b"]),
    ],
)
def test_sort_orders(sort_key, expected):
    """Test each sort order."""
    entries = [
        make_entry("b", date="2024-01-02", amount=5),
        make_entry("a", date="2024-01-01", amount=30),
        make_entry("c", date="2024-01-03", amount=10),
    ]
    assert _ids(sort_entries(entries, sort_key)) == expected


@pytest.mark.parametrize("sort_key", list(SortKey))
def test_sort_is_stable_for_ties(sort_key):
    """Test that sorting keeps the input order of ties."""
    entries = [make_entry(str(i), date="2024-01-05", amount=10) for i in range(6)]

    once = sort_entries(entries, sort_key)
    twice = sort_entries(once, sort_key)

    assert _ids(once) == [str(i) for i in range(6)]
    assert _ids(twice) == _ids(once)


def test_amount_sort_keeps_input_order_among_equal_amounts():
    """Test amount sorts with repeated amounts."""
    entries = [
        make_entry("x", amount=5),
        make_entry("big", amount=50),
        make_entry("y", amount=5),
        make_entry("z", amount=5),
    ]

    assert _ids(sort_entries(entries, SortKey.AMOUNT_DESC)) == ["big", "x", "y", "z"]
    assert _ids(sort_entries(entries, SortKey.AMOUNT_ASC)) == ["x", "y", "z", "big"]


def test_unrecognized_sort_key_falls_back_to_date_descending():
    """Test the sort key fallback."""
    assert SortKey.parse("by-color") is SortKey.DATE_DESC
    assert SortKey.parse(None) is SortKey.DATE_DESC


def test_query_does_not_mutate_input():
    """Test that querying leaves the input untouched."""
    entries = [
        make_entry("a", date="2024-01-01"),
        make_entry("b", date="2024-01-03"),
        make_entry("c", date="2024-02-03"),
    ]
    snapshot = list(entries)

    result = query(entries, LedgerQuery(Period.MONTH, date(2024, 1, 1)))

    assert entries == snapshot
    assert isinstance(result, tuple)


@pytest.mark.parametrize("sort_key", list(SortKey))
def test_all_period_returns_same_set(sort_key):
    """Test that all-time queries return every entry."""
    entries = [
        make_entry("a", date="2020-05-01", amount=3),
        make_entry("b", EntryType.OUTFLOW, date="2024-01-03", amount=1),
        make_entry("c", date="not a date", amount=2),
    ]

    result = query(entries, LedgerQuery(Period.ALL, date(2024, 1, 1), sort_key=sort_key))

    assert sorted(_ids(result)) == ["a", "b", "c"]
    assert totals(result).count == len(entries)


def test_month_scenario(sample_entries):
    """Test the January month view of the sample entries."""
    result = query(sample_entries, LedgerQuery(Period.MONTH, date(2024, 1, 15)))
    summary = totals(result)

    assert sorted(_ids(result)) == ["1", "2"]
    assert (summary.income, summary.outflow, summary.net, summary.count) == (100, 40, 60, 2)


def test_day_scenario(sample_entries):
    """Test the single-day view of the sample entries."""
    result = query(sample_entries, LedgerQuery(Period.DAY, date(2024, 1, 5)))
    summary = totals(result)

    assert _ids(result) == ["1"]
    assert (summary.income, summary.outflow, summary.net, summary.count) == (100, 0, 100, 1)


def test_missing_reference_date_uses_clock():
    """Test that a query without a reference date anchors on the clock's day."""
    entries = [
        make_entry("today", date="2024-01-15"),
        make_entry("earlier", date="2024-01-14"),
    ]
    local_noon = datetime(2024, 1, 15, 12, 0, 0).astimezone()

    result = query(entries, LedgerQuery(Period.DAY), lambda: local_noon)

    assert _ids(result) == ["today"]
