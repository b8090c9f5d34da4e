"""Date parsing utilities for user input."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a user-supplied date string into a date object.

    Supports:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"
    - "last/this/next" + week, month or year (first day of that period)
    - "last <weekday>"

    Args:
        date_str: Date string
        today: Day relative dates are resolved against (defaults to today)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in relative_dates:
        return relative_dates[text]

    prefix, _, unit = text.partition(" ")
    offsets = {"last": -1, "this": 0, "next": 1}
    if prefix in offsets and unit:
        step = offsets[prefix]
        if unit == "week":
            return today - timedelta(days=today.weekday()) + timedelta(weeks=step)
        if unit == "month":
            return today.replace(day=1) + relativedelta(months=step)
        if unit == "year":
            return today.replace(month=1, day=1) + relativedelta(years=step)
        if prefix == "last" and unit in WEEKDAYS:
            days_ago = (today.weekday() - WEEKDAYS.index(unit)) % 7 or 7
            return today - timedelta(days=days_ago)

    if not text:
        raise ValueError("Empty date string")

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
