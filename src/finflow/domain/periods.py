"""Period bounds calculation."""

from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from finflow.domain import errors
from finflow.domain.entities import Period, PeriodBounds
from finflow.domain.errors import ValidationError

ALL_TIME_LABEL = "All time"


def start_of_week(day: date) -> date:
    """Return the Monday on or before the given day."""
    return day - timedelta(days=day.weekday())


def _bounded(period: Period, reference_date: date) -> PeriodBounds:
    if period is Period.DAY:
        start = reference_date
        end = start + timedelta(days=1)
        return PeriodBounds(start, end, start.isoformat())

    if period is Period.WEEK:
        start = start_of_week(reference_date)
        end = start + timedelta(days=7)
        last = end - timedelta(days=1)
        return PeriodBounds(start, end, f"{start.isoformat()} → {last.isoformat()}")

    if period is Period.MONTH:
        start = reference_date.replace(day=1)
        end = start + relativedelta(months=1)
        return PeriodBounds(start, end, start.strftime("%Y-%m"))

    start = reference_date.replace(month=1, day=1)
    end = start + relativedelta(years=1)
    return PeriodBounds(start, end, f"{start.year:04d}")


def bounds(period: Period, reference_date: date) -> PeriodBounds:
    """Compute the half-open date range for a period.

    Args:
        period: Period kind
        reference_date: Anchor date the period is computed around

    Returns:
        PeriodBounds with ``start`` included and ``end`` excluded. Both are
        None for ``Period.ALL``.

    Raises:
        ValidationError: If the period would end past the last representable date
    """
    if period is Period.ALL:
        return PeriodBounds(None, None, ALL_TIME_LABEL)

    try:
        return _bounded(period, reference_date)
    except (OverflowError, ValueError):
        raise ValidationError(errors.reference_date_out_of_range(period.value, reference_date))
