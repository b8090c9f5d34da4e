"""Summary totals over a query result."""

from collections.abc import Sequence
from decimal import Decimal

from finflow.domain.entities import Entry, EntryType, Totals


def _amount_of(entry: Entry) -> Decimal:
    amount = entry.amount
    if not isinstance(amount, Decimal):
        try:
            amount = Decimal(str(amount))
        except ArithmeticError:
            return Decimal(0)
    return amount if amount.is_finite() else Decimal(0)


def totals(entries: Sequence[Entry]) -> Totals:
    """Reduce an already-filtered view into income/outflow/net/count.

    Amounts that are not finite numbers contribute 0.
    """
    income = Decimal(0)
    outflow = Decimal(0)

    for entry in entries:
        amount = _amount_of(entry)
        if entry.type is EntryType.INCOME:
            income += amount
        else:
            outflow += amount

    return Totals(
        income=income,
        outflow=outflow,
        net=income - outflow,
        count=len(entries),
    )
