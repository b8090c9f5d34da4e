"""Entry normalization.

Turns arbitrary records (from storage or an import file) into canonical
``Entry`` objects, repairing what can be repaired and rejecting the rest.
"""

import logging
import uuid
from collections.abc import Iterable, Mapping
from datetime import datetime, UTC
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional

from finflow.domain.entities import Entry, EntryType

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DESCRIPTION_MAX_LENGTH = 80

# Type labels accepted on input; "expense" is the label used by older data.
TYPE_ALIASES = {
    "income": EntryType.INCOME,
    "outflow": EntryType.OUTFLOW,
    "expense": EntryType.OUTFLOW,
}


def system_clock() -> datetime:
    """Return the current instant in UTC."""
    return datetime.now(UTC)


def to_epoch_millis(instant: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds."""
    return int(instant.timestamp() * 1000)


def new_entry_id() -> str:
    """Generate a collision-free entry ID."""
    return uuid.uuid4().hex


def resolve_type(value: Any) -> Optional[EntryType]:
    """Map a type label (canonical or legacy) to an EntryType."""
    if isinstance(value, EntryType):
        return value
    if not isinstance(value, str):
        return None
    return TYPE_ALIASES.get(value.strip().lower())


def coerce_amount(value: Any) -> Decimal:
    """Coerce a raw amount to a non-negative Decimal, defaulting to 0."""
    if isinstance(value, bool) or value is None:
        return Decimal(0)
    try:
        amount = Decimal(value.strip() if isinstance(value, str) else str(value))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal(0)
    if not amount.is_finite():
        return Decimal(0)
    return abs(amount)


def coerce_created_at(value: Any, clock: Clock) -> int:
    """Keep a numeric, non-zero creation timestamp; otherwise use the clock."""
    if not isinstance(value, bool) and isinstance(value, (int, float, str, Decimal)):
        try:
            millis = Decimal(str(value).strip())
        except InvalidOperation:
            millis = Decimal(0)
        if millis.is_finite() and millis != 0:
            return int(millis)
    return to_epoch_millis(clock())


def normalize(raw: Any, clock: Clock = system_clock) -> Optional[Entry]:
    """Validate and repair a raw record into an Entry.

    Args:
        raw: Record from storage or an import file
        clock: Source of the current instant, used for missing timestamps

    Returns:
        Normalized entry, or None if the record is rejected
    """
    if isinstance(raw, Entry):
        return raw
    if not isinstance(raw, Mapping):
        return None

    entry_type = resolve_type(raw.get("type"))
    date_value = raw.get("date")
    if entry_type is None or not isinstance(date_value, str):
        return None

    entry_id = raw.get("id")
    if entry_id is None or entry_id == "":
        entry_id = new_entry_id()

    description = raw.get("description")
    if description is None:
        description = raw.get("desc")

    category = raw.get("category")

    return Entry(
        id=str(entry_id),
        type=entry_type,
        date=date_value,
        amount=coerce_amount(raw.get("amount")),
        description=str(description or "")[:DESCRIPTION_MAX_LENGTH],
        category=str(category or "").strip(),
        created_at=coerce_created_at(raw.get("createdAt"), clock),
    )


def normalize_all(records: Iterable[Any], clock: Clock = system_clock) -> list[Entry]:
    """Normalize a batch of stored records.

    Rejected records are dropped. Duplicate IDs collapse to the last
    occurrence, kept at the position of the first.
    """
    by_id: dict[str, Entry] = {}
    rejected = 0
    for raw in records:
        entry = normalize(raw, clock)
        if entry is None:
            rejected += 1
            continue
        by_id[entry.id] = entry

    if rejected:
        logger.warning("Dropped %d malformed stored record(s)", rejected)
    return list(by_id.values())
