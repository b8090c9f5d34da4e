"""Mapper functions to convert between domain entries and persisted records.

Records use the camelCase keys of the stored JSON array and the export file,
so the stored shape can change without touching the domain layer.
"""

import json
import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from finflow.domain.entities import Entry
from finflow.domain.normalizer import Clock, normalize_all, system_clock

logger = logging.getLogger(__name__)


def amount_to_json(amount: Decimal) -> int | float | str:
    """Render a Decimal amount as a JSON value without losing precision.

    Integral amounts become ints and amounts a float represents exactly
    become floats. Anything else is written as a decimal string, which the
    normalizer reads back unchanged.
    """
    if amount == amount.to_integral_value():
        return int(amount)
    as_float = float(amount)
    if Decimal(repr(as_float)) == amount:
        return as_float
    return str(amount)


def entry_to_record(entry: Entry) -> dict[str, Any]:
    """Convert a domain Entry to a JSON-ready record."""
    return {
        "id": entry.id,
        "type": entry.type.value,
        "date": entry.date,
        "amount": amount_to_json(entry.amount),
        "description": entry.description,
        "category": entry.category,
        "createdAt": entry.created_at,
    }


def entries_to_json(entries: Iterable[Entry], indent: int | None = None) -> str:
    """Serialize entries as a JSON array."""
    return json.dumps([entry_to_record(e) for e in entries], ensure_ascii=False, indent=indent)


def entries_from_json(payload: str | None, clock: Clock = system_clock) -> list[Entry]:
    """Deserialize a stored JSON array into normalized entries.

    Missing, unparsable or non-array payloads yield an empty collection.
    """
    if not payload:
        return []

    try:
        records = json.loads(payload, parse_float=Decimal)
    except ValueError:
        logger.warning("Stored entries are not valid JSON; starting with an empty ledger")
        return []

    if not isinstance(records, list):
        logger.warning("Stored entries are not a JSON array; starting with an empty ledger")
        return []

    return normalize_all(records, clock)
