"""Import merge reconciliation."""

import logging
from collections.abc import Iterable
from typing import Any

from finflow.domain.entities import Entry, MergeReport
from finflow.domain.normalizer import Clock, normalize, system_clock

logger = logging.getLogger(__name__)


def reconcile(
    existing: Iterable[Entry],
    incoming: Iterable[Any],
    clock: Clock = system_clock,
) -> MergeReport:
    """Merge incoming records into an existing collection by ID.

    Incoming records are normalized first and rejects are dropped. On an ID
    collision the incoming entry replaces the existing one in full; the
    merged collection keeps the position of the existing entry.

    Args:
        existing: Current entry collection
        incoming: Raw records from an import file
        clock: Source of the current instant for normalization

    Returns:
        MergeReport with the merged entries and import counts
    """
    merged: dict[str, Entry] = {entry.id: entry for entry in existing}
    existing_ids = set(merged)

    received = 0
    accepted = 0
    added = 0
    replaced_ids: set[str] = set()

    for raw in incoming:
        received += 1
        entry = normalize(raw, clock)
        if entry is None:
            continue
        accepted += 1
        if entry.id in existing_ids:
            replaced_ids.add(entry.id)
        elif entry.id not in merged:
            added += 1
        merged[entry.id] = entry

    logger.debug(
        "Merged %d of %d incoming record(s): %d added, %d replaced",
        accepted,
        received,
        added,
        len(replaced_ids),
    )
    return MergeReport(
        entries=tuple(merged.values()),
        received=received,
        accepted=accepted,
        added=added,
        replaced=len(replaced_ids),
    )


def merge(
    existing: Iterable[Entry],
    incoming: Iterable[Any],
    clock: Clock = system_clock,
) -> tuple[Entry, ...]:
    """Merge incoming records into existing entries; incoming wins on ID collision."""
    return reconcile(existing, incoming, clock).entries
