"""Ledger domain service.

``LedgerService`` owns the entry collection for a session. All mutations go
through its methods and are written back to the database immediately; the
query and summary functions only ever see snapshots.
"""

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

from finflow.database.base import Database, ENTRIES_KEY
from finflow.database.mappers import entries_from_json, entries_to_json
from finflow.domain import errors
from finflow.domain.entities import (
    Entry,
    EntryType,
    LedgerQuery,
    LedgerView,
    MergeReport,
)
from finflow.domain.errors import NotFoundError, ValidationError
from finflow.domain.exchange import dump_export, parse_import_payload
from finflow.domain.normalizer import Clock, normalize, system_clock, to_epoch_millis
from finflow.domain.periods import bounds
from finflow.domain.query import query
from finflow.domain.reconcile import reconcile
from finflow.domain.summary import totals

logger = logging.getLogger(__name__)


class LedgerService:
    """Service for managing the entry collection."""

    def __init__(self, db: Database, clock: Clock = system_clock):
        """Initialize ledger service.

        Args:
            db: Database instance
            clock: Source of the current instant
        """
        self.db = db
        self.clock = clock
        self._entries: Optional[dict[str, Entry]] = None

    def _collection(self) -> dict[str, Entry]:
        """Load the collection on first use."""
        if self._entries is None:
            loaded = entries_from_json(self.db.get_value(ENTRIES_KEY), self.clock)
            self._entries = {entry.id: entry for entry in loaded}
            logger.debug("Loaded %d entries", len(self._entries))
        return self._entries

    def _save(self) -> None:
        self.db.set_value(ENTRIES_KEY, entries_to_json(self._collection().values()))

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Snapshot of the collection in storage order."""
        return tuple(self._collection().values())

    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID.

        Args:
            entry_id: Entry ID

        Returns:
            Entry or None if not found
        """
        return self._collection().get(entry_id)

    def require_entry(self, entry_id: str) -> Entry:
        """Get entry by ID, raising NotFoundError if missing."""
        entry = self.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(errors.entry_not_found(entry_id))
        return entry

    def add_entry(
        self,
        entry_type: EntryType,
        entry_date: Optional[date],
        amount: Optional[Decimal],
        description: Optional[str],
        category: Optional[str] = None,
    ) -> Entry:
        """Create an entry from submitted values.

        Args:
            entry_type: Income or outflow
            entry_date: Calendar date of the entry
            amount: Positive amount
            description: Non-empty description
            category: Optional category

        Returns:
            The created entry

        Raises:
            ValidationError: If a value is missing or invalid. Nothing is
                stored in that case.
        """
        if entry_date is None:
            raise ValidationError("Please select a date.")
        if description is None or not description.strip():
            raise ValidationError("Please enter a description.")
        if amount is None or not amount.is_finite() or amount <= 0:
            raise ValidationError("Amount must be a positive number.")

        entry = normalize(
            {
                "type": entry_type.value,
                "date": entry_date.isoformat(),
                "amount": amount,
                "description": description.strip(),
                "category": category,
                "createdAt": to_epoch_millis(self.clock()),
            },
            self.clock,
        )
        self._collection()[entry.id] = entry
        self._save()
        logger.info("Added %s entry %s", entry.type.value, entry.id)
        return entry

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry.

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        self.require_entry(entry_id)
        del self._collection()[entry_id]
        self._save()
        logger.info("Deleted entry %s", entry_id)

    def update_category(self, entry_id: str, category: Optional[str]) -> Entry:
        """Reassign an entry's category. None or blank clears it.

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        entry = self.require_entry(entry_id)
        updated = replace(entry, category=(category or "").strip())
        self._collection()[entry_id] = updated
        self._save()
        return updated

    def replace_all(self, entries: tuple[Entry, ...] | list[Entry]) -> None:
        """Replace the whole collection."""
        self._entries = {entry.id: entry for entry in entries}
        self._save()

    def clear(self) -> int:
        """Remove every entry. Returns the number removed."""
        removed = len(self._collection())
        self._entries = {}
        self.db.delete_value(ENTRIES_KEY)
        logger.info("Cleared %d entries", removed)
        return removed

    def view(self, ledger_query: LedgerQuery) -> LedgerView:
        """Run a query and compute totals over its result."""
        reference_date = ledger_query.reference_date or self.clock().astimezone().date()
        ledger_query = replace(ledger_query, reference_date=reference_date)
        entries = query(self.entries, ledger_query, self.clock)
        return LedgerView(
            bounds=bounds(ledger_query.period, reference_date),
            entries=entries,
            totals=totals(entries),
        )

    def import_json(self, content: str | bytes) -> MergeReport:
        """Merge entries from an import file into the collection.

        Raises:
            ImportFormatError: If the file is not a supported JSON shape. The
                collection is unchanged in that case.
        """
        records = parse_import_payload(content)
        report = reconcile(self.entries, records, self.clock)
        self.replace_all(report.entries)
        logger.info(
            "Imported %d of %d record(s) (%d added, %d replaced)",
            report.accepted,
            report.received,
            report.added,
            report.replaced,
        )
        return report

    def export_json(self) -> str:
        """Serialize the collection as an export document."""
        return dump_export(self.entries, self.clock)
