"""Shared pytest fixtures for finflow tests."""

import tempfile
import os
from datetime import datetime, UTC
from decimal import Decimal
import pytest

from finflow.database.factories import create_sqlite_database
from finflow.domain.entities import Entry, EntryType
from finflow.domain.ledger import LedgerService

FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)
FIXED_NOW_MILLIS = int(FIXED_NOW.timestamp() * 1000)


def make_entry(
    entry_id: str,
    entry_type: EntryType = EntryType.INCOME,
    date: str = "2024-01-05",
    amount: str | int = 0,
    description: str = "",
    category: str = "",
    created_at: int = 1,
) -> Entry:
    """Build an Entry with sensible defaults for tests."""
    return Entry(
        id=entry_id,
        type=entry_type,
        date=date,
        amount=Decimal(str(amount)),
        description=description,
        category=category,
        created_at=created_at,
    )


@pytest.fixture
def clock():
    """A clock frozen at 2024-01-15 12:00 UTC."""
    return lambda: FIXED_NOW


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def ledger_service(temp_db, clock):
    """Create a LedgerService with a temporary database and fixed clock."""
    return LedgerService(temp_db, clock=clock)


@pytest.fixture
def sample_entries():
    """The two-entry January collection used across scenarios."""
    return [
        make_entry("1", EntryType.INCOME, "2024-01-05", 100, "Salary"),
        make_entry("2", EntryType.OUTFLOW, "2024-01-06", 40, "Groceries", "Food"),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
