"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Fixed key under which the entry collection is stored
ENTRIES_KEY = "financialFlowEntries_v1"


class Database(ABC):
    """Abstract key-value database interface for finflow."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def get_value(self, key: str) -> Optional[str]:
        """Get the stored text for a key, or None if absent."""
        pass

    @abstractmethod
    def set_value(self, key: str, value: str) -> None:
        """Store text under a key, replacing any previous value."""
        pass

    @abstractmethod
    def delete_value(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        pass
