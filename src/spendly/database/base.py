"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from spendly.domain.entities import LedgerTransaction


class Database(ABC):
    """Abstract ledger storage used by the SMS import service."""

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
    def save_transaction(self, transaction: LedgerTransaction) -> None:
        """Store a ledger transaction.

        Raises:
            ConflictError: If a transaction with the same ID already exists
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[LedgerTransaction]:
        """Get a ledger transaction by ID."""
        pass

    @abstractmethod
    def transaction_exists(self, transaction_id: str) -> bool:
        """Check whether a ledger transaction ID is already stored."""
        pass

    @abstractmethod
    def list_transactions(
        self, source: Optional[str] = None, limit: Optional[int] = None
    ) -> list[LedgerTransaction]:
        """List ledger transactions, newest first."""
        pass
