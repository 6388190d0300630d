"""Generic SQLAlchemy database implementation."""

from typing import Optional
from sqlalchemy.orm import Session

from spendly.database.base import Database
from spendly.database.models import Transaction, create_session_factory
from spendly.database.mappers import transaction_to_domain, transaction_to_orm
from spendly.domain.entities import LedgerTransaction
from spendly.domain.errors import ConflictError, duplicate_transaction


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def save_transaction(self, transaction: LedgerTransaction) -> None:
        """Store a ledger transaction."""
        if self.transaction_exists(transaction.id):
            raise ConflictError(duplicate_transaction(transaction.id))
        session = self._get_session()
        session.add(transaction_to_orm(transaction))
        session.commit()

    def get_transaction(self, transaction_id: str) -> Optional[LedgerTransaction]:
        """Get a ledger transaction by ID."""
        session = self._get_session()
        txn = session.get(Transaction, transaction_id)
        if txn is None:
            return None
        return transaction_to_domain(txn)

    def transaction_exists(self, transaction_id: str) -> bool:
        """Check whether a ledger transaction ID is already stored."""
        session = self._get_session()
        return (
            session.query(Transaction.id).filter(Transaction.id == transaction_id).first()
            is not None
        )

    def list_transactions(
        self, source: Optional[str] = None, limit: Optional[int] = None
    ) -> list[LedgerTransaction]:
        """List ledger transactions, newest first."""
        session = self._get_session()
        query = session.query(Transaction)
        if source is not None:
            query = query.filter(Transaction.source == source)
        query = query.order_by(Transaction.date.desc(), Transaction.id)
        if limit is not None:
            query = query.limit(limit)
        return [transaction_to_domain(txn) for txn in query.all()]
