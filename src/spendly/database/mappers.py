"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer keeps the ledger schema out of the domain entities.
"""

from datetime import datetime, UTC

from spendly.domain import entities as domain
from spendly.database.models import Transaction as ORMTransaction


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.LedgerTransaction:
    """Convert SQLAlchemy Transaction model to domain LedgerTransaction entity."""
    return domain.LedgerTransaction(
        id=orm_transaction.id,
        amount=orm_transaction.amount,
        direction=orm_transaction.direction,
        category=domain.CategoryLabel(orm_transaction.category),
        description=orm_transaction.description,
        date=_as_utc(orm_transaction.date),
        source=orm_transaction.source,
        balance=orm_transaction.balance,
        account_ref=orm_transaction.account_ref,
        reference_id=orm_transaction.reference_id,
    )


def transaction_to_orm(transaction: domain.LedgerTransaction) -> ORMTransaction:
    """Convert domain LedgerTransaction entity to SQLAlchemy Transaction model."""
    return ORMTransaction(
        id=transaction.id,
        amount=transaction.amount,
        direction=transaction.direction,
        category=transaction.category.value,
        description=transaction.description,
        date=_as_utc(transaction.date),
        source=transaction.source,
        balance=transaction.balance,
        account_ref=transaction.account_ref,
        reference_id=transaction.reference_id,
    )


def _as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo, so naive values are stored and read as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
