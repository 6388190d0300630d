"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or file does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing ledger transaction."""
    return f"Transaction '{transaction_id}' not found"


def duplicate_transaction(transaction_id: str) -> str:
    """Return message for a ledger transaction ID that is already stored."""
    return f"Transaction '{transaction_id}' already exists"


def invalid_message_record(index: int, reason: str) -> str:
    """Return message for a malformed entry in a message export."""
    return f"Message #{index}: {reason}"
