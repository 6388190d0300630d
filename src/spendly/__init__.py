"""Spendly - bank SMS transaction extraction and categorization."""

from spendly.domain.categorizer import categorize
from spendly.domain.entities import CategoryLabel, ParsedTransaction, TransactionKind
from spendly.domain.sms_parser import extract_transaction

__all__ = [
    "categorize",
    "extract_transaction",
    "CategoryLabel",
    "ParsedTransaction",
    "TransactionKind",
]


# Import main lazily to avoid circular dependencies
def __getattr__(name):
    if name == "main":
        from spendly.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
