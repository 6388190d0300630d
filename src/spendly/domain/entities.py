"""Domain model entities for spendly.

These are pure value objects produced by the SMS extraction pipeline and
consumed by the ledger. They carry no identity beyond their content and are
independent of the database schema.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionKind(str, Enum):
    """Direction of money movement as reported by the bank."""

    DEBIT = "debit"
    CREDIT = "credit"


class CategoryLabel(str, Enum):
    """Closed set of spending categories.

    The values are the literal labels shown to users and stored by the
    ledger, so they must not change.
    """

    ATM_WITHDRAWAL = "ATM Withdrawal"
    BANK_TRANSFER = "Bank Transfer"
    BANK_FEES = "Bank Fees"
    REFUND = "Refund"
    SHOPPING = "Shopping"
    HEALTH = "Health"
    FOOD = "Food"
    TRANSPORT = "Transport"
    BILLS = "Bills"
    INCOME = "Income"
    ENTERTAINMENT = "Entertainment"
    EDUCATION = "Education"
    LARGE_PAYMENT = "Large Payment"
    OTHER = "Other"


@dataclass(frozen=True)
class ParsedTransaction:
    """Structured record extracted from a single bank SMS.

    ``timestamp_parsed`` is False when no timestamp was found in the message
    and ``timestamp`` holds the extraction-time clock instead.
    """

    kind: TransactionKind
    amount: Decimal
    balance: Decimal
    timestamp: str
    timestamp_parsed: bool
    account_ref: Optional[str]
    description: Optional[str]
    reference_id: Optional[str]


@dataclass(frozen=True)
class SMSMessage:
    """Raw message as delivered by the device message source."""

    id: str
    address: str
    body: str
    received_at: datetime


@dataclass(frozen=True)
class LedgerTransaction:
    """Application-level transaction record stored by the ledger."""

    id: str
    amount: Decimal
    direction: str
    category: CategoryLabel
    description: str
    date: datetime
    source: str
    balance: Optional[Decimal] = None
    account_ref: Optional[str] = None
    reference_id: Optional[str] = None
