"""SMS import domain service."""

from datetime import datetime, tzinfo
from typing import Any, Iterable, Optional

from spendly.database.base import Database
from spendly.domain.categorizer import categorize
from spendly.domain.entities import (
    LedgerTransaction,
    ParsedTransaction,
    SMSMessage,
    TransactionKind,
)
from spendly.domain.message_source import filter_bank_messages
from spendly.domain.sms_parser import extract_transaction
from spendly.logging_setup import get_logger
from spendly.utils.date_parser import resolve_timestamp

logger = get_logger(__name__)

SMS_SOURCE = "sms"

DIRECTIONS = {
    TransactionKind.DEBIT: "expense",
    TransactionKind.CREDIT: "income",
}


def ledger_id(message: SMSMessage) -> str:
    """Return the ledger ID used for an SMS-derived transaction."""
    return f"{SMS_SOURCE}-{message.id}"


def transaction_date(
    parsed: ParsedTransaction, received_at: datetime, zone: Optional[tzinfo] = None
) -> datetime:
    """Pick the date of a parsed transaction.

    A timestamp found in the message wins. It is read in the bank's zone,
    with a bare time of day placed on the local arrival date. Messages
    without one fall back to the arrival time rather than the
    extraction-time clock.
    """
    if not parsed.timestamp_parsed:
        return received_at
    try:
        return resolve_timestamp(parsed.timestamp, received_at, zone)
    except ValueError:
        logger.debug("Unusable timestamp %r, using arrival time", parsed.timestamp)
        return received_at


def to_ledger_transaction(
    message: SMSMessage, parsed: ParsedTransaction, zone: Optional[tzinfo] = None
) -> LedgerTransaction:
    """Map a parsed SMS into the ledger's transaction record."""
    description = parsed.description or ""
    return LedgerTransaction(
        id=ledger_id(message),
        amount=parsed.amount,
        direction=DIRECTIONS[parsed.kind],
        category=categorize(description, parsed.amount),
        description=description,
        date=transaction_date(parsed, message.received_at, zone),
        source=SMS_SOURCE,
        balance=parsed.balance,
        account_ref=parsed.account_ref,
        reference_id=parsed.reference_id,
    )


class SMSImportService:
    """Service for importing bank SMS messages into the ledger."""

    def __init__(self, db: Database, zone: Optional[tzinfo] = None):
        """Initialize SMS import service.

        Args:
            db: Database instance
            zone: Timezone bank messages are written in, defaults to
                ``get_timezone()``
        """
        self.db = db
        self.zone = zone

    def import_messages(
        self, messages: Iterable[SMSMessage], bank_name: Optional[str] = None
    ) -> dict[str, Any]:
        """Import transactions from bank SMS messages.

        Messages that do not look like bank messages are filtered out,
        messages already in the ledger are skipped, and messages the parser
        does not recognise as transactions are counted and ignored.

        Args:
            messages: Messages from the device
            bank_name: Optional name of the user's bank for filtering

        Returns:
            Dict with import statistics:
            - imported: number of transactions imported
            - skipped: number of messages already in the ledger
            - unrecognized: number of bank messages that are not transactions
            - filtered: number of non-bank messages dropped
            - errors: list of error messages
        """
        messages = list(messages)
        bank_messages = filter_bank_messages(messages, bank_name)

        imported = 0
        skipped = 0
        unrecognized = 0
        errors = []

        for message in bank_messages:
            try:
                if self.db.transaction_exists(ledger_id(message)):
                    skipped += 1
                    continue

                parsed = extract_transaction(message.body)
                if parsed is None:
                    unrecognized += 1
                    continue

                self.db.save_transaction(to_ledger_transaction(message, parsed, self.zone))
                imported += 1

            except Exception as e:
                errors.append(f"Message {message.id}: {str(e)}")
                continue

        logger.debug(
            "SMS import: %d imported, %d skipped, %d unrecognized, %d errors",
            imported,
            skipped,
            unrecognized,
            len(errors),
        )
        return {
            "imported": imported,
            "skipped": skipped,
            "unrecognized": unrecognized,
            "filtered": len(messages) - len(bank_messages),
            "errors": errors,
        }
