"""Loading and filtering of device SMS exports."""

import json
from pathlib import Path
from typing import Iterable, Optional

from spendly.domain.entities import SMSMessage
from spendly.domain.errors import NotFoundError, ValidationError, invalid_message_record
from spendly.utils.date_parser import parse_received_at

BANK_KEYWORDS = (
    "BANK",
    "DBBL",
    "BRAC",
    "ISLAMI",
    "EASTERN",
    "CITY",
    "PRIME",
    "MUTUAL",
    "DUTCH",
    "BANGLA",
    "TRUST",
    "STANDARD",
    "CHARTERED",
    "HSBC",
    "CITIBANK",
    "BALANCE",
    "DEBITED",
    "CREDITED",
    "A/C",
    "ACCOUNT",
)


def is_bank_message(message: SMSMessage, keywords: Iterable[str] = BANK_KEYWORDS) -> bool:
    """Check whether a message body or sender mentions any bank keyword."""
    body = message.body.upper()
    address = message.address.upper()
    return any(keyword in body or keyword in address for keyword in keywords)


def filter_bank_messages(
    messages: Iterable[SMSMessage], bank_name: Optional[str] = None
) -> list[SMSMessage]:
    """Keep only messages that look like they come from a bank.

    Args:
        messages: Messages from the device
        bank_name: Optional name of the user's bank, used as an extra keyword

    Returns:
        Messages whose body or sender matches a bank keyword, in input order
    """
    keywords = list(BANK_KEYWORDS)
    if bank_name and bank_name.strip():
        keywords.append(bank_name.strip().upper())
    return [message for message in messages if is_bank_message(message, keywords)]


def message_from_dict(record: dict, index: int = 0) -> SMSMessage:
    """Build an SMSMessage from one entry of a device export.

    Raises:
        ValidationError: If a required key is missing or the date is invalid
    """
    if not isinstance(record, dict):
        raise ValidationError(invalid_message_record(index, "expected an object"))

    for key in ("id", "body", "date"):
        if record.get(key) is None:
            raise ValidationError(invalid_message_record(index, f"missing '{key}'"))

    try:
        received_at = parse_received_at(record["date"])
    except ValueError as e:
        raise ValidationError(invalid_message_record(index, str(e)))

    return SMSMessage(
        id=str(record["id"]),
        address=str(record.get("address") or ""),
        body=str(record["body"]),
        received_at=received_at,
    )


def load_messages(path: str | Path) -> list[SMSMessage]:
    """Load messages from a JSON export.

    The file holds an array of objects shaped like the Android SMS provider
    rows: ``{"id": ..., "address": ..., "body": ..., "date": <epoch ms>}``.
    ``_id`` is accepted in place of ``id``.

    Raises:
        NotFoundError: If the file does not exist
        ValidationError: If the file is not a JSON array of messages
    """
    file_path = Path(path)
    if not file_path.exists():
        raise NotFoundError(f"Message file not found: {path}")

    try:
        with open(file_path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}")
    except UnicodeDecodeError as e:
        raise ValidationError(f"Message file {path} is not valid UTF-8: {e}")

    if not isinstance(data, list):
        raise ValidationError(f"Expected a JSON array of messages in {path}")

    messages = []
    for index, record in enumerate(data, start=1):
        if isinstance(record, dict) and "id" not in record and "_id" in record:
            record = {**record, "id": record["_id"]}
        messages.append(message_from_dict(record, index))
    return messages
