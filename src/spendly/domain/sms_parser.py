"""Bank SMS extraction.

Turns the free-form text of a bank notification into a ParsedTransaction.
Every field is resolved from an ordered table of candidate patterns: the
first candidate that matches and yields a valid value wins, later
candidates are never tried. Tables are tuned for UCB (United Commercial
Bank) messages and the common formats of other Bangladeshi banks, e.g.

    Your A/C (***3766) has been debited BDT 3,060.00. Avl Bal: BDT 3,04,017.61 @ 07:58 PM. For query: 16419
    Your UCB Debit Card#5884 (CL ID:257015) has been charged for BDT4,300.00 at NEW SONALI JEWELLERS on 07/05/25 20:07
    BDT7,000.00 withdrawn fm Card#5884 (CL ID:257015) on 08/05/25 18:33 at UCBL ATM. Avl Bal:169271.77.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Optional

from spendly.domain.entities import ParsedTransaction, TransactionKind
from spendly.domain.normalizer import normalize_message
from spendly.logging_setup import get_logger
from spendly.utils.amount_parser import parse_amount

logger = get_logger(__name__)

# Digits with comma grouping of any width and an optional 1-2 digit fraction.
AMOUNT = r"(\d[\d,]*(?:\.\d{1,2})?)"
SHORT_DATE = r"\d{2}/\d{2}/\d{2}"


@dataclass(frozen=True)
class CandidatePattern:
    """One alternative rule for resolving a single field.

    ``extract`` turns a match into the field value, or returns None when the
    matched text is not a valid value, in which case the next candidate is
    tried.
    """

    name: str
    regex: re.Pattern
    extract: Callable[[re.Match], Any]


def _candidate(name: str, pattern: str, extract: Callable[[re.Match], Any]) -> CandidatePattern:
    return CandidatePattern(name, re.compile(pattern, re.IGNORECASE), extract)


def _group(match: re.Match) -> str:
    return match.group(1)


def _const(value: str) -> Callable[[re.Match], str]:
    return lambda match: value


def _amount(match: re.Match) -> Optional[Decimal]:
    try:
        return parse_amount(match.group(1))
    except ValueError:
        return None


def _positive_amount(match: re.Match) -> Optional[Decimal]:
    amount = _amount(match)
    if amount is None or amount <= 0:
        return None
    return amount


def _date_and_time(match: re.Match) -> str:
    return f"{match.group(1)} {match.group(2)}"


def _merchant(match: re.Match) -> Optional[str]:
    return match.group(1).strip() or None


CREDIT_PATTERN = re.compile(r"credited|credit|deposit|inward credit|reversed", re.IGNORECASE)
DEBIT_PATTERN = re.compile(r"debited|debit|charged|withdrawn", re.IGNORECASE)

AMOUNT_PATTERNS = (
    _candidate("bdt", rf"BDT\s*{AMOUNT}", _positive_amount),
    _candidate("charged_for", rf"charged for BDT\s*{AMOUNT}", _positive_amount),
    _candidate("withdrawn", rf"{AMOUNT}\s*withdrawn", _positive_amount),
    _candidate("amount_label", rf"amount:?\s*BDT\s*{AMOUNT}", _positive_amount),
)

ACCOUNT_PATTERNS = (
    _candidate("masked_account", r"A/C \(\*+(\d+)\)", _group),
    _candidate("card", r"Card#(\d+)", _group),
    _candidate("account", r"account.*?(\d{4})", _group),
)

BALANCE_PATTERNS = (
    _candidate("avl_bal_bdt", rf"Avl Bal:\s*BDT\s*{AMOUNT}", _amount),
    _candidate("avl_bal", rf"Avl Bal:\s*{AMOUNT}", _amount),
    _candidate("available_balance", rf"Available Balance:\s*BDT\s*{AMOUNT}", _amount),
    _candidate("balance", rf"Balance:\s*BDT\s*{AMOUNT}", _amount),
)

TIMESTAMP_PATTERNS = (
    _candidate("at_sign_time", r"@\s*(\d{1,2}:\d{2}\s*[AP]M)", _group),
    _candidate("at_time", r"\bat\s*(\d{1,2}:\d{2}\s*[AP]M)", _group),
    _candidate("on_date_time", rf"\bon\s*({SHORT_DATE})\s*(\d{{2}}:\d{{2}})", _date_and_time),
)

# Order matters: overlapping messages (e.g. an ATM reversal) are resolved
# by the first rule that matches.
DESCRIPTION_PATTERNS = (
    _candidate("merchant", rf"\bat\s+([A-Z\s()]+?)\s+on\s+{SHORT_DATE}", _merchant),
    _candidate("atm", r"UCBL ATM|NPSB ATM", _const("ATM Withdrawal")),
    _candidate("beftn", r"Beftn Inward Credit", _const("Bank Transfer (Received)")),
    _candidate("online_transfer", r"I Banking.*Transfer|Fund Transfer", _const("Online Transfer")),
    _candidate("npsb_charge", r"NPSB CHARGE", _const("Bank Service Charge")),
    _candidate("reversal", r"reversed", _const("Transaction Reversal")),
)

REFERENCE_PATTERNS = (
    _candidate("query", r"For query:\s*(\d+)", _group),
    _candidate("client_id", r"CL ID:\s*(\d+)", _group),
    _candidate("ref", r"Ref:\s*([A-Za-z0-9]+)", _group),
)

DEFAULT_DESCRIPTIONS = {
    TransactionKind.DEBIT: "Bank Debit",
    TransactionKind.CREDIT: "Bank Credit",
}


def first_match(candidates: tuple[CandidatePattern, ...], text: str) -> Any:
    """Return the value of the first candidate that matches with a valid value.

    Args:
        candidates: Ordered candidate patterns for one field
        text: Normalized message text

    Returns:
        Extracted value, or None if no candidate produced one
    """
    for candidate in candidates:
        match = candidate.regex.search(text)
        if match is None:
            continue
        value = candidate.extract(match)
        if value is not None:
            logger.debug("Pattern %s matched: %r", candidate.name, value)
            return value
    return None


def detect_kind(text: str) -> Optional[TransactionKind]:
    """Classify a message as credit or debit.

    Credit vocabulary is checked first, so "reversed" debits count as
    credits. Returns None when neither vocabulary is present.
    """
    if CREDIT_PATTERN.search(text):
        return TransactionKind.CREDIT
    if DEBIT_PATTERN.search(text):
        return TransactionKind.DEBIT
    return None


def _parse(text: str, clock: Callable[[], datetime]) -> Optional[ParsedTransaction]:
    kind = detect_kind(text)
    if kind is None:
        logger.debug("No transaction type found")
        return None

    amount = first_match(AMOUNT_PATTERNS, text)
    if amount is None:
        logger.debug("No amount found")
        return None

    timestamp = first_match(TIMESTAMP_PATTERNS, text)
    timestamp_parsed = timestamp is not None
    if not timestamp_parsed:
        timestamp = clock().strftime("%X")

    balance = first_match(BALANCE_PATTERNS, text)
    description = first_match(DESCRIPTION_PATTERNS, text) or DEFAULT_DESCRIPTIONS[kind]

    return ParsedTransaction(
        kind=kind,
        amount=amount,
        balance=balance if balance is not None else Decimal("0"),
        timestamp=timestamp,
        timestamp_parsed=timestamp_parsed,
        account_ref=first_match(ACCOUNT_PATTERNS, text),
        description=description,
        reference_id=first_match(REFERENCE_PATTERNS, text),
    )


def extract_transaction(
    raw_message: str, clock: Callable[[], datetime] = datetime.now
) -> Optional[ParsedTransaction]:
    """Extract a transaction record from a bank SMS.

    Extraction is all-or-nothing: None is returned when the message has no
    credit/debit vocabulary or no strictly positive amount. Every other
    field falls back to a default. This function never raises; unexpected
    errors are logged and reported as None.

    Args:
        raw_message: Message body as received
        clock: Source of the fallback time used when the message carries
            no timestamp

    Returns:
        ParsedTransaction or None if the message is not a transaction
    """
    try:
        text = normalize_message(raw_message)
        logger.debug("Parsing SMS: %s", text)
        result = _parse(text, clock)
    except Exception:
        logger.exception("Error parsing bank SMS")
        return None

    if result is not None:
        logger.debug("Parsed result: %s", result)
    return result
