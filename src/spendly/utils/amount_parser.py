"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

_CURRENCY_TOKENS = re.compile(r"(?i)BDT|TK\.?|৳")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a bank SMS amount string into a Decimal.

    Thousands separators are stripped regardless of grouping width, so both
    South Asian and Western grouping are accepted:
    - "3,04,017.61" -> 304017.61
    - "4,300.00" -> 4300.00
    - "BDT 7,000" -> 7000
    - "169271.77" -> 169271.77

    Args:
        amount_str: Amount string, optionally prefixed with a currency token

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = _CURRENCY_TOKENS.sub("", amount_str)
    cleaned = cleaned.replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount
