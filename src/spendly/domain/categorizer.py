"""Rule-based transaction categorization."""

import re
from decimal import Decimal
from typing import Optional

from spendly.domain.entities import CategoryLabel

LARGE_PAYMENT_THRESHOLD = Decimal("10000")


def _keywords(*words: str) -> re.Pattern:
    return re.compile("|".join(re.escape(word) for word in words), re.IGNORECASE)


# First matching rule wins. Bank-specific rules come before merchant and
# general keyword rules.
CATEGORY_RULES: tuple[tuple[re.Pattern, CategoryLabel], ...] = (
    (_keywords("atm withdrawal", "withdrawn", "atm"), CategoryLabel.ATM_WITHDRAWAL),
    (_keywords("beftn", "transfer", "inward credit"), CategoryLabel.BANK_TRANSFER),
    (_keywords("charge", "fee", "npsb charge"), CategoryLabel.BANK_FEES),
    (_keywords("reversal", "reversed"), CategoryLabel.REFUND),
    (_keywords("jeweller", "jewelry", "gold"), CategoryLabel.SHOPPING),
    (_keywords("pharma", "pharmacy", "medicine", "medical"), CategoryLabel.HEALTH),
    (
        _keywords(
            "restaurant", "cafe", "food", "pizza", "burger",
            "kfc", "domino", "starbucks", "coffee", "dining",
        ),
        CategoryLabel.FOOD,
    ),
    (
        _keywords("uber", "pathao", "taxi", "transport", "fuel", "petrol", "gas"),
        CategoryLabel.TRANSPORT,
    ),
    (
        _keywords("shop", "store", "market", "mall", "purchase", "retail", "bazar", "daraz"),
        CategoryLabel.SHOPPING,
    ),
    (
        _keywords("bill", "utility", "electric", "internet", "phone", "mobile", "recharge"),
        CategoryLabel.BILLS,
    ),
    (_keywords("salary", "income", "payment", "bonus", "allowance"), CategoryLabel.INCOME),
    (_keywords("entertainment", "movie", "game", "fun", "ticket"), CategoryLabel.ENTERTAINMENT),
    (_keywords("education", "school", "college", "course", "book"), CategoryLabel.EDUCATION),
)


def categorize(
    description: Optional[str], amount: Decimal | int | float | None = None
) -> CategoryLabel:
    """Assign a category to a transaction description.

    Keywords are matched case-insensitively as substrings. Descriptions that
    match no rule are labelled Large Payment when the amount exceeds 10,000,
    otherwise Other.

    Args:
        description: Merchant or transaction description
        amount: Optional transaction amount

    Returns:
        CategoryLabel, never raises
    """
    text = description or ""
    for pattern, label in CATEGORY_RULES:
        if pattern.search(text):
            return label

    if amount is not None and _is_large(amount):
        return CategoryLabel.LARGE_PAYMENT
    return CategoryLabel.OTHER


def _is_large(amount: Decimal | int | float) -> bool:
    value = Decimal(str(amount))
    return not value.is_nan() and value > LARGE_PAYMENT_THRESHOLD
