"""Tests for rule-based categorization."""

import pytest
from decimal import Decimal

from spendly.domain.categorizer import categorize
from spendly.domain.entities import CategoryLabel


@pytest.mark.parametrize(
    "description,expected",
    [
        ("ATM Withdrawal", CategoryLabel.ATM_WITHDRAWAL),
        ("cash withdrawn", CategoryLabel.ATM_WITHDRAWAL),
        ("Bank Transfer (Received)", CategoryLabel.BANK_TRANSFER),
        ("BEFTN", CategoryLabel.BANK_TRANSFER),
        ("Online Transfer", CategoryLabel.BANK_TRANSFER),
        ("Bank Service Charge", CategoryLabel.BANK_FEES),
        ("Annual fee", CategoryLabel.BANK_FEES),
        ("Transaction Reversal", CategoryLabel.REFUND),
        ("NEW SONALI JEWELLERS", CategoryLabel.SHOPPING),
        ("Gold House", CategoryLabel.SHOPPING),
        ("Lazz Pharma", CategoryLabel.HEALTH),
        ("Popular Medical Centre", CategoryLabel.HEALTH),
        ("KFC Gulshan", CategoryLabel.FOOD),
        ("Cafe Mango", CategoryLabel.FOOD),
        ("Pathao Ride", CategoryLabel.TRANSPORT),
        ("Padma Petrol Pump", CategoryLabel.TRANSPORT),
        ("Daraz", CategoryLabel.SHOPPING),
        ("Agora Super Store", CategoryLabel.SHOPPING),
        ("DESCO Electric", CategoryLabel.BILLS),
        ("Internet Bill", CategoryLabel.BILLS),
        ("Salary May", CategoryLabel.INCOME),
        ("Movie Night", CategoryLabel.ENTERTAINMENT),
        ("College Admission", CategoryLabel.EDUCATION),
        ("Bank Debit", CategoryLabel.OTHER),
        ("Bank Credit", CategoryLabel.OTHER),
    ],
)
def test_keyword_rules(description, expected):
    """Test each keyword rule."""
    assert categorize(description) == expected


def test_labels_keep_literal_text():
    """Test that labels compare equal to their display text."""
    assert categorize("NEW SONALI JEWELLERS") == "Shopping"
    assert CategoryLabel.LARGE_PAYMENT.value == "Large Payment"
    assert CategoryLabel.ATM_WITHDRAWAL.value == "ATM Withdrawal"


class TestRulePriority:
    """Tests for first-match-wins ordering."""

    def test_atm_before_fees(self):
        assert categorize("ATM fee") == CategoryLabel.ATM_WITHDRAWAL

    def test_transfer_before_fees(self):
        assert categorize("Fund Transfer charge") == CategoryLabel.BANK_TRANSFER

    def test_jewellery_before_food(self):
        assert categorize("Gold Restaurant") == CategoryLabel.SHOPPING

    def test_food_before_shopping(self):
        assert categorize("Pizza Shop") == CategoryLabel.FOOD

    def test_case_insensitive(self):
        assert categorize("starbucks") == categorize("STARBUCKS") == CategoryLabel.FOOD


class TestAmountFallback:
    """Tests for the amount-based fallback."""

    def test_large_payment(self):
        assert categorize("Bank Debit", Decimal("10000.01")) == CategoryLabel.LARGE_PAYMENT

    def test_threshold_is_exclusive(self):
        assert categorize("Bank Debit", 10000) == CategoryLabel.OTHER

    def test_small_amount(self):
        assert categorize("Bank Debit", 250.0) == CategoryLabel.OTHER

    def test_keyword_wins_over_amount(self):
        assert categorize("KFC", Decimal("50000")) == CategoryLabel.FOOD

    def test_no_amount(self):
        assert categorize("Unknown merchant XYZ") == CategoryLabel.OTHER


@pytest.mark.parametrize("description", ["", None, "   ", "???", "১২৩", "x" * 500])
@pytest.mark.parametrize("amount", [None, 0, -5, 10001, Decimal("0"), float("nan"), float("inf")])
def test_categorize_is_total(description, amount):
    """Test that every input resolves to a known label."""
    assert categorize(description, amount) in set(CategoryLabel)


def test_keywords_match_inside_words():
    """Test that keywords are plain substrings, not whole words."""
    assert categorize("Mobile Recharge") == CategoryLabel.BANK_FEES
    assert categorize("North End Coffee") == CategoryLabel.BANK_FEES
