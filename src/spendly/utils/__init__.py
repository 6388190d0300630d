"""Utility functions for spendly."""

from spendly.utils.date_parser import get_timezone, resolve_timestamp, parse_received_at
from spendly.utils.amount_parser import parse_amount

__all__ = ["get_timezone", "resolve_timestamp", "parse_received_at", "parse_amount"]
