"""Utility functions for finflow."""

from finflow.utils.date_parser import parse_date
from finflow.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
