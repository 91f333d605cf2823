"""Utility functions for finance-wrapped."""

from finance_wrapped.utils.amount_parser import parse_amount
from finance_wrapped.utils.csv_tokenizer import parse_csv_line
from finance_wrapped.utils.date_parser import parse_date, to_ledger_date

__all__ = ["parse_amount", "parse_csv_line", "parse_date", "to_ledger_date"]
