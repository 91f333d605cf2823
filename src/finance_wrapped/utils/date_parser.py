"""Date parsing utilities for manually entered dates.

Ledger dates are stored as ISO strings and compared lexicographically, so
everything typed by a user is normalized to ``YYYY-MM-DD`` here before it
reaches the store.
"""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative words "today", "yesterday", "tomorrow", plus "last month" /
    "this month" / "last year" / "this year" (first day of that period).

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def to_ledger_date(date_str: str) -> str:
    """Parse a user-entered date and return the ISO string stored in the ledger."""
    return parse_date(date_str).isoformat()


def get_date_range(period: str) -> tuple[str, str]:
    """Get ISO start and end dates for a named period.

    Args:
        period: One of this-month, last-month, this-year, last-year

    Returns:
        Tuple of (start_date, end_date) as ISO strings

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-month":
        start_date, end_date = today.replace(day=1), today
    elif period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
        # Last day of last month
        end_date = today.replace(day=1) - timedelta(days=1)
    elif period == "this-year":
        start_date, end_date = today.replace(month=1, day=1), today
    elif period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        end_date = today.replace(month=1, day=1) - timedelta(days=1)
    else:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: this-month, last-month, this-year, last-year"
        )

    return start_date.isoformat(), end_date.isoformat()
