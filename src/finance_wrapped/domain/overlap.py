"""Import period derivation and overlap detection.

Dates are compared as plain strings. This is only meaningful for sortable
formats such as ``YYYY-MM-DD``; with ``MM/DD/YYYY`` the derived period and
the overlap checks are silently wrong.
"""

from typing import Iterable

from finance_wrapped.domain.entities import STATUS_COMPLETED, BankStatement, Transaction
from finance_wrapped.domain.statement import StatementHistory


def extract_period(transactions: Iterable[Transaction]) -> tuple[str, str]:
    """Return the (earliest, latest) date string of a batch.

    An empty batch yields ("", "").
    """
    dates = [txn.date for txn in transactions]
    if not dates:
        return "", ""
    return min(dates), max(dates)


def periods_overlap(start: str, end: str, other_start: str, other_end: str) -> bool:
    """Check whether two closed date intervals intersect."""
    return start <= other_end and end >= other_start


class OverlapDetector:
    """Checks candidate import periods against completed statements."""

    def __init__(self, history: StatementHistory):
        self.history = history

    def detect_overlap(self, period_start: str, period_end: str) -> list[BankStatement]:
        """Find completed statements whose period intersects the given one.

        Failed and override imports are not considered.
        """
        return [
            statement
            for statement in self.history.list_statements()
            if statement.status == STATUS_COMPLETED
            and periods_overlap(
                period_start, period_end, statement.period_start, statement.period_end
            )
        ]
