"""Domain model entities for finance-wrapped.

These are plain data classes representing ledger concepts, independent of the
JSON layout used on disk. Conversion lives in ``finance_wrapped.database.mappers``.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

TRANSACTION_TYPES = ("income", "expense", "transfer")

STATUS_COMPLETED = "completed"
STATUS_FAILED = "failed"
STATUS_OVERRIDE = "override"
STATEMENT_STATUSES = (STATUS_COMPLETED, STATUS_FAILED, STATUS_OVERRIDE)

# Absolute tolerance when comparing split totals against the parent amount
SPLIT_TOLERANCE = Decimal("0.01")


@dataclass
class Transaction:
    """Ledger transaction.

    Mutable so the ledger can hand out live records for in-place updates.
    ``id`` stays None until the ledger assigns one.
    """

    amount: Decimal
    description: str
    date: str
    category: str = ""
    transaction_type: str = "expense"
    id: Optional[int] = None
    parent_id: Optional[int] = None
    is_split: bool = False


@dataclass(frozen=True)
class CSVTemplate:
    """Column-index mapping for one bank's CSV export."""

    name: str
    date_column: int
    amount_column: int
    desc_column: int
    has_header: bool = False

    @property
    def max_column(self) -> int:
        """Highest column index the template reads."""
        return max(self.date_column, self.amount_column, self.desc_column)


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    name: str
    display_name: str


@dataclass(frozen=True)
class BankStatement:
    """Record of one CSV import attempt."""

    id: int
    filename: str
    import_date: str
    period_start: str
    period_end: str
    template_used: str
    tx_count: int
    status: str


@dataclass(frozen=True)
class BulkUpdate:
    """Sparse field update applied to several transactions.

    None (or a blank string) leaves the field untouched.
    """

    amount: Optional[Decimal] = None
    description: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    transaction_type: Optional[str] = None

    def changes(self) -> dict[str, object]:
        """Return only the fields that should be written."""
        values = {
            "amount": self.amount,
            "description": self.description,
            "date": self.date,
            "category": self.category,
            "transaction_type": self.transaction_type,
        }
        result = {}
        for name, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and not value.strip():
                continue
            result[name] = value
        return result


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a committed CSV import."""

    statement: BankStatement
    transactions: list[Transaction] = field(default_factory=list)

    @property
    def imported(self) -> int:
        return len(self.transactions)
