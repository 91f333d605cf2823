"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class AmountParseError(ValidationError):
    """An amount string could not be converted to a number."""


class EmptyImportError(ValidationError):
    """A CSV file produced no valid transactions."""


class AmountMismatchError(ValidationError):
    """Split amounts do not add up to the parent transaction amount."""

    def __init__(self, split_total: Decimal, parent_amount: Decimal):
        self.split_total = split_total
        self.parent_amount = parent_amount
        super().__init__(
            f"Split amounts ({split_total:.2f}) don't match parent ({parent_amount:.2f})"
        )


class StoreLoadError(DomainError):
    """A store file exists but could not be read or decoded."""


class BackupReadError(DomainError):
    """The backup file could not be read."""


class BackupParseError(DomainError):
    """The backup file could not be decoded."""


class OverlapDetected(Exception):
    """Import period intersects previously completed statements.

    This is a control signal rather than a failure: nothing has been written
    yet, and the caller decides whether to cancel or re-run the import with
    ``override=True``.
    """

    def __init__(self, period_start: str, period_end: str, statements: list):
        self.period_start = period_start
        self.period_end = period_end
        self.statements = statements
        super().__init__(
            f"Import period {period_start} to {period_end} overlaps "
            f"{len(statements)} previously imported statement"
            f"{'s' if len(statements) != 1 else ''}"
        )


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def parent_not_found(transaction_id: int) -> str:
    """Return message for missing split parent."""
    return f"Parent transaction {transaction_id} not found"


def template_not_found(name: str) -> str:
    """Return message for missing CSV template."""
    return f"CSV template '{name}' not found"


def category_not_found(name: str) -> str:
    """Return message for missing category."""
    return f"Category '{name}' not found"


def statement_not_found(statement_id: int) -> str:
    """Return message for missing bank statement."""
    return f"Bank statement {statement_id} not found"


def duplicate_name(kind: str, name: str) -> str:
    """Return message for a uniqueness violation on a named record."""
    return f"{kind} '{name}' already exists"
