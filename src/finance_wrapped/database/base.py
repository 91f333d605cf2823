"""Abstract database interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from finance_wrapped.domain.entities import (
    BankStatement,
    Category,
    CSVTemplate,
    Transaction,
)


class Database(ABC):
    """Abstract persistence interface for finance-wrapped.

    Every document is loaded and saved whole. Load methods return None when the
    backing document does not exist yet so callers can bootstrap defaults.
    """

    # Transaction operations
    @abstractmethod
    def load_transactions(self) -> Optional[list[Transaction]]:
        """Load all transactions, or None if none were ever saved."""
        pass

    @abstractmethod
    def save_transactions(self, transactions: list[Transaction]) -> None:
        """Replace the stored transactions."""
        pass

    # CSV template operations
    @abstractmethod
    def load_templates(self) -> Optional[tuple[list[CSVTemplate], str]]:
        """Load templates and the default template name."""
        pass

    @abstractmethod
    def save_templates(self, templates: list[CSVTemplate], default: str) -> None:
        """Replace the stored templates."""
        pass

    # Category operations
    @abstractmethod
    def load_categories(self) -> Optional[tuple[list[Category], str]]:
        """Load categories and the default category name."""
        pass

    @abstractmethod
    def save_categories(self, categories: list[Category], default: str) -> None:
        """Replace the stored categories."""
        pass

    # Bank statement operations
    @abstractmethod
    def load_statements(self) -> Optional[tuple[list[BankStatement], int]]:
        """Load the statement log and the next statement ID."""
        pass

    @abstractmethod
    def save_statements(self, statements: list[BankStatement], next_id: int) -> None:
        """Replace the stored statement log."""
        pass

    # Backup operations
    @abstractmethod
    def read_backup(self, backup_path: Optional[Path] = None) -> list[Transaction]:
        """Read transactions from a flat backup file.

        Returned transactions have no IDs assigned.

        Raises:
            BackupReadError: If the file cannot be read
            BackupParseError: If the file cannot be decoded
        """
        pass
