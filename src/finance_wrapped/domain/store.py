"""Store facade wiring the ledger and its collaborators together.

One Store is built per process from an explicit Database and handed to
whatever presents it (the CLI here). Nothing is global.
"""

from pathlib import Path
from typing import Iterable, Optional, Sequence

from finance_wrapped.database.base import Database
from finance_wrapped.domain.backup import BackupRestoreService
from finance_wrapped.domain.bulk_edit import BulkEditService
from finance_wrapped.domain.category import CategoryStore
from finance_wrapped.domain.csv_import import CSVImportService
from finance_wrapped.domain.csv_template import TemplateStore
from finance_wrapped.domain.entities import (
    BankStatement,
    BulkUpdate,
    Category,
    CSVTemplate,
    ImportResult,
    Transaction,
)
from finance_wrapped.domain.errors import (
    NotFoundError,
    statement_not_found,
    transaction_not_found,
)
from finance_wrapped.domain.ledger import TransactionLedger
from finance_wrapped.domain.split import SplitService
from finance_wrapped.domain.statement import StatementHistory


class Store:
    """Entry point for every ledger operation."""

    def __init__(self, db: Database):
        """Load every store document.

        Args:
            db: Database instance

        Raises:
            StoreLoadError: If any store file exists but is corrupt
        """
        self.db = db
        self.templates = TemplateStore(db)
        self.categories = CategoryStore(db)
        self.statements = StatementHistory(db)
        self.ledger = TransactionLedger(db)

        self.import_service = CSVImportService(
            self.ledger, self.templates, self.categories, self.statements
        )
        self.split_service = SplitService(self.ledger)
        self.bulk_edit_service = BulkEditService(self.ledger)
        self.backup_service = BackupRestoreService(db, self.ledger)

    # Ledger operations
    def list_transactions(self) -> list[Transaction]:
        return self.ledger.list_transactions()

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        return self.ledger.get_by_id(transaction_id)

    def require_transaction(self, transaction_id: int) -> Transaction:
        """Get a transaction or raise NotFoundError."""
        txn = self.ledger.get_by_id(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def save(self, txn: Transaction) -> int:
        return self.ledger.save(txn)

    def delete(self, transaction_id: int) -> None:
        self.ledger.delete(transaction_id)

    def split(self, parent_id: int, children: Sequence[Transaction]) -> list[Transaction]:
        return self.split_service.split(parent_id, children)

    def apply_bulk(self, selected_ids: Iterable[int], updates: BulkUpdate) -> int:
        return self.bulk_edit_service.apply_bulk(selected_ids, updates)

    def import_from_csv(
        self,
        csv_file_path: str | Path,
        template_name: Optional[str] = None,
        override: bool = False,
    ) -> ImportResult:
        return self.import_service.import_csv(csv_file_path, template_name, override)

    def restore_from_backup(self, backup_path: Optional[str | Path] = None) -> int:
        return self.backup_service.restore_from_backup(backup_path)

    # Read access for display
    def list_templates(self) -> list[CSVTemplate]:
        return self.templates.list_templates()

    def list_categories(self) -> list[Category]:
        return self.categories.list_categories()

    def list_statements(self) -> list[BankStatement]:
        return self.statements.list_statements()

    def require_statement(self, statement_id: int) -> BankStatement:
        """Get a bank statement or raise NotFoundError."""
        statement = self.statements.get_statement(statement_id)
        if statement is None:
            raise NotFoundError(statement_not_found(statement_id))
        return statement
