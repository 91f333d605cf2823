"""JSON file database implementation."""

import json
import os
from decimal import InvalidOperation
from pathlib import Path
from typing import Any, Optional

from finance_wrapped.database.base import Database
from finance_wrapped.database.mappers import (
    backup_transaction_from_dict,
    category_from_dict,
    category_to_dict,
    statement_from_dict,
    statement_to_dict,
    template_from_dict,
    template_to_dict,
    transaction_from_dict,
    transaction_to_dict,
)
from finance_wrapped.domain.entities import (
    BankStatement,
    Category,
    CSVTemplate,
    Transaction,
)
from finance_wrapped.domain.errors import (
    BackupParseError,
    BackupReadError,
    StoreLoadError,
)
from finance_wrapped.logging_setup import get_logger

logger = get_logger(__name__)

TRANSACTIONS_FILE = "transactions.json"
TEMPLATES_FILE = "csv-templates.json"
CATEGORIES_FILE = "categories.json"
STATEMENTS_FILE = "bank-statements.json"
BACKUP_FILE = "backup.json"

# Errors raised while turning decoded JSON into entities
_DECODE_ERRORS = (KeyError, TypeError, ValueError, InvalidOperation, AttributeError)


class JSONDatabase(Database):
    """Stores each collection as an indented JSON document in one directory.

    Writes go to a sibling ``.tmp`` file that is then renamed over the
    target, so a crash mid-write leaves the previous document intact.
    """

    def __init__(self, data_dir: str | Path):
        """Initialize JSON database.

        Args:
            data_dir: Directory holding the store files. Created if missing.
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.transactions_path = self.data_dir / TRANSACTIONS_FILE
        self.templates_path = self.data_dir / TEMPLATES_FILE
        self.categories_path = self.data_dir / CATEGORIES_FILE
        self.statements_path = self.data_dir / STATEMENTS_FILE
        self.backup_path = self.data_dir / BACKUP_FILE

    def _read_document(self, path: Path) -> Optional[Any]:
        """Read and decode a store file, or return None if it does not exist."""
        if not path.exists():
            logger.debug("Store file %s does not exist", path)
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StoreLoadError(f"Could not load {path}: {e}") from e

    def _write_document(self, path: Path, payload: Any) -> None:
        """Encode and atomically replace a store file."""
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp, path)
        logger.debug("Wrote %s", path)

    def _expect(self, path: Path, document: Any, kind: type) -> Any:
        if not isinstance(document, kind):
            raise StoreLoadError(
                f"Could not load {path}: expected a JSON {'array' if kind is list else 'object'}"
            )
        return document

    # Transaction operations
    def load_transactions(self) -> Optional[list[Transaction]]:
        """Load all transactions, or None if none were ever saved."""
        document = self._read_document(self.transactions_path)
        if document is None:
            return None
        items = self._expect(self.transactions_path, document, list)
        try:
            return [transaction_from_dict(item) for item in items]
        except _DECODE_ERRORS as e:
            raise StoreLoadError(f"Could not load {self.transactions_path}: {e}") from e

    def save_transactions(self, transactions: list[Transaction]) -> None:
        """Replace the stored transactions."""
        self._write_document(
            self.transactions_path, [transaction_to_dict(txn) for txn in transactions]
        )

    # CSV template operations
    def load_templates(self) -> Optional[tuple[list[CSVTemplate], str]]:
        """Load templates and the default template name."""
        document = self._read_document(self.templates_path)
        if document is None:
            return None
        data = self._expect(self.templates_path, document, dict)
        try:
            templates = [template_from_dict(item) for item in data.get("templates") or []]
            return templates, str(data.get("default", ""))
        except _DECODE_ERRORS as e:
            raise StoreLoadError(f"Could not load {self.templates_path}: {e}") from e

    def save_templates(self, templates: list[CSVTemplate], default: str) -> None:
        """Replace the stored templates."""
        self._write_document(
            self.templates_path,
            {"templates": [template_to_dict(t) for t in templates], "default": default},
        )

    # Category operations
    def load_categories(self) -> Optional[tuple[list[Category], str]]:
        """Load categories and the default category name."""
        document = self._read_document(self.categories_path)
        if document is None:
            return None
        data = self._expect(self.categories_path, document, dict)
        try:
            categories = [category_from_dict(item) for item in data.get("categories") or []]
            return categories, str(data.get("default", ""))
        except _DECODE_ERRORS as e:
            raise StoreLoadError(f"Could not load {self.categories_path}: {e}") from e

    def save_categories(self, categories: list[Category], default: str) -> None:
        """Replace the stored categories."""
        self._write_document(
            self.categories_path,
            {"categories": [category_to_dict(c) for c in categories], "default": default},
        )

    # Bank statement operations
    def load_statements(self) -> Optional[tuple[list[BankStatement], int]]:
        """Load the statement log and the next statement ID."""
        document = self._read_document(self.statements_path)
        if document is None:
            return None
        data = self._expect(self.statements_path, document, dict)
        try:
            statements = [statement_from_dict(item) for item in data.get("statements") or []]
            return statements, int(data.get("nextId", 1))
        except _DECODE_ERRORS as e:
            raise StoreLoadError(f"Could not load {self.statements_path}: {e}") from e

    def save_statements(self, statements: list[BankStatement], next_id: int) -> None:
        """Replace the stored statement log."""
        self._write_document(
            self.statements_path,
            {"statements": [statement_to_dict(s) for s in statements], "nextId": next_id},
        )

    # Backup operations
    def read_backup(self, backup_path: Optional[Path] = None) -> list[Transaction]:
        """Read transactions from a flat backup file.

        Returned transactions have no IDs assigned.

        Raises:
            BackupReadError: If the file cannot be read
            BackupParseError: If the file cannot be decoded
        """
        path = Path(backup_path) if backup_path is not None else self.backup_path
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise BackupReadError(f"Failed to read backup file: {e}") from e

        try:
            document = json.loads(raw)
            if not isinstance(document, dict):
                raise TypeError("expected a JSON object")
            items = document.get("transactions") or []
            if not isinstance(items, list):
                raise TypeError("'transactions' must be an array")
            return [backup_transaction_from_dict(item) for item in items]
        except _DECODE_ERRORS as e:
            # JSONDecodeError is a ValueError
            raise BackupParseError(f"Failed to parse backup file: {e}") from e
