"""Backup restore domain service."""

from pathlib import Path
from typing import Optional

from finance_wrapped.database.base import Database
from finance_wrapped.domain.ledger import TransactionLedger
from finance_wrapped.logging_setup import get_logger

logger = get_logger(__name__)


class BackupRestoreService:
    """Replaces the ledger with the contents of a flat backup file."""

    def __init__(self, db: Database, ledger: TransactionLedger):
        self.db = db
        self.ledger = ledger

    def restore_from_backup(self, backup_path: Optional[str | Path] = None) -> int:
        """Replace every ledger transaction with those in the backup.

        This is destructive: existing transactions are discarded, not merged.
        Restored transactions get IDs 1..n in file order.

        Args:
            backup_path: Backup file; defaults to backup.json in the data directory

        Returns:
            Number of restored transactions

        Raises:
            BackupReadError: If the backup cannot be read
            BackupParseError: If the backup cannot be decoded
        """
        restored = self.db.read_backup(Path(backup_path) if backup_path is not None else None)
        for transaction_id, txn in enumerate(restored, start=1):
            txn.id = transaction_id

        self.ledger.replace_all(restored)
        logger.info("Restored %d transactions from backup", len(restored))
        return len(restored)
