"""Bulk edit domain service."""

from typing import Iterable

from finance_wrapped.domain.entities import BulkUpdate
from finance_wrapped.domain.ledger import TransactionLedger
from finance_wrapped.logging_setup import get_logger

logger = get_logger(__name__)


class BulkEditService:
    """Applies one sparse update to many transactions."""

    def __init__(self, ledger: TransactionLedger):
        self.ledger = ledger

    def apply_bulk(self, selected_ids: Iterable[int], updates: BulkUpdate) -> int:
        """Overwrite the provided fields on every selected transaction.

        Fields left as placeholders (None or blank) are not touched. No
        cross-field checks are made, so e.g. a positive amount may end up on
        an expense.

        Args:
            selected_ids: IDs of the transactions to edit; unknown IDs are ignored
            updates: Fields to write

        Returns:
            Number of transactions written back
        """
        selected = set(selected_ids)
        changes = updates.changes()

        modified = 0
        for txn in self.ledger.list_transactions():
            if txn.id not in selected:
                continue
            for field_name, value in changes.items():
                setattr(txn, field_name, value)
            self.ledger.save(txn)
            modified += 1

        logger.info("Bulk edited %d transactions (%s)", modified, ", ".join(changes) or "no fields")
        return modified
