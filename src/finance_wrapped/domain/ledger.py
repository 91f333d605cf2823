"""Transaction ledger domain service."""

from typing import Iterable, Optional

from finance_wrapped.database.base import Database
from finance_wrapped.domain.entities import Transaction
from finance_wrapped.logging_setup import get_logger

logger = get_logger(__name__)


class TransactionLedger:
    """In-memory transaction collection backed by a single JSON document.

    Every mutation rewrites the whole document.
    """

    def __init__(self, db: Database):
        """Initialize the ledger and load stored transactions.

        Args:
            db: Database instance

        Raises:
            StoreLoadError: If the transactions file exists but is corrupt
        """
        self.db = db
        loaded = db.load_transactions()
        self._transactions: list[Transaction] = loaded if loaded is not None else []
        self.next_id = self._calculate_next_id()
        logger.debug(
            "Loaded %d transactions (next id %d)", len(self._transactions), self.next_id
        )

    def _calculate_next_id(self) -> int:
        return max((txn.id or 0 for txn in self._transactions), default=0) + 1

    def _assign_id(self, txn: Transaction) -> None:
        txn.id = self.next_id
        self.next_id += 1

    def _persist(self) -> None:
        self.db.save_transactions(self._transactions)

    def list_transactions(self) -> list[Transaction]:
        """List transactions in insertion order."""
        return list(self._transactions)

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Get the live transaction record by ID.

        Changes made to the returned object are persisted on the next write.
        """
        for txn in self._transactions:
            if txn.id == transaction_id:
                return txn
        return None

    def children_of(self, transaction_id: int) -> list[Transaction]:
        """List transactions split off from the given parent."""
        return [txn for txn in self._transactions if txn.parent_id == transaction_id]

    def save(self, txn: Transaction) -> int:
        """Insert or replace a transaction.

        A transaction whose ID matches an existing record replaces it in place;
        anything else is appended with a freshly assigned ID.

        Args:
            txn: Transaction to save

        Returns:
            The transaction's ID
        """
        for index, existing in enumerate(self._transactions):
            if txn.id is not None and existing.id == txn.id:
                self._transactions[index] = txn
                break
        else:
            self._assign_id(txn)
            self._transactions.append(txn)

        self._persist()
        return txn.id

    def append_batch(self, transactions: Iterable[Transaction]) -> list[Transaction]:
        """Assign fresh IDs to new transactions and append them with one write.

        Args:
            transactions: New transactions; any existing ``id`` is overwritten

        Returns:
            The appended transactions
        """
        batch = list(transactions)
        for txn in batch:
            self._assign_id(txn)
        self._transactions.extend(batch)
        self._persist()
        return batch

    def delete(self, transaction_id: int) -> None:
        """Delete the first transaction with the given ID.

        Missing IDs are ignored. Transactions split off from the deleted one
        keep their ``parent_id``.
        """
        for index, txn in enumerate(self._transactions):
            if txn.id == transaction_id:
                del self._transactions[index]
                break
        self._persist()

    def replace_all(self, transactions: list[Transaction]) -> None:
        """Swap the whole collection and persist it."""
        self._transactions = list(transactions)
        self.next_id = self._calculate_next_id()
        self._persist()
