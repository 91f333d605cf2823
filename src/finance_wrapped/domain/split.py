"""Split transaction domain service."""

from decimal import Decimal
from typing import Sequence

from finance_wrapped.domain.entities import SPLIT_TOLERANCE, Transaction
from finance_wrapped.domain.errors import (
    AmountMismatchError,
    NotFoundError,
    ValidationError,
    parent_not_found,
)
from finance_wrapped.domain.ledger import TransactionLedger
from finance_wrapped.logging_setup import get_logger

logger = get_logger(__name__)


class SplitService:
    """Decomposes one transaction into linked child transactions."""

    def __init__(self, ledger: TransactionLedger):
        self.ledger = ledger

    def split(self, parent_id: int, children: Sequence[Transaction]) -> list[Transaction]:
        """Split a transaction into children whose amounts sum to the parent.

        The parent stays in the ledger, flagged with ``is_split``; children are
        appended with fresh IDs and ``parent_id`` pointing back at it.

        Args:
            parent_id: ID of the transaction to split
            children: New transactions making up the parent amount

        Returns:
            The appended children

        Raises:
            NotFoundError: If the parent doesn't exist
            ValidationError: If no children are given
            AmountMismatchError: If the children don't add up to the parent
                within 0.01
        """
        parent = self.ledger.get_by_id(parent_id)
        if parent is None:
            raise NotFoundError(parent_not_found(parent_id))
        if not children:
            raise ValidationError("At least one split is required")

        split_total = sum((child.amount for child in children), Decimal("0"))
        if abs(split_total - parent.amount) > SPLIT_TOLERANCE:
            raise AmountMismatchError(split_total, parent.amount)

        parent.is_split = True
        for child in children:
            child.parent_id = parent_id
        added = self.ledger.append_batch(children)
        logger.info(
            "Split transaction %d into %s", parent_id, ", ".join(str(c.id) for c in added)
        )
        return added

    def split_into_parts(
        self,
        parent_id: int,
        parts: Sequence[tuple[Decimal, str, str]],
    ) -> list[Transaction]:
        """Split a transaction into parts given as ``(amount, description, category)``.

        Every part inherits the parent's date and transaction type; an empty
        category falls back to the parent's.

        Raises:
            NotFoundError: If the parent doesn't exist
            AmountMismatchError: If the parts don't add up to the parent
        """
        parent = self.ledger.get_by_id(parent_id)
        if parent is None:
            raise NotFoundError(parent_not_found(parent_id))

        children = [
            Transaction(
                amount=amount,
                description=description,
                date=parent.date,
                category=category or parent.category,
                transaction_type=parent.transaction_type,
            )
            for amount, description, category in parts
        ]
        return self.split(parent_id, children)
