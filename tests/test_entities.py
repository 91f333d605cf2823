"""Tests for domain entities."""

from decimal import Decimal

import pytest

from finance_wrapped.domain.entities import (
    BankStatement,
    BulkUpdate,
    Category,
    CSVTemplate,
    Transaction,
)


class TestTransaction:
    """Tests for Transaction entity."""

    def test_defaults(self):
        txn = Transaction(amount=Decimal("-1.00"), description="x", date="2024-01-01")
        assert txn.id is None
        assert txn.parent_id is None
        assert txn.is_split is False
        assert txn.transaction_type == "expense"

    def test_transaction_is_mutable(self):
        """Ledger handles are updated in place."""
        txn = Transaction(amount=Decimal("-1.00"), description="x", date="2024-01-01")
        txn.is_split = True
        assert txn.is_split


class TestCSVTemplate:
    """Tests for CSVTemplate entity."""

    def test_max_column(self):
        template = CSVTemplate(name="T", date_column=0, amount_column=1, desc_column=4)
        assert template.max_column == 4

    def test_columns_need_not_be_distinct(self):
        template = CSVTemplate(name="T", date_column=2, amount_column=2, desc_column=2)
        assert template.max_column == 2

    def test_template_immutability(self):
        template = CSVTemplate(name="T", date_column=0, amount_column=1, desc_column=2)
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            template.name = "Other"


def test_category_and_statement_equality():
    assert Category("food", "Food") == Category("food", "Food")
    stmt = BankStatement(1, "a.csv", "0", "2024-01-01", "2024-01-31", "Bank1", 3, "completed")
    assert stmt == BankStatement(1, "a.csv", "0", "2024-01-01", "2024-01-31", "Bank1", 3, "completed")


class TestBulkUpdate:
    """Tests for BulkUpdate placeholder handling."""

    def test_empty_update_has_no_changes(self):
        assert BulkUpdate().changes() == {}

    def test_blank_strings_are_placeholders(self):
        update = BulkUpdate(description="   ", category="", date="2024-05-01")
        assert update.changes() == {"date": "2024-05-01"}

    def test_zero_amount_is_a_real_value(self):
        assert BulkUpdate(amount=Decimal("0")).changes() == {"amount": Decimal("0")}
