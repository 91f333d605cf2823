"""Shared pytest fixtures for finance-wrapped tests."""

import logging
from decimal import Decimal
from pathlib import Path

import pytest

from finance_wrapped import logging_setup
from finance_wrapped.database.json_db import JSONDatabase
from finance_wrapped.domain.entities import Transaction
from finance_wrapped.domain.store import Store


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI invocations."""
    yield
    logger = logging.getLogger("finance_wrapped")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logging_setup._CONFIGURED = False


@pytest.fixture
def data_dir(tmp_path):
    """Return an empty directory for the store files."""
    path = tmp_path / "finance-wrapped"
    path.mkdir()
    return path


@pytest.fixture
def temp_db(data_dir):
    """Create a JSON database in a temporary directory."""
    return JSONDatabase(data_dir)


@pytest.fixture
def store(temp_db):
    """Create a Store backed by the temporary database."""
    return Store(temp_db)


@pytest.fixture
def ledger(store):
    """Return the store's transaction ledger."""
    return store.ledger


@pytest.fixture
def make_transaction():
    """Build unsaved transactions with sensible defaults."""

    def _make(amount="-10.00", description="Test", date="2024-01-15", **kwargs):
        return Transaction(
            amount=Decimal(amount),
            description=description,
            date=date,
            category=kwargs.pop("category", "unsorted"),
            transaction_type=kwargs.pop("transaction_type", "expense"),
            **kwargs,
        )

    return _make


@pytest.fixture
def sample_transactions(store, make_transaction):
    """Save three transactions and return them."""
    txns = [
        make_transaction("-50.00", "Grocery Store", "2024-01-15"),
        make_transaction("1000.00", "Salary", "2024-01-31", transaction_type="income"),
        make_transaction("-20.00", "Cinema", "2024-02-03"),
    ]
    for txn in txns:
        store.save(txn)
    return txns


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
