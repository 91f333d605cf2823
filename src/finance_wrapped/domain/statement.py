"""Bank statement history domain service."""

import time
from typing import Optional

from finance_wrapped.database.base import Database
from finance_wrapped.domain.entities import STATEMENT_STATUSES, BankStatement
from finance_wrapped.domain.errors import ValidationError
from finance_wrapped.logging_setup import get_logger

logger = get_logger(__name__)


class StatementHistory:
    """Append-only log of CSV import attempts.

    Statements are never edited or removed once recorded; the log is what
    later imports are checked against for overlapping periods.
    """

    def __init__(self, db: Database):
        """Initialize statement history, creating an empty log on first run.

        Args:
            db: Database instance
        """
        self.db = db
        loaded = db.load_statements()
        if loaded is None:
            self._statements: list[BankStatement] = []
            self.next_id = 1
            self._persist()
        else:
            self._statements, self.next_id = loaded

    def _persist(self) -> None:
        self.db.save_statements(self._statements, self.next_id)

    def list_statements(self) -> list[BankStatement]:
        """List statements in the order they were recorded."""
        return list(self._statements)

    def get_statement(self, statement_id: int) -> Optional[BankStatement]:
        """Get statement by ID, or None if not found."""
        for statement in self._statements:
            if statement.id == statement_id:
                return statement
        return None

    def record(
        self,
        filename: str,
        period_start: str,
        period_end: str,
        template_used: str,
        tx_count: int,
        status: str,
    ) -> BankStatement:
        """Append a statement to the log.

        Args:
            filename: Base name of the imported file
            period_start: Earliest transaction date in the batch
            period_end: Latest transaction date in the batch
            template_used: Name of the CSV template
            tx_count: Number of transactions in the batch
            status: One of completed, failed, override

        Returns:
            The recorded statement

        Raises:
            ValidationError: If status is not recognized
        """
        if status not in STATEMENT_STATUSES:
            raise ValidationError(
                f"Invalid statement status '{status}'. "
                f"Must be one of: {', '.join(STATEMENT_STATUSES)}"
            )

        statement = BankStatement(
            id=self.next_id,
            filename=filename,
            import_date=str(int(time.time())),
            period_start=period_start,
            period_end=period_end,
            template_used=template_used,
            tx_count=tx_count,
            status=status,
        )
        self._statements.append(statement)
        self.next_id += 1
        self._persist()
        logger.info(
            "Recorded %s statement %d for %s (%s to %s, %d transactions)",
            status,
            statement.id,
            filename,
            period_start,
            period_end,
            tx_count,
        )
        return statement
