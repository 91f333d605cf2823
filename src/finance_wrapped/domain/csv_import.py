"""CSV import domain services."""

from pathlib import Path
from typing import Optional

from finance_wrapped.domain.category import CategoryStore
from finance_wrapped.domain.csv_template import TemplateStore
from finance_wrapped.domain.entities import (
    STATUS_COMPLETED,
    STATUS_FAILED,
    STATUS_OVERRIDE,
    CSVTemplate,
    ImportResult,
    Transaction,
)
from finance_wrapped.domain.errors import (
    AmountParseError,
    DomainError,
    EmptyImportError,
    OverlapDetected,
    ValidationError,
)
from finance_wrapped.domain.ledger import TransactionLedger
from finance_wrapped.domain.overlap import OverlapDetector, extract_period
from finance_wrapped.domain.statement import StatementHistory
from finance_wrapped.logging_setup import get_logger
from finance_wrapped.utils.amount_parser import parse_amount
from finance_wrapped.utils.csv_tokenizer import parse_csv_line

logger = get_logger(__name__)


class CSVImportEngine:
    """Turns a CSV file into a batch of unsaved transactions."""

    def __init__(self, categories: CategoryStore):
        """Initialize CSV import engine.

        Args:
            categories: Category store supplying the default category
        """
        self.categories = categories

    def parse_row(self, fields: list[str], template: CSVTemplate) -> Transaction:
        """Build a transaction from one tokenized row.

        Raises:
            AmountParseError: If the amount column cannot be parsed
        """
        return Transaction(
            date=fields[template.date_column].strip('"'),
            description=fields[template.desc_column].strip('"'),
            amount=parse_amount(fields[template.amount_column].strip('"')),
            category=self.categories.default,
            transaction_type="expense",
        )

    def parse_file(self, csv_file_path: str | Path, template: CSVTemplate) -> list[Transaction]:
        """Parse a CSV file into transactions without touching the ledger.

        Short rows and rows with unparsable amounts are dropped; they never
        abort the batch.

        Args:
            csv_file_path: Path to CSV file
            template: Column mapping to apply

        Returns:
            List of transactions with no IDs assigned

        Raises:
            OSError: If the file cannot be read
            ValidationError: If the file is not valid UTF-8
            EmptyImportError: If no row produced a transaction
        """
        path = Path(csv_file_path)
        try:
            content = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise ValidationError(f"Could not decode CSV file {path}: {e}") from e

        lines = content.split("\n")
        start_line = 1 if template.has_header else 0

        transactions = []
        for line_num, raw_line in enumerate(lines[start_line:], start=start_line + 1):
            line = raw_line.strip()
            if not line:
                continue

            fields = parse_csv_line(line)
            if len(fields) <= template.max_column:
                logger.debug(
                    "Line %d: dropped, %d fields but column %d is required",
                    line_num,
                    len(fields),
                    template.max_column,
                )
                continue

            try:
                transactions.append(self.parse_row(fields, template))
            except AmountParseError as e:
                logger.debug("Line %d: dropped, %s", line_num, e)
                continue

        if not transactions:
            raise EmptyImportError(f"No valid transactions found in {path.name}")
        return transactions


class CSVImportService:
    """Sequences parsing, overlap detection, commit and statement recording."""

    def __init__(
        self,
        ledger: TransactionLedger,
        templates: TemplateStore,
        categories: CategoryStore,
        history: StatementHistory,
    ):
        """Initialize CSV import service.

        Args:
            ledger: Ledger receiving committed batches
            templates: Template store used to resolve the template name
            categories: Category store supplying the default category
            history: Statement log used for overlap detection and recording
        """
        self.ledger = ledger
        self.templates = templates
        self.history = history
        self.engine = CSVImportEngine(categories)
        self.detector = OverlapDetector(history)

    def import_csv(
        self,
        csv_file_path: str | Path,
        template_name: Optional[str] = None,
        override: bool = False,
    ) -> ImportResult:
        """Import transactions from a CSV file.

        Args:
            csv_file_path: Path to CSV file
            template_name: Template to use; defaults to the store's default
            override: Commit even if the period overlaps earlier imports

        Returns:
            ImportResult with the recorded statement and committed transactions

        Raises:
            NotFoundError: If the template doesn't exist
            OverlapDetected: If the period overlaps a completed statement and
                override is False. Nothing is written in that case.
            OSError: If the CSV file cannot be read
            EmptyImportError: If the file holds no valid transactions
        """
        template = self.templates.resolve(template_name)
        filename = Path(csv_file_path).name

        try:
            batch = self.engine.parse_file(csv_file_path, template)
        except (OSError, DomainError) as e:
            logger.warning("Import of %s failed: %s", filename, e)
            self.history.record(filename, "", "", template.name, 0, STATUS_FAILED)
            raise

        period_start, period_end = extract_period(batch)
        overlaps = self.detector.detect_overlap(period_start, period_end)
        if overlaps and not override:
            logger.warning(
                "Import of %s (%s to %s) overlaps statements %s",
                filename,
                period_start,
                period_end,
                ", ".join(str(s.id) for s in overlaps),
            )
            raise OverlapDetected(period_start, period_end, overlaps)

        committed = self.ledger.append_batch(batch)
        status = STATUS_OVERRIDE if overlaps else STATUS_COMPLETED
        statement = self.history.record(
            filename, period_start, period_end, template.name, len(committed), status
        )
        logger.info("Imported %d transactions from %s", len(committed), filename)
        return ImportResult(statement=statement, transactions=committed)
