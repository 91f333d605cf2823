"""CSV template domain service."""

from typing import Optional

from finance_wrapped.database.base import Database
from finance_wrapped.domain.entities import CSVTemplate
from finance_wrapped.domain.errors import (
    NotFoundError,
    ValidationError,
    duplicate_name,
    template_not_found,
)
from finance_wrapped.logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPLATES = [
    CSVTemplate(name="Bank1", date_column=0, amount_column=1, desc_column=4, has_header=False),
    CSVTemplate(name="Bank2", date_column=0, amount_column=5, desc_column=2, has_header=True),
]
DEFAULT_TEMPLATE_NAME = "Bank1"


class TemplateStore:
    """Service for managing CSV templates."""

    def __init__(self, db: Database):
        """Initialize template store, bootstrapping defaults on first run.

        Args:
            db: Database instance
        """
        self.db = db
        loaded = db.load_templates()
        if loaded is None:
            logger.info("No CSV templates found, creating defaults")
            self._templates = list(DEFAULT_TEMPLATES)
            self._default = DEFAULT_TEMPLATE_NAME
            self._persist()
        else:
            self._templates, self._default = loaded

    def _persist(self) -> None:
        self.db.save_templates(self._templates, self._default)

    @property
    def default(self) -> str:
        """Name of the default template (may be empty)."""
        return self._default

    def list_templates(self) -> list[CSVTemplate]:
        """List templates in creation order."""
        return list(self._templates)

    def get_template(self, name: str) -> Optional[CSVTemplate]:
        """Get template by name.

        Args:
            name: Template name

        Returns:
            Template entity or None if not found
        """
        for template in self._templates:
            if template.name == name:
                return template
        return None

    def resolve(self, name: Optional[str] = None) -> CSVTemplate:
        """Resolve the template an import should use.

        Falls back to the default template, then to the first template.

        Raises:
            NotFoundError: If no matching template exists
        """
        if not name:
            name = self._default
        if not name and self._templates:
            name = self._templates[0].name

        template = self.get_template(name) if name else None
        if template is None:
            raise NotFoundError(template_not_found(name or ""))
        return template

    def add_template(
        self,
        name: str,
        date_column: int,
        amount_column: int,
        desc_column: int,
        has_header: bool = False,
    ) -> CSVTemplate:
        """Create a new template and make it the default.

        Raises:
            ValidationError: If the name is empty or taken, or a column is negative
        """
        name = name.strip()
        if not name:
            raise ValidationError("Template name is required")
        if self.get_template(name) is not None:
            raise ValidationError(duplicate_name("Template", name))
        for label, column in (
            ("date", date_column),
            ("amount", amount_column),
            ("description", desc_column),
        ):
            if column < 0:
                raise ValidationError(f"Invalid {label} column {column}: must be 0 or greater")

        template = CSVTemplate(
            name=name,
            date_column=date_column,
            amount_column=amount_column,
            desc_column=desc_column,
            has_header=has_header,
        )
        self._templates.append(template)
        self._default = name
        self._persist()
        logger.info("Created CSV template '%s'", name)
        return template

    def set_default(self, name: str) -> None:
        """Mark a template as the default.

        Raises:
            NotFoundError: If the template does not exist
        """
        if self.get_template(name) is None:
            raise NotFoundError(template_not_found(name))
        self._default = name
        self._persist()
