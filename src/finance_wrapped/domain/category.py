"""Category domain service."""

from typing import Optional

from finance_wrapped.database.base import Database
from finance_wrapped.domain.entities import Category
from finance_wrapped.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    duplicate_name,
)
from finance_wrapped.logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_CATEGORIES = [
    Category(name="unsorted", display_name="Unsorted"),
    Category(name="sorted", display_name="Sorted"),
]
DEFAULT_CATEGORY_NAME = "unsorted"


class CategoryStore:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category store, bootstrapping defaults on first run.

        Args:
            db: Database instance
        """
        self.db = db
        loaded = db.load_categories()
        if loaded is None:
            logger.info("No categories found, creating defaults")
            self._categories = list(DEFAULT_CATEGORIES)
            self._default = DEFAULT_CATEGORY_NAME
            self._persist()
        else:
            self._categories, self._default = loaded

    def _persist(self) -> None:
        self.db.save_categories(self._categories, self._default)

    @property
    def default(self) -> str:
        """Name of the default category.

        Not guaranteed to match an existing category; a dangling default is
        still stamped onto imported transactions.
        """
        return self._default

    def list_categories(self) -> list[Category]:
        """List categories in creation order."""
        return list(self._categories)

    def get_category(self, name: str) -> Optional[Category]:
        """Get category by name, or None if not found."""
        for category in self._categories:
            if category.name == name:
                return category
        return None

    def add_category(self, name: str, display_name: str = "") -> Category:
        """Create a category.

        Args:
            name: Unique category key
            display_name: Label shown to the user (defaults to the name)

        Raises:
            ValidationError: If the name is empty or already exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name is required")
        if self.get_category(name) is not None:
            raise ValidationError(duplicate_name("Category", name))

        category = Category(name=name, display_name=display_name.strip() or name)
        self._categories.append(category)
        self._persist()
        logger.info("Created category '%s'", name)
        return category

    def set_default(self, name: str) -> None:
        """Mark a category as the default for imported transactions.

        Raises:
            NotFoundError: If the category does not exist
        """
        if self.get_category(name) is None:
            raise NotFoundError(category_not_found(name))
        self._default = name
        self._persist()
