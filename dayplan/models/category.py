"""Category model and the registry of known categories."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from dayplan.constants import RECORD_SEPARATOR
from dayplan.exceptions import (
    CategoryConflictError,
    CategoryNotFoundError,
    DayplanError,
)

logger = logging.getLogger(__name__)


class Category(BaseModel):
    """A named category; higher priority wins overlap resolution.

    Equality and hashing are by value, so categories can key summaries.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    priority: int = 0

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names end up inside day file records."""
        if RECORD_SEPARATOR in v or "\n" in v:
            raise ValueError(
                f"category name {v!r} must not contain '{RECORD_SEPARATOR}' or newlines"
            )
        return v

    def __str__(self) -> str:
        return self.name


class CategoryRegistry:
    """Canonical categories by name.

    One name maps to exactly one priority; registering a conflicting
    priority for a known name is rejected.
    """

    def __init__(self, categories: list[Category] | None = None):
        self._by_name: dict[str, Category] = {}
        for category in categories or []:
            self.register(category)

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __iter__(self):
        return iter(sorted(self._by_name.values(), key=lambda c: c.name))

    def register(self, category: Category) -> Category:
        """Add a category, returning the canonical instance."""
        existing = self._by_name.get(category.name)
        if existing is not None:
            if existing.priority != category.priority:
                raise CategoryConflictError(
                    f"Category '{category.name}' already registered with priority "
                    f"{existing.priority}, refusing priority {category.priority}"
                )
            return existing
        self._by_name[category.name] = category
        return category

    def get(self, name: str) -> Category:
        """Strict lookup."""
        try:
            return self._by_name[name]
        except KeyError:
            raise CategoryNotFoundError(f"Category '{name}' not found") from None

    def resolve(self, name: str) -> Category:
        """Lookup that falls back to a zero-priority category for unknown names."""
        category = self._by_name.get(name)
        if category is None:
            logger.debug(f"Unknown category '{name}', using priority 0")
            return Category(name=name)
        return category

    @classmethod
    def load(cls, path: Path) -> "CategoryRegistry":
        """Load from a JSON list of {"name": ..., "priority": ...} objects.

        A missing file yields an empty registry.
        """
        if not path.exists():
            logger.info(f"No category file at {path}, starting with no categories")
            return cls()
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DayplanError(f"Cannot read category file {path}: {e}") from e
        try:
            data = json.loads(text)
            categories = TypeAdapter(list[Category]).validate_python(data)
        except (json.JSONDecodeError, PydanticValidationError) as e:
            raise DayplanError(f"Invalid category file {path}: {e}") from e
        logger.debug(f"Loaded {len(categories)} categories from {path}")
        return cls(categories)

    def save(self, path: Path) -> None:
        """Write the registry as a JSON list."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = [category.model_dump() for category in self]
        try:
            path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            raise DayplanError(f"Cannot write category file {path}: {e}") from e
