"""Data model for cheat sheet topics."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from sql_cheatsheet.utils.errors import InvalidInputError


class Category(str, Enum):
    """Grouping label for related topic entries."""

    DDL = "DDL"
    DML = "DML"
    DQL = "DQL"
    DCL = "DCL"
    TCL = "TCL"
    CLAUSES = "Clauses"
    JOINS = "Joins"
    CONSTRAINTS = "Constraints"
    DATA_TYPES = "Data Types"
    FUNCTIONS = "Functions"
    OPTIMIZATION = "Optimization"

    @classmethod
    def parse(cls, value: "str | Category") -> Optional["Category"]:
        """Resolve a category from its value or member name.

        Matching ignores case and treats spaces, dashes and underscores alike,
        so "data types", "DATA_TYPES" and "Data-Types" all resolve.

        Args:
            value: Category instance or label

        Returns:
            The matching Category, or None if the label is unknown
        """
        if isinstance(value, cls):
            return value

        key = _label_key(str(value))
        for member in cls:
            if key in (_label_key(member.value), _label_key(member.name)):
                return member
        return None


def _label_key(label: str) -> str:
    return "".join(ch for ch in label.lower() if ch.isalnum())


@dataclass(frozen=True)
class TopicEntry:
    """One documented SQL concept.

    Attributes:
        category: Category the entry belongs to
        title: Display title, unique within its category
        description: Prose explanation
        example: Example SQL code block
        keywords: Extra lookup aliases besides the title
    """

    category: Category
    title: str
    description: str
    example: str = ""
    keywords: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        category = Category.parse(self.category)
        if category is None:
            raise InvalidInputError(f"Unknown category '{self.category}' for topic '{self.title}'")
        if not isinstance(self.title, str) or not self.title.strip():
            raise InvalidInputError("Topic title must be a non-empty string")
        if not isinstance(self.description, str) or not self.description.strip():
            raise InvalidInputError(f"Topic '{self.title}' has no description")

        keywords = self.keywords
        if isinstance(keywords, str):
            keywords = (keywords,)
        if not isinstance(keywords, (tuple, list)) or not all(
            isinstance(keyword, str) for keyword in keywords
        ):
            raise InvalidInputError(f"Keywords of topic '{self.title}' must be strings")

        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "keywords", tuple(keywords))

    def lookup_keys(self) -> tuple[str, ...]:
        """Title followed by aliases, as given."""
        return (self.title, *self.keywords)
