"""Content store holding the cheat sheet topic entries.

This module provides the read-only collection of topic entries that the
renderer, lookup index, CLI and API all read from.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

import yaml

from sql_cheatsheet.content.models import Category, TopicEntry
from sql_cheatsheet.utils.errors import DuplicateTopicError, InvalidInputError

logger = logging.getLogger(__name__)

_SQL_BLOCK = re.compile(r"```(?:sql)?[ \t]*\n(.*?)```", re.DOTALL | re.IGNORECASE)


class ContentStore:
    """Ordered, read-only collection of topic entries.

    The store is built once from a fixed table and never mutated afterwards.
    Titles must be unique within a category.

    Example:
        store = ContentStore.default()
        joins = store.list_by_category("Joins")
        # Returns: [TopicEntry(title="JOIN", ...), TopicEntry(title="INNER JOIN", ...)]
    """

    def __init__(self, entries: Iterable[TopicEntry] = ()):
        """Build the store.

        Args:
            entries: Topic entries in display order

        Raises:
            InvalidInputError: If an item is not a TopicEntry
            DuplicateTopicError: If a title repeats within a category
        """
        self._entries: tuple[TopicEntry, ...] = ()
        self._by_category: dict[Category, tuple[TopicEntry, ...]] = {}
        self._build(list(entries))

    def _build(self, entries: list[TopicEntry]) -> None:
        grouped: dict[Category, list[TopicEntry]] = {}
        seen: set[tuple[Category, str]] = set()

        for entry in entries:
            if not isinstance(entry, TopicEntry):
                raise InvalidInputError(f"Expected TopicEntry, got {type(entry).__name__}")

            key = (entry.category, entry.title.strip().casefold())
            if key in seen:
                raise DuplicateTopicError(entry.category.value, entry.title)
            seen.add(key)
            grouped.setdefault(entry.category, []).append(entry)

        self._entries = tuple(entries)
        self._by_category = {category: tuple(items) for category, items in grouped.items()}

    @classmethod
    def default(cls) -> "ContentStore":
        """Create a store from the built-in SQL reference table."""
        from sql_cheatsheet.content.topics import TOPICS

        return cls(TOPICS)

    def list_by_category(self, category: Category | str) -> list[TopicEntry]:
        """Get the entries of a category in insertion order.

        Args:
            category: Category or category label (case-insensitive)

        Returns:
            List of entries, empty if the category is unknown or has no entries
        """
        resolved = Category.parse(category)
        if resolved is None:
            return []
        return list(self._by_category.get(resolved, ()))

    def categories(self) -> list[Category]:
        """Get the categories that hold at least one entry, in enum order."""
        return [category for category in Category if category in self._by_category]

    def all_entries(self) -> list[TopicEntry]:
        """Get every entry in insertion order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TopicEntry]:
        return iter(self._entries)

    def load_from_directory(self, directory: Path) -> "ContentStore":
        """Create a new store extending this one with Markdown topic files.

        Expected file layout:
            directory/
            ├── window_frames.md   # frontmatter + description + ```sql block
            └── json_path.md

        Frontmatter keys are ``category``, ``title`` and an optional
        ``keywords`` list. Files are read in name order.

        Args:
            directory: Path to the topics directory

        Returns:
            A new ContentStore; this store is left unchanged

        Raises:
            InvalidInputError: If a topic file cannot be parsed
            DuplicateTopicError: If a loaded title clashes within its category
        """
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning(f"Content directory does not exist: {directory}")
            return ContentStore(self._entries)

        loaded = [parse_topic_file(path) for path in sorted(directory.glob("*.md"))]
        logger.info(f"Loaded {len(loaded)} topic(s) from {directory}")
        return ContentStore([*self._entries, *loaded])


def parse_topic_file(path: Path) -> TopicEntry:
    """Parse a Markdown topic file into a TopicEntry.

    Args:
        path: Path to the .md file

    Returns:
        Parsed TopicEntry

    Raises:
        InvalidInputError: If frontmatter is missing or invalid
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"{path}: cannot read file: {e}") from e

    # Parse YAML frontmatter
    if not content.startswith("---"):
        raise InvalidInputError(f"{path}: missing YAML frontmatter")

    lines = content.split("\n")
    end_idx = None
    for i, line in enumerate(lines[1:], 1):
        if line.strip() == "---":
            end_idx = i
            break
    if end_idx is None:
        raise InvalidInputError(f"{path}: unterminated YAML frontmatter")

    try:
        metadata = yaml.safe_load("\n".join(lines[1:end_idx])) or {}
    except yaml.YAMLError as e:
        raise InvalidInputError(f"{path}: invalid YAML frontmatter: {e}") from e
    if not isinstance(metadata, dict):
        raise InvalidInputError(f"{path}: frontmatter must be a mapping")

    body = "\n".join(lines[end_idx + 1:])
    match = _SQL_BLOCK.search(body)
    if match:
        example = match.group(1).strip()
        description = (body[:match.start()] + body[match.end():]).strip()
    else:
        example = ""
        description = body.strip()

    title = metadata.get("title")
    if not isinstance(title, str) or not title.strip():
        raise InvalidInputError(f"{path}: 'title' must be a non-empty string")

    keywords = metadata.get("keywords") or []
    if isinstance(keywords, str):
        keywords = [keywords]
    if not isinstance(keywords, list) or not all(
        isinstance(keyword, (str, int, float)) and not isinstance(keyword, bool)
        for keyword in keywords
    ):
        raise InvalidInputError(f"{path}: 'keywords' must be a string or a list of strings")

    try:
        return TopicEntry(
            category=metadata.get("category", ""),
            title=title,
            description=description,
            example=example,
            keywords=tuple(str(keyword) for keyword in keywords),
        )
    except InvalidInputError as e:
        raise InvalidInputError(f"{path}: {e}") from e
