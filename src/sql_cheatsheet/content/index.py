"""Keyword lookup index over the content store."""

import difflib
import logging
from typing import Iterable

from sql_cheatsheet.content.models import TopicEntry
from sql_cheatsheet.utils.errors import TopicNotFoundError

logger = logging.getLogger(__name__)


def normalize_keyword(text: str) -> str:
    """Normalize a keyword for lookup.

    Strips surrounding whitespace, collapses inner runs of whitespace and
    upper-cases, so " left   join" and "LEFT JOIN" are the same key.
    """
    return " ".join(str(text).split()).upper()


class LookupIndex:
    """Case-insensitive exact-match index from keyword to topic entry.

    Every entry is reachable through its title and its keyword aliases.
    When two entries claim the same keyword the first one registered wins.
    """

    def __init__(self, entries: Iterable[TopicEntry]):
        self._index: dict[str, TopicEntry] = {}
        for entry in entries:
            self._add(entry)

    def _add(self, entry: TopicEntry) -> None:
        for key in entry.lookup_keys():
            normalized = normalize_keyword(key)
            if not normalized:
                continue

            existing = self._index.get(normalized)
            if existing is None:
                self._index[normalized] = entry
            elif existing is not entry:
                logger.warning(
                    f"Keyword '{normalized}' of '{entry.title}' already maps to "
                    f"'{existing.title}' ({existing.category.value}); keeping the first"
                )

    def find(self, keyword: str) -> TopicEntry:
        """Find the entry for a keyword.

        Args:
            keyword: Keyword to look up, any case

        Returns:
            The matching TopicEntry

        Raises:
            TopicNotFoundError: If no entry has this keyword
        """
        entry = self._index.get(normalize_keyword(keyword))
        if entry is None:
            raise TopicNotFoundError(keyword, self.suggest(keyword))
        return entry

    def suggest(self, keyword: str, limit: int = 3) -> list[str]:
        """Get indexed keywords that closely resemble the given one."""
        return difflib.get_close_matches(
            normalize_keyword(keyword), self._index.keys(), n=limit, cutoff=0.6
        )

    def keywords(self) -> list[str]:
        """Get all normalized keywords, sorted."""
        return sorted(self._index)

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and normalize_keyword(keyword) in self._index

    def __len__(self) -> int:
        return len(self._index)
