"""Cheat sheet content: data model, built-in topics, store and lookup index."""

from sql_cheatsheet.content.index import LookupIndex, normalize_keyword
from sql_cheatsheet.content.models import Category, TopicEntry
from sql_cheatsheet.content.store import ContentStore, parse_topic_file

__all__ = [
    "Category",
    "ContentStore",
    "LookupIndex",
    "TopicEntry",
    "normalize_keyword",
    "parse_topic_file",
]
