"""Utility modules for sql-cheatsheet."""

from sql_cheatsheet.utils.errors import (
    CheatSheetError,
    CategoryNotFoundError,
    DuplicateTopicError,
    InvalidInputError,
    TopicNotFoundError,
    UnsupportedFormatError,
)

__all__ = [
    "CheatSheetError",
    "CategoryNotFoundError",
    "DuplicateTopicError",
    "InvalidInputError",
    "TopicNotFoundError",
    "UnsupportedFormatError",
]
