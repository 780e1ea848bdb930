"""SQL Cheat Sheet - SQL syntax quick reference

Structured reference topics for SQL commands, clauses, data types,
constraints, joins, functions and optimization tips, with keyword
lookup, text/Markdown/HTML rendering, a CLI and a read-only HTTP API.
"""

__version__ = "0.1.0"

# Import core functionality
from sql_cheatsheet.core.config import Config, load_environment
from sql_cheatsheet.content import (
    Category,
    ContentStore,
    LookupIndex,
    TopicEntry,
    normalize_keyword,
)
from sql_cheatsheet.rendering import render, render_category_listing
from sql_cheatsheet.utils.errors import (
    CheatSheetError,
    InvalidInputError,
    TopicNotFoundError,
)

# Import CLI entry point
from sql_cheatsheet.cli import main

__all__ = [
    "__version__",
    "Config",
    "load_environment",
    "Category",
    "ContentStore",
    "LookupIndex",
    "TopicEntry",
    "normalize_keyword",
    "render",
    "render_category_listing",
    "CheatSheetError",
    "InvalidInputError",
    "TopicNotFoundError",
    "main",
]
