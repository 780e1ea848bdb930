"""Core modules for sql-cheatsheet."""

from sql_cheatsheet.core.config import Config, configure_logging, load_environment

__all__ = [
    "Config",
    "configure_logging",
    "load_environment",
]
