"""CLI entry point for sql-cheatsheet.

Allows running the package as a module:
    python -m sql_cheatsheet
"""

from sql_cheatsheet.cli import main

if __name__ == "__main__":
    main()
