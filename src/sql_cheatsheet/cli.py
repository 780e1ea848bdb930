"""Command-line interface for sql-cheatsheet."""

import argparse
import logging
import os
import sys
from pathlib import Path

from sql_cheatsheet.content.index import LookupIndex
from sql_cheatsheet.content.models import Category
from sql_cheatsheet.content.store import ContentStore
from sql_cheatsheet.core.config import Config, configure_logging, load_environment
from sql_cheatsheet.rendering.renderer import (
    get_supported_formats,
    render,
    render_category_listing,
)
from sql_cheatsheet.utils.errors import CategoryNotFoundError, CheatSheetError

logger = logging.getLogger(__name__)


def create_parser(config: Config | None = None) -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Args:
        config: Configuration supplying defaults (read from env if omitted)

    Returns:
        Configured argument parser
    """
    config = config or Config.from_env()

    parser = argparse.ArgumentParser(
        prog="sql-cheatsheet",
        description="SQL syntax quick reference",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sql-cheatsheet show JOIN
  sql-cheatsheet show "left join" --format markdown
  sql-cheatsheet list --category constraints
  sql-cheatsheet categories
  sql-cheatsheet serve --port 8080
        """,
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=config.content_dir,
        help="Directory of extra Markdown topics (default: $CHEATSHEET_CONTENT_DIR)",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level (default: {config.log_level})",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to run",
        required=True,
    )

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print the topic for a keyword",
    )
    show_parser.add_argument(
        "keyword",
        nargs="+",
        help="Command keyword, e.g. SELECT or LEFT JOIN (case-insensitive)",
    )
    show_parser.add_argument(
        "--format",
        default=config.default_format,
        choices=get_supported_formats(),
        help=f"Output format (default: {config.default_format})",
    )

    # List command
    list_parser = subparsers.add_parser(
        "list",
        help="List topics, optionally of one category",
    )
    list_parser.add_argument(
        "--category",
        help="Category to render in full, e.g. Joins or 'data types'",
    )
    list_parser.add_argument(
        "--format",
        default=config.default_format,
        choices=get_supported_formats(),
        help=f"Output format (default: {config.default_format})",
    )

    # Categories command
    subparsers.add_parser(
        "categories",
        help="List categories with topic counts",
    )

    # Serve API command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI server",
    )
    serve_parser.add_argument(
        "--host",
        default=config.api_host,
        help=f"Host to bind to (default: {config.api_host})",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=config.api_port,
        help=f"Port to bind to (default: {config.api_port})",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def build_store(content_dir: Path | None) -> ContentStore:
    """Build the content store, extended with a topics directory if given.

    Args:
        content_dir: Optional directory of Markdown topics

    Returns:
        ContentStore instance
    """
    store = ContentStore.default()
    if content_dir:
        store = store.load_from_directory(content_dir)
    logger.debug(f"Content store holds {len(store)} topics")
    return store


def run_show_command(args: argparse.Namespace, store: ContentStore) -> None:
    """Print the topic matching the keyword.

    Args:
        args: Parsed command-line arguments
        store: Content store to search

    Raises:
        TopicNotFoundError: If the keyword is not indexed
    """
    index = LookupIndex(store)
    entry = index.find(" ".join(args.keyword))
    print(render(entry, args.format))


def run_list_command(args: argparse.Namespace, store: ContentStore) -> None:
    """Print a category in full, or the table of contents.

    Args:
        args: Parsed command-line arguments
        store: Content store to list

    Raises:
        CategoryNotFoundError: If the category label is unknown
    """
    if not args.category:
        print(render_category_listing(store))
        return

    category = Category.parse(args.category)
    if category is None:
        raise CategoryNotFoundError(args.category, [c.value for c in Category])

    print(render(store.list_by_category(category), args.format))


def run_categories_command(args: argparse.Namespace, store: ContentStore) -> None:
    """Print category names with topic counts.

    Args:
        args: Parsed command-line arguments
        store: Content store to list
    """
    for category in store.categories():
        print(f"{category.value:<14} {len(store.list_by_category(category)):>3}")


def run_serve_command(args: argparse.Namespace, store: ContentStore | None) -> None:
    """Run the FastAPI server.

    The content directory is passed on through CHEATSHEET_CONTENT_DIR so the
    app, and any reload workers, load the same topics.

    Args:
        args: Parsed command-line arguments
        store: Always None; the server builds its own store from the environment
    """
    import uvicorn

    if args.content_dir:
        os.environ["CHEATSHEET_CONTENT_DIR"] = str(args.content_dir)

    print(f"\n{'='*60}")
    print("Starting SQL Cheat Sheet API")
    print(f"{'='*60}")
    print(f"Host: {args.host}")
    print(f"Port: {args.port}")
    print(f"Reload: {args.reload}")
    print(f"{'='*60}\n")
    print(f"API Documentation: http://{args.host}:{args.port}/docs")
    print(f"Health Check: http://{args.host}:{args.port}/health")
    print(f"{'='*60}\n")

    uvicorn.run(
        "sql_cheatsheet.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])
    """
    load_environment()
    try:
        config = Config.from_env()
    except CheatSheetError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    parser = create_parser(config)
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    command_map = {
        "show": run_show_command,
        "list": run_list_command,
        "categories": run_categories_command,
        "serve": run_serve_command,
    }

    try:
        command_func = command_map.get(args.command)
        if command_func is None:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            sys.exit(1)

        # The server builds its own store from the environment
        store = None if args.command == "serve" else build_store(args.content_dir)
        command_func(args, store)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(0)
    except CheatSheetError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
