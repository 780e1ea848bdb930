"""Configuration and environment handling."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from sql_cheatsheet.utils.errors import InvalidInputError

DEFAULT_FORMAT = "text"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000


@dataclass
class Config:
    """Configuration for sql-cheatsheet.

    Attributes:
        content_dir: Optional directory of extra Markdown topics
        default_format: Render format used when none is given
        log_level: Logging level name
        api_host: Host the API server binds to
        api_port: Port the API server binds to
    """

    content_dir: Path | None = None
    default_format: str = DEFAULT_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT

    @classmethod
    def from_env(cls) -> "Config":
        """Create Config from environment variables.

        Returns:
            Config instance with values from environment or defaults
        """
        content_dir = os.getenv("CHEATSHEET_CONTENT_DIR") or None
        return cls(
            content_dir=Path(content_dir) if content_dir else None,
            default_format=os.getenv("CHEATSHEET_DEFAULT_FORMAT", DEFAULT_FORMAT).lower(),
            log_level=os.getenv("CHEATSHEET_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            api_host=os.getenv("CHEATSHEET_API_HOST", DEFAULT_API_HOST),
            api_port=_get_int("CHEATSHEET_API_PORT", DEFAULT_API_PORT),
        )


def load_environment() -> None:
    """Load environment variables from .env file.

    Looks for .env file in current directory and parent directories.
    Silently succeeds if .env file is not found.
    """
    env_path = Path(".env")

    if env_path.exists():
        load_dotenv(env_path, override=True)
    else:
        # Try to find .env in parent directories
        load_dotenv(override=True)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for command-line use.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _get_int(name: str, default: int) -> int:
    """Read an integer environment variable.

    Raises:
        InvalidInputError: If the value is not an integer
    """
    value = os.getenv(name, str(default))
    try:
        return int(value)
    except ValueError:
        raise InvalidInputError(f"{name} must be an integer, got '{value}'") from None
