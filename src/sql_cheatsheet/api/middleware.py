"""Error handling middleware for FastAPI."""

from fastapi import Request
from fastapi.responses import JSONResponse

from sql_cheatsheet.utils.errors import (
    CategoryNotFoundError,
    InvalidInputError,
    TopicNotFoundError,
    UnsupportedFormatError,
)


async def topic_not_found_handler(request: Request, exc: TopicNotFoundError) -> JSONResponse:
    """Handle unknown keyword errors.

    Args:
        request: FastAPI request
        exc: Exception instance

    Returns:
        JSON error response
    """
    return JSONResponse(
        status_code=404,
        content={
            "error": "topic_not_found",
            "message": f"No topic found for keyword '{exc.keyword}'",
            "keyword": exc.keyword,
            "suggestions": exc.suggestions,
        },
    )


async def category_not_found_handler(request: Request, exc: CategoryNotFoundError) -> JSONResponse:
    """Handle unknown category errors.

    Args:
        request: FastAPI request
        exc: Exception instance

    Returns:
        JSON error response
    """
    return JSONResponse(
        status_code=404,
        content={
            "error": "category_not_found",
            "message": f"Unknown category '{exc.category}'",
            "category": exc.category,
            "valid_categories": exc.valid_categories,
        },
    )


async def unsupported_format_handler(request: Request, exc: UnsupportedFormatError) -> JSONResponse:
    """Handle unknown render format errors.

    Args:
        request: FastAPI request
        exc: Exception instance

    Returns:
        JSON error response
    """
    return JSONResponse(
        status_code=400,
        content={
            "error": "unsupported_format",
            "message": f"Unsupported format '{exc.fmt}'",
            "format": exc.fmt,
            "valid_formats": exc.valid_formats,
        },
    )


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    """Handle malformed input errors.

    Args:
        request: FastAPI request
        exc: Exception instance

    Returns:
        JSON error response
    """
    return JSONResponse(
        status_code=400,
        content={
            "error": "invalid_input",
            "message": str(exc),
        },
    )


def register_exception_handlers(app):
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(TopicNotFoundError, topic_not_found_handler)
    app.add_exception_handler(CategoryNotFoundError, category_not_found_handler)
    app.add_exception_handler(UnsupportedFormatError, unsupported_format_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
