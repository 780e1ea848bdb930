"""FastAPI application factory."""

from datetime import datetime, timezone

from fastapi import FastAPI

from sql_cheatsheet import __version__
from sql_cheatsheet.api.middleware import register_exception_handlers
from sql_cheatsheet.api.routers import topics
from sql_cheatsheet.core.config import load_environment

# Load environment variables
load_environment()


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="SQL Cheat Sheet API",
        description="Read-only REST API serving SQL syntax reference topics by category and keyword",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Register routers with /api/v1 prefix
    app.include_router(topics.router, prefix="/api/v1")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint.

        Returns:
            Health status
        """
        return {
            "status": "healthy",
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


# Create app instance for uvicorn
app = create_app()
