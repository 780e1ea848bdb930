"""Rendering of topic entries for terminals, documents and browsers."""

from sql_cheatsheet.rendering.renderer import (
    get_supported_formats,
    render,
    render_category_listing,
)

__all__ = [
    "get_supported_formats",
    "render",
    "render_category_listing",
]
