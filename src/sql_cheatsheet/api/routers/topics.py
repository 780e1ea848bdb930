"""Topic lookup API endpoints."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, PlainTextResponse

from sql_cheatsheet.api.dependencies import get_content_store, get_lookup_index
from sql_cheatsheet.api.schemas.topics import CategoryInfo, TopicInfo
from sql_cheatsheet.content.index import LookupIndex
from sql_cheatsheet.content.models import Category
from sql_cheatsheet.content.store import ContentStore
from sql_cheatsheet.rendering.renderer import render
from sql_cheatsheet.utils.errors import CategoryNotFoundError

router = APIRouter(tags=["topics"])


@router.get("/categories", response_model=list[CategoryInfo])
def list_categories(
    store: ContentStore = Depends(get_content_store),
):
    """List categories that hold topics.

    Returns:
        Category names with topic counts
    """
    return [
        CategoryInfo(name=category.value, count=len(store.list_by_category(category)))
        for category in store.categories()
    ]


@router.get("/categories/{category}/topics", response_model=list[TopicInfo])
def list_category_topics(
    category: str,
    store: ContentStore = Depends(get_content_store),
):
    """List the topics of one category.

    Args:
        category: Category label, case-insensitive (e.g. "joins", "data types")

    Returns:
        Topics in display order
    """
    resolved = Category.parse(category)
    if resolved is None:
        raise CategoryNotFoundError(category, [c.value for c in Category])
    return [TopicInfo.from_entry(entry) for entry in store.list_by_category(resolved)]


@router.get("/topics/{keyword}", response_model=TopicInfo)
def get_topic(
    keyword: str,
    index: LookupIndex = Depends(get_lookup_index),
):
    """Look up a topic by keyword.

    Args:
        keyword: Title or alias, case-insensitive (e.g. "left join")

    Returns:
        The matching topic
    """
    return TopicInfo.from_entry(index.find(keyword))


@router.get("/topics/{keyword}/render")
def render_topic(
    keyword: str,
    format: str = Query("markdown", description="Render format: text, markdown or html"),
    index: LookupIndex = Depends(get_lookup_index),
):
    """Render a topic for display.

    Args:
        keyword: Title or alias, case-insensitive
        format: Output format

    Returns:
        Rendered topic as text/plain, or text/html for the html format
    """
    content = render(index.find(keyword), format)
    if format == "html":
        return HTMLResponse(content)
    return PlainTextResponse(content)
