"""Dependency injection for FastAPI."""

from functools import lru_cache

from fastapi import Depends

from sql_cheatsheet.content.index import LookupIndex
from sql_cheatsheet.content.store import ContentStore
from sql_cheatsheet.core.config import Config


@lru_cache
def get_config() -> Config:
    """Get singleton configuration read from the environment.

    Returns:
        Config instance
    """
    return Config.from_env()


@lru_cache
def get_content_store() -> ContentStore:
    """Get singleton content store instance.

    Extends the built-in topics with CHEATSHEET_CONTENT_DIR when set.

    Returns:
        ContentStore instance
    """
    store = ContentStore.default()
    config = get_config()
    if config.content_dir:
        store = store.load_from_directory(config.content_dir)
    return store


def get_lookup_index(
    store: ContentStore = Depends(get_content_store),
) -> LookupIndex:
    """Get the lookup index for the content store.

    Args:
        store: Content store (injected)

    Returns:
        LookupIndex instance, built once per store
    """
    return _build_index(store)


@lru_cache
def _build_index(store: ContentStore) -> LookupIndex:
    return LookupIndex(store)
