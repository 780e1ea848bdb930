"""Render topic entries as plain text, Markdown or HTML."""

import html
import textwrap
from collections.abc import Sequence
from typing import Callable

from sql_cheatsheet.content.models import TopicEntry
from sql_cheatsheet.utils.errors import InvalidInputError, UnsupportedFormatError


def _render_text(entry: TopicEntry) -> str:
    lines = [
        entry.title,
        "=" * len(entry.title),
        f"[{entry.category.value}]",
        "",
        entry.description,
    ]
    if entry.example:
        lines.append("")
        lines.append(textwrap.indent(entry.example, "    "))
    return "\n".join(lines)


def _render_markdown(entry: TopicEntry) -> str:
    lines = [
        f"## {entry.title}",
        "",
        f"*{entry.category.value}*",
        "",
        entry.description,
    ]
    if entry.example:
        lines.extend(["", "```sql", entry.example, "```"])
    return "\n".join(lines)


def _render_html(entry: TopicEntry) -> str:
    parts = [
        f'<section class="topic" data-category="{html.escape(entry.category.value)}">',
        f"  <h2>{html.escape(entry.title)}</h2>",
        f"  <p>{html.escape(entry.description)}</p>",
    ]
    if entry.example:
        parts.append(f'  <pre><code class="language-sql">{html.escape(entry.example)}</code></pre>')
    parts.append("</section>")
    return "\n".join(parts)


# Format name to (single-entry renderer, separator between entries)
RENDERERS: dict[str, tuple[Callable[[TopicEntry], str], str]] = {
    "text": (_render_text, "\n\n"),
    "markdown": (_render_markdown, "\n\n"),
    "html": (_render_html, "\n"),
}


def get_supported_formats() -> list[str]:
    """Get the names of the supported render formats."""
    return list(RENDERERS)


def _coerce_entries(entries) -> list[TopicEntry]:
    if isinstance(entries, TopicEntry):
        return [entries]
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
        raise InvalidInputError(
            f"Expected a TopicEntry or a sequence of them, got {type(entries).__name__}"
        )

    for position, entry in enumerate(entries):
        if not isinstance(entry, TopicEntry):
            raise InvalidInputError(
                f"Item {position} is {type(entry).__name__}, not a TopicEntry"
            )
    return list(entries)


def render(entries: TopicEntry | Sequence[TopicEntry], fmt: str = "text") -> str:
    """Render one or more topic entries.

    Args:
        entries: A single TopicEntry or a sequence of them
        fmt: Output format - "text", "markdown" or "html"

    Returns:
        Rendered string; empty if the sequence is empty

    Raises:
        InvalidInputError: If entries is not a TopicEntry or a sequence of them
        UnsupportedFormatError: If the format is unknown
    """
    if fmt not in RENDERERS:
        raise UnsupportedFormatError(fmt, get_supported_formats())

    render_entry, separator = RENDERERS[fmt]
    return separator.join(render_entry(entry) for entry in _coerce_entries(entries))


def render_category_listing(store) -> str:
    """Render a table of contents: each category followed by its entry titles.

    Args:
        store: ContentStore to list

    Returns:
        Plain-text listing
    """
    sections = []
    for category in store.categories():
        entries = store.list_by_category(category)
        lines = [f"{category.value} ({len(entries)})"]
        lines.extend(f"  - {entry.title}" for entry in entries)
        sections.append("\n".join(lines))
    return "\n\n".join(sections)
