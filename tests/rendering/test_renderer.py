"""Tests for rendering topic entries."""

import pytest

from sql_cheatsheet.content import Category, ContentStore, TopicEntry
from sql_cheatsheet.rendering import get_supported_formats, render, render_category_listing
from sql_cheatsheet.utils.errors import InvalidInputError, UnsupportedFormatError


@pytest.fixture
def join_entry():
    return TopicEntry(
        category=Category.JOINS,
        title="JOIN",
        description="Combines rows from multiple tables.",
        example="SELECT *\nFROM a\nJOIN b ON a.id = b.id;",
    )


@pytest.fixture
def html_entry():
    return TopicEntry(
        category=Category.CLAUSES,
        title="<Less Than>",
        description="Compares a < b & b > c.",
        example="SELECT * FROM t WHERE a < 'x';",
    )


class TestRenderText:
    def test_single_entry(self, join_entry):
        output = render(join_entry)

        assert output.startswith("JOIN\n====\n[Joins]")
        assert "Combines rows from multiple tables." in output
        assert "    SELECT *\n    FROM a\n    JOIN b ON a.id = b.id;" in output

    def test_sequence_separated_by_blank_line(self, join_entry):
        other = TopicEntry(Category.JOINS, "CROSS JOIN", "Pairs every row.", "SELECT 1;")
        output = render([join_entry, other])

        assert output.count("\n\nCROSS JOIN\n") == 1

    def test_entry_without_example(self):
        entry = TopicEntry(Category.OPTIMIZATION, "Tip", "Measure first.")
        assert render(entry).endswith("Measure first.")

    def test_empty_sequence(self):
        assert render([]) == ""


class TestRenderMarkdown:
    def test_heading_and_fenced_block(self, join_entry):
        output = render(join_entry, "markdown")

        assert output.startswith("## JOIN\n")
        assert "*Joins*" in output
        assert "```sql\nSELECT *\nFROM a\nJOIN b ON a.id = b.id;\n```" in output


class TestRenderHtml:
    def test_structure(self, join_entry):
        output = render(join_entry, "html")

        assert output.startswith('<section class="topic" data-category="Joins">')
        assert "<h2>JOIN</h2>" in output
        assert '<pre><code class="language-sql">' in output
        assert output.endswith("</section>")

    def test_text_is_escaped(self, html_entry):
        output = render(html_entry, "html")

        assert "<h2>&lt;Less Than&gt;</h2>" in output
        assert "a &lt; b &amp; b &gt; c" in output
        assert "a &lt; &#x27;x&#x27;" in output


class TestRenderErrors:
    @pytest.mark.parametrize("bad", ["SELECT", b"SELECT", None, 42, {"title": "JOIN"}])
    def test_malformed_input_rejected(self, bad):
        with pytest.raises(InvalidInputError):
            render(bad)

    def test_malformed_item_rejected(self, join_entry):
        with pytest.raises(InvalidInputError, match="Item 1"):
            render([join_entry, "JOIN"])

    def test_unknown_format_rejected(self, join_entry):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            render(join_entry, "pdf")
        assert exc_info.value.valid_formats == get_supported_formats()

    def test_unsupported_format_is_invalid_input(self):
        assert issubclass(UnsupportedFormatError, InvalidInputError)


def test_render_category_listing():
    store = ContentStore([
        TopicEntry(Category.DML, "INSERT", "Adds rows."),
        TopicEntry(Category.DML, "UPDATE", "Changes rows."),
        TopicEntry(Category.JOINS, "JOIN", "Combines rows."),
    ])

    assert render_category_listing(store) == (
        "DML (2)\n  - INSERT\n  - UPDATE\n\nJoins (1)\n  - JOIN"
    )
