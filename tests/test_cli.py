"""Tests for the command-line interface."""

import os

import pytest

from sql_cheatsheet.cli import create_parser, main
from sql_cheatsheet.core.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "CHEATSHEET_CONTENT_DIR",
        "CHEATSHEET_DEFAULT_FORMAT",
        "CHEATSHEET_LOG_LEVEL",
        "CHEATSHEET_API_HOST",
        "CHEATSHEET_API_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def run_cli(argv):
    """Run the CLI and return its exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestShowCommand:
    def test_show_known_keyword(self, capsys):
        assert run_cli(["show", "JOIN"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("JOIN\n")
        assert "multiple tables" in out
        assert "JOIN departments d ON d.id = e.department_id;" in out

    def test_show_multi_word_keyword(self, capsys):
        assert run_cli(["show", "left", "outer", "join"]) == 0
        assert capsys.readouterr().out.startswith("LEFT JOIN\n")

    def test_show_markdown(self, capsys):
        assert run_cli(["show", "select", "--format", "markdown"]) == 0
        assert capsys.readouterr().out.startswith("## SELECT\n")

    def test_show_unknown_keyword_exits_1(self, capsys):
        assert run_cli(["show", "FOOBAR"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No topic found for keyword 'FOOBAR'" in captured.err

    def test_show_suggests_close_keywords(self, capsys):
        assert run_cli(["show", "selct"]) == 1
        assert "Did you mean: SELECT" in capsys.readouterr().err

    def test_show_uses_env_default_format(self, monkeypatch, capsys):
        monkeypatch.setenv("CHEATSHEET_DEFAULT_FORMAT", "html")

        assert run_cli(["show", "commit"]) == 0
        assert capsys.readouterr().out.startswith("<section")

    def test_show_extra_topic_from_content_dir(self, tmp_path, capsys):
        (tmp_path / "nullif.md").write_text(
            "---\ncategory: Functions\ntitle: NULLIF\n---\nReturns NULL on equality.\n"
            "\n```sql\nSELECT NULLIF(a, 0) FROM t;\n```\n",
            encoding="utf-8",
        )

        assert run_cli(["--content-dir", str(tmp_path), "show", "nullif"]) == 0
        assert "SELECT NULLIF(a, 0) FROM t;" in capsys.readouterr().out

    def test_invalid_content_dir_file_exits_1(self, tmp_path, capsys):
        (tmp_path / "broken.md").write_text("no frontmatter", encoding="utf-8")

        assert run_cli(["--content-dir", str(tmp_path), "show", "JOIN"]) == 1
        assert "broken.md" in capsys.readouterr().err

    def test_undecodable_content_file_exits_1(self, tmp_path, capsys):
        (tmp_path / "latin1.md").write_bytes(b"---\ncategory: DML\ntitle: X\n---\n\xff\n")

        assert run_cli(["--content-dir", str(tmp_path), "show", "JOIN"]) == 1
        assert "latin1.md" in capsys.readouterr().err

    def test_malformed_keywords_file_exits_1(self, tmp_path, capsys):
        (tmp_path / "kw.md").write_text(
            "---\ncategory: DML\ntitle: X\nkeywords: 5\n---\nText\n", encoding="utf-8"
        )

        assert run_cli(["--content-dir", str(tmp_path), "show", "JOIN"]) == 1
        assert "keywords" in capsys.readouterr().err

    def test_invalid_port_env_exits_1(self, monkeypatch, capsys):
        monkeypatch.setenv("CHEATSHEET_API_PORT", "abc")

        assert run_cli(["show", "JOIN"]) == 1
        assert "CHEATSHEET_API_PORT must be an integer" in capsys.readouterr().err


class TestListCommands:
    def test_list_table_of_contents(self, capsys):
        assert run_cli(["list"]) == 0

        out = capsys.readouterr().out
        assert "Joins (7)" in out
        assert "  - FULL OUTER JOIN" in out

    def test_list_category(self, capsys):
        assert run_cli(["list", "--category", "tcl"]) == 0

        out = capsys.readouterr().out
        assert "COMMIT" in out
        assert "SAVEPOINT" in out
        assert "SELECT DISTINCT" not in out

    def test_list_unknown_category_exits_1(self, capsys):
        assert run_cli(["list", "--category", "triggers"]) == 1
        assert "Unknown category 'triggers'" in capsys.readouterr().err

    def test_categories(self, capsys):
        assert run_cli(["categories"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 11
        assert lines[0].split()[0] == "DDL"


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            create_parser(Config()).parse_args([])

    def test_serve_defaults_from_config(self):
        args = create_parser(Config(api_host="127.0.0.1", api_port=9000)).parse_args(["serve"])

        assert args.host == "127.0.0.1"
        assert args.port == 9000
        assert args.reload is False

    def test_unknown_format_rejected(self):
        with pytest.raises(SystemExit):
            create_parser(Config()).parse_args(["show", "JOIN", "--format", "pdf"])


class TestServeCommand:
    def test_serve_passes_content_dir_to_app(self, monkeypatch, tmp_path):
        calls = []

        def fake_run(app, **kwargs):
            calls.append((app, kwargs, Config.from_env()))

        monkeypatch.setattr("uvicorn.run", fake_run)
        try:
            assert run_cli(["--content-dir", str(tmp_path), "serve", "--port", "9000"]) == 0
        finally:
            os.environ.pop("CHEATSHEET_CONTENT_DIR", None)

        app, kwargs, config = calls[0]
        assert app == "sql_cheatsheet.api.app:app"
        assert kwargs["port"] == 9000
        assert config.content_dir == tmp_path

    def test_serve_does_not_load_topics_itself(self, monkeypatch, tmp_path):
        (tmp_path / "broken.md").write_text("no frontmatter", encoding="utf-8")
        monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: None)

        def fail_build(content_dir):
            raise AssertionError("store built for serve")

        monkeypatch.setattr("sql_cheatsheet.cli.build_store", fail_build)
        try:
            assert run_cli(["--content-dir", str(tmp_path), "serve"]) == 0
        finally:
            os.environ.pop("CHEATSHEET_CONTENT_DIR", None)
