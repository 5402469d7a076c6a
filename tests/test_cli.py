"""Tests for the command line interface."""
import io
from unittest.mock import patch

import pytest

from src.cli.main import build_parser, main


@pytest.fixture(autouse=True)
def quiet_logging(tmp_settings):
    with patch("src.cli.main.setup_logging"):
        yield


class TestCategorizeCommand:
    def test_positional_text(self, capsys):
        main(["categorize", "this post is about blockchain"])
        assert capsys.readouterr().out.strip() == "Technology"

    def test_file(self, tmp_path, capsys):
        path = tmp_path / "post.html"
        path.write_text("<p>A recipe for dinner</p>", encoding="utf-8")
        main(["categorize", "--file", str(path)])
        assert capsys.readouterr().out.strip() == "Food"

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("football team championship"))
        main(["categorize"])
        assert capsys.readouterr().out.strip() == "Sports"

    def test_missing_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["categorize", "--file", str(tmp_path / "missing.txt")])
        assert exc.value.code == 1
        assert "Cannot read" in capsys.readouterr().err


class TestExplainCommand:
    def test_explain(self, capsys):
        main(["explain", "blockchain python"])
        out = capsys.readouterr().out
        assert "category=Technology" in out
        assert "blockchain -> Technology" in out

    def test_explain_no_match(self, capsys):
        main(["explain", "xyzzy"])
        out = capsys.readouterr().out
        assert "category=Other" in out
        assert "No known terms matched." in out


class TestCategoriesCommand:
    def test_lists_all(self, capsys):
        main(["categories"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 21
        assert lines[0].split() == ["#3B82F6", "Technology"]
        assert lines[-1].split() == ["#6B7280", "Other"]


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_serve_port(self):
        args = build_parser().parse_args(["serve", "--port", "9000"])
        assert args.port == 9000
