"""Tests for the command-line interface."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from html_semantic_diff import cli
from html_semantic_diff.errors import InputSourceError, OutputError

HELLO = "<html><body><h1>Hello World</h1></body></html>"


class _TTY(io.StringIO):
    def isatty(self) -> bool:
        return True


def _undecodable_stdin() -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(b"<p>\xff</p>"), encoding="utf-8")


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers run() attaches so they never outlive pytest's capture."""
    yield
    package_logger = logging.getLogger("html_semantic_diff")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


class TestReadInput:
    def test_file_takes_precedence(self, tmp_path: Path) -> None:
        path = tmp_path / "page.html"
        path.write_text("<p>file</p>", encoding="utf-8")
        assert cli.read_input(path, "<p>literal</p>", io.StringIO("<p>stdin</p>")) == "<p>file</p>"

    def test_literal_before_stdin(self) -> None:
        assert cli.read_input(None, "<p>literal</p>", io.StringIO("<p>stdin</p>")) == "<p>literal</p>"

    def test_piped_stdin(self) -> None:
        assert cli.read_input(None, None, io.StringIO("<p>stdin</p>")) == "<p>stdin</p>"

    def test_terminal_stdin_is_an_error(self) -> None:
        with pytest.raises(InputSourceError, match="no HTML input provided"):
            cli.read_input(None, None, _TTY())

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputSourceError, match="missing.html"):
            cli.read_input(tmp_path / "missing.html", None)

    def test_undecodable_stdin(self) -> None:
        with pytest.raises(InputSourceError, match="stdin"):
            cli.read_input(None, None, _undecodable_stdin())


class TestWriteOutput:
    def test_stdout(self) -> None:
        out = io.StringIO()
        cli.write_output("data\n", None, out)
        assert out.getvalue() == "data\n"

    def test_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        cli.write_output("data\n", path)
        assert path.read_text(encoding="utf-8") == "data\n"

    def test_unwritable(self, tmp_path: Path) -> None:
        with pytest.raises(OutputError, match="failed to write"):
            cli.write_output("data\n", tmp_path / "no-such-dir" / "out.txt")


class TestRun:
    def test_json_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["--html", HELLO]) == 0
        data = json.loads(capsys.readouterr().out)
        h1 = data["children"][0]["children"][0]["children"][0]
        assert h1["tagName"] == "h1"
        assert h1["children"] == [{"kind": "text", "textContent": "Hello World"}]

    def test_tree_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["--html", "<p>x</p>", "--format", "tree"]) == 0
        assert capsys.readouterr().out == '<p>\n  "x"\n</p>\n'

    def test_no_normalize_ws(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.run(["--html", "<p> x </p>", "--format", "tree", "--no-normalize-ws"]) == 0
        assert capsys.readouterr().out == '<p>\n  " x "\n</p>\n'

    def test_file_input_and_output(self, tmp_path: Path) -> None:
        source = tmp_path / "in.html"
        source.write_text(HELLO, encoding="utf-8")
        target = tmp_path / "out.json"
        assert cli.run(["--file", str(source), "--output", str(target)]) == 0
        assert json.loads(target.read_text(encoding="utf-8"))["kind"] == "document"

    def test_stdin_input(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("<br>"))
        assert cli.run(["--format", "tree"]) == 0
        assert capsys.readouterr().out == "<br/>\n"

    def test_unknown_format_is_fatal(
        self, caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert cli.run(["--html", "<p>x</p>", "--format", "xml"]) == 1
        assert "unknown output format 'xml'" in caplog.text
        assert capsys.readouterr().out == ""

    def test_missing_file_is_fatal(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert cli.run(["--file", str(tmp_path / "missing.html")]) == 1
        assert "InputSourceError" in caplog.text

    def test_unavailable_parser_is_fatal(self, caplog: pytest.LogCaptureFixture) -> None:
        assert cli.run(["--html", "<p>x</p>", "--parser", "no-such-parser"]) == 1
        assert "ParseError" in caplog.text

    def test_unwritable_output_is_fatal(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        target = tmp_path / "no-such-dir" / "out.json"
        assert cli.run(["--html", "<p>x</p>", "--output", str(target)]) == 1
        assert "OutputError" in caplog.text

    def test_undecodable_stdin_is_an_input_error(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setattr("sys.stdin", _undecodable_stdin())
        assert cli.run([]) == 1
        assert "InputSourceError" in caplog.text
        assert "Invalid configuration" not in caplog.text

    def test_empty_parser_is_a_configuration_error(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert cli.run(["--html", "<p>x</p>", "--parser", ""]) == 1
        assert "Invalid configuration" in caplog.text


class TestConfigureLogging:
    def test_verbose_sets_debug(self) -> None:
        cli.configure_logging(verbose=True)
        assert logging.getLogger("html_semantic_diff").level == logging.DEBUG

    def test_handler_attached_once(self) -> None:
        cli.configure_logging()
        cli.configure_logging()
        assert len(logging.getLogger("html_semantic_diff").handlers) == 1
