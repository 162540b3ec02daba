"""Tests for the clipfrag entry point."""

import importlib
import io
import json
import sys
from pathlib import Path

import pytest
from rich.console import Console

from clipfrag.cli.main import read_input, run
from clipfrag.core.errors import InputError

cli_main = importlib.import_module("clipfrag.cli.main")


@pytest.fixture(autouse=True)
def isolated(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, console: Console, clipfrag_logger
) -> None:
    """No user config; output goes to the in-memory console."""
    monkeypatch.setattr(
        "clipfrag.config.loader.get_default_config_path",
        lambda: tmp_path / "home" / ".clipfrag" / "config.json",
    )
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def doc_file(tmp_path: Path) -> Path:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"ab\ncd\n")
    return path


class TestReadInput:
    """Tests for read_input()."""

    def test_reads_file_bytes(self, doc_file: Path) -> None:
        assert read_input(doc_file) == b"ab\ncd\n"

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\x82\xb1")))
        assert read_input(None) == b"\x82\xb1"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputError, match="Failed to read"):
            read_input(tmp_path / "missing.txt")


class TestRun:
    """End-to-end runs with an injected clipboard and answers."""

    def test_file_transfer(self, doc_file, clipboard, make_reader, console_output) -> None:
        code = run(["-c", "3", str(doc_file)], sink=clipboard, reader=make_reader("y", "y", "y", "q"))

        assert code == 0
        source = str(doc_file)
        assert clipboard.writes == [
            f"The following is the content of file: {source}\n---\n",
            "ab\n",
            "cd\n",
            f"That is the end of file: {source}\n",
            "",
        ]
        out = console_output()
        assert out.startswith("encoding: UTF-8\n")
        assert "+footer prompt: Y(es)/P(rev)/Q(uit) [y]:" in out

    def test_stdin_transfer(
        self, monkeypatch: pytest.MonkeyPatch, clipboard, make_reader, console_output
    ) -> None:
        """Shift_JIS on stdin: no header, no footer."""
        data = bytes.fromhex("82B182F182C982BF82CD") + b"\n"
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

        code = run(["-b", "100"], sink=clipboard, reader=make_reader("y", "q"))

        assert code == 0
        assert clipboard.writes == ["こんにちは\n", ""]
        out = console_output()
        assert "encoding: Shift_JIS" in out
        assert "+12 [bytes] (100.0 %), 12 / 12 (100.0 %)" in out

    def test_config_budget_applies(
        self, tmp_path: Path, doc_file, clipboard, make_reader
    ) -> None:
        config = tmp_path / "cfg.json"
        config.write_text(json.dumps({"max_units": 6, "messages": {"send_header": False}}))

        run(["--config", str(config), str(doc_file)], sink=clipboard, reader=make_reader("y", "q"))

        assert clipboard.writes == ["ab\ncd\n", ""]

    def test_quit_immediately(self, doc_file, clipboard, make_reader) -> None:
        assert run([str(doc_file)], sink=clipboard, reader=make_reader("q")) == 0
        assert clipboard.content == ""


class TestRunErrors:
    """Failures map to exit codes and an error line."""

    def test_missing_input_file(self, tmp_path: Path, clipboard, make_reader, console_output) -> None:
        code = run([str(tmp_path / "missing.txt")], sink=clipboard, reader=make_reader())
        assert code == 1
        assert "Error: Failed to read" in console_output()
        assert clipboard.writes == []

    def test_undecodable_input(self, tmp_path: Path, clipboard, make_reader, console_output) -> None:
        bad = tmp_path / "bad.bin"
        bad.write_bytes(b"\xff\xff\xff")
        assert run([str(bad)], sink=clipboard, reader=make_reader()) == 1
        assert "could not be decoded" in console_output()

    def test_invalid_config(self, tmp_path: Path, doc_file, clipboard, make_reader) -> None:
        config = tmp_path / "cfg.json"
        config.write_text('{"unit": "words"}')
        code = run(["--config", str(config), str(doc_file)], sink=clipboard, reader=make_reader())
        assert code == 1

    def test_stalled_packing(self, tmp_path: Path, doc_file, clipboard, make_reader, console_output) -> None:
        config = tmp_path / "cfg.json"
        config.write_text('{"oversize_policy": "stall"}')
        code = run(
            ["--config", str(config), "-c", "2", str(doc_file)],
            sink=clipboard,
            reader=make_reader("y"),
        )
        assert code == 1
        assert "Line 1 needs 3 units but the budget is 2" in console_output()

    def test_keyboard_interrupt(self, doc_file, clipboard, console_output) -> None:
        class InterruptingReader:
            def read_line(self) -> str:
                raise KeyboardInterrupt

        assert run([str(doc_file)], sink=clipboard, reader=InterruptingReader()) == 130
        assert "Interrupted" in console_output()


class TestMain:
    """Tests for main()."""

    def test_exits_with_run_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(cli_main, "configure_stdio", lambda: None)
        monkeypatch.setattr(cli_main, "run", lambda: 0)
        with pytest.raises(SystemExit) as exc_info:
            cli_main.main()
        assert exc_info.value.code == 0
