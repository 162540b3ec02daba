"""Shared pytest fixtures and configuration for pytest."""

import io
import logging
import sys
from collections.abc import Callable, Iterable

import pytest
from rich.console import Console

from clipfrag.display import console as display_console
from clipfrag.display import set_console
from clipfrag.display.printer import PromptPrinter


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for platform-specific tests."""
    config.addinivalue_line("markers", "windows: mark test to run only on Windows")
    config.addinivalue_line("markers", "unix_only: mark test to run only on Unix")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-skip tests based on platform markers."""
    skip_windows = pytest.mark.skip(reason="Windows-only test")
    skip_unix = pytest.mark.skip(reason="Unix-only test")

    for item in items:
        if "windows" in item.keywords and sys.platform != "win32":
            item.add_marker(skip_windows)
        if "unix_only" in item.keywords and sys.platform == "win32":
            item.add_marker(skip_unix)


class RecordingClipboard:
    """Clipboard sink that keeps every write in order."""

    def __init__(self) -> None:
        self.writes: list[str] = []

    @property
    def content(self) -> str:
        """What the clipboard holds now."""
        return self.writes[-1] if self.writes else ""

    def write(self, text: str) -> None:
        self.writes.append(text)

    def clear(self) -> None:
        self.write("")


class ScriptedReader:
    """Line reader that replays canned answers, then raises EOFError."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.reads = 0

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def read_line(self) -> str:
        if not self._answers:
            raise EOFError("script exhausted")
        self.reads += 1
        return self._answers.pop(0)


@pytest.fixture
def clipboard() -> RecordingClipboard:
    """Fresh recording clipboard."""
    return RecordingClipboard()


@pytest.fixture
def make_reader() -> Callable[..., ScriptedReader]:
    """Factory: make_reader("y", "p", "q")."""

    def factory(*answers: str) -> ScriptedReader:
        return ScriptedReader(answers)

    return factory


@pytest.fixture
def console(monkeypatch: pytest.MonkeyPatch) -> Console:
    """Plain in-memory console, installed as the shared clipfrag console."""
    console = Console(
        file=io.StringIO(),
        width=200,
        force_terminal=False,
        color_system=None,
        highlight=False,
    )
    # Restore whatever shared console was there before the test
    monkeypatch.setattr(display_console, "_console", display_console._console)
    set_console(console)
    return console


@pytest.fixture
def printer(console: Console) -> PromptPrinter:
    """PromptPrinter bound to the in-memory console."""
    return PromptPrinter(console)


@pytest.fixture
def console_output(console: Console) -> Callable[[], str]:
    """Return everything printed to the in-memory console so far."""

    def read() -> str:
        return console.file.getvalue()

    return read


@pytest.fixture
def clipfrag_logger(monkeypatch: pytest.MonkeyPatch) -> logging.Logger:
    """The clipfrag namespace logger, with its configuration restored afterwards."""
    logger = logging.getLogger("clipfrag")
    monkeypatch.setattr(logger, "handlers", list(logger.handlers))
    monkeypatch.setattr(logger, "propagate", logger.propagate)
    monkeypatch.setattr(logger, "level", logger.level)
    return logger
