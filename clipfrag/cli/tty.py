"""Reading answers from the controlling terminal.

Standard input may carry the document itself, so answers are read from the
terminal device directly (/dev/tty, or CONIN$ on Windows).
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from clipfrag.core.encoding import ENCODING, ENCODING_ERRORS
from clipfrag.core.errors import InputError

logger = logging.getLogger(__name__)


def terminal_device() -> str:
    """Path of the controlling terminal for this platform."""
    if sys.platform == "win32":
        return "CONIN$"
    return "/dev/tty"


def strip_line_ending(line: str) -> str:
    """Remove one trailing "\\n" and a "\\r" before it."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class TerminalReader:
    """Blocking line reader over a text stream.

    Example:
        with TerminalReader.open(allow_stdin=True) as reader:
            answer = reader.read_line()
    """

    def __init__(self, stream: TextIO, owns_stream: bool = False) -> None:
        self._stream = stream
        self._owns_stream = owns_stream

    @classmethod
    def open(cls, allow_stdin: bool = False) -> TerminalReader:
        """Open the controlling terminal.

        Args:
            allow_stdin: Fall back to standard input when it is interactive.
                Only safe when the document was not read from stdin.

        Raises:
            InputError: If no terminal is available.
        """
        device = terminal_device()
        try:
            stream = open(device, encoding=ENCODING, errors=ENCODING_ERRORS)
        except OSError as e:
            if allow_stdin and sys.stdin is not None and sys.stdin.isatty():
                logger.debug("Cannot open %s (%s); reading answers from stdin", device, e)
                return cls(sys.stdin)
            raise InputError(f"No interactive terminal for answers ({device}: {e})") from e
        logger.debug("Reading answers from %s", device)
        return cls(stream, owns_stream=True)

    def read_line(self) -> str:
        """Read one answer without its line ending.

        Raises:
            EOFError: If the terminal is closed.
            InputError: If reading fails.
        """
        try:
            line = self._stream.readline()
        except OSError as e:
            raise InputError(f"Failed to read from terminal: {e}") from e
        if not line:
            raise EOFError("terminal input closed")
        return strip_line_ending(line)

    def close(self) -> None:
        if self._owns_stream:
            self._stream.close()

    def __enter__(self) -> TerminalReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()
