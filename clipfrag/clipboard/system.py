"""System clipboard sink backed by pyperclip.

pyperclip picks the platform mechanism: the Win32 API on Windows, pbcopy on
macOS, and wl-copy / xclip / xsel on Linux. On Windows the text lands as
CF_UNICODETEXT, which is what the BYTES unit measures.
"""

import logging

import pyperclip

from clipfrag.core.errors import ClipboardError

logger = logging.getLogger(__name__)


class SystemClipboard:
    """Writes text to the process-wide OS clipboard."""

    def write(self, text: str) -> None:
        """Replace the clipboard content with `text`.

        Raises:
            ClipboardError: If no clipboard mechanism is available or the
                write fails.
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Clipboard write failed: {e}") from e
        logger.debug("Clipboard set (%d chars)", len(text))

    def clear(self) -> None:
        """Empty the clipboard."""
        self.write("")
