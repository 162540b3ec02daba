"""Encoding constants, stdio setup and input decoding for clipfrag."""

import logging
import sys

from clipfrag.core.errors import DecodeError

logger = logging.getLogger(__name__)

# Encoding constants
ENCODING = "utf-8"
ENCODING_ERRORS = "replace"  # Preserve data, mark corruption

# Tried in order; (codec name, label shown to the user).
# cp932 is the Windows Shift_JIS repertoire, with the NEC and IBM extensions.
INPUT_ENCODINGS: tuple[tuple[str, str], ...] = (
    ("utf-8", "UTF-8"),
    ("cp932", "Shift_JIS"),
)


def configure_stdio() -> None:
    """Reconfigure stdin/stdout/stderr to use UTF-8 with replace error handling.

    Should be called at application startup to ensure consistent encoding
    across all platforms.
    """
    for stream in (sys.stdin, sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding=ENCODING, errors=ENCODING_ERRORS)


def decode_input(data: bytes) -> tuple[str, str]:
    """Decode raw document bytes, detecting UTF-8 or Shift_JIS.

    UTF-8 is tried first with strict error handling; only bytes that are not
    valid UTF-8 fall through to Shift_JIS, decoded as cp932 so that
    characters such as ① and ㈱ from Windows-authored files are accepted.

    Args:
        data: Raw bytes read from the input file or standard input.

    Returns:
        Tuple of (decoded text, encoding label).

    Raises:
        DecodeError: If the bytes are valid in neither encoding.
    """
    for codec, label in INPUT_ENCODINGS:
        try:
            text = data.decode(codec)
        except UnicodeDecodeError:
            logger.debug("Input is not valid %s", label)
            continue
        logger.debug("Decoded %d bytes as %s", len(data), label)
        return text, label
    raise DecodeError(tuple(label for _, label in INPUT_ENCODINGS))
