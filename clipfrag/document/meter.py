"""Per-line size measurement."""

from collections.abc import Iterable

from clipfrag.document.types import Line, UnitKind

# The clipboard stores text as UTF-16; each code unit is two bytes
WIDE_CHAR_CODEC = "utf-16-le"


def measure(line: Line, unit_kind: UnitKind) -> int:
    """Size of a line (terminator included) in the given unit.

    CHARS counts code points. BYTES counts the UTF-16 encoding, so characters
    outside the BMP cost 4 bytes and everything else costs 2.
    """
    if unit_kind is UnitKind.CHARS:
        return len(line)
    # Lone surrogates count as one code unit each
    return len(line.encode(WIDE_CHAR_CODEC, errors="surrogatepass"))


def measure_lines(lines: Iterable[Line], unit_kind: UnitKind) -> tuple[int, ...]:
    """Measure every line, in order."""
    return tuple(measure(line, unit_kind) for line in lines)
