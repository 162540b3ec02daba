"""Split decoded text into terminator-preserving lines."""

from clipfrag.document.types import Line


def split_lines(text: str) -> tuple[Line, ...]:
    """Split text at each newline, keeping the terminator on the preceding line.

    Only "\\n" ends a line, so "\\r\\n" stays together and a lone "\\r" is
    ordinary content. A final piece without a terminator is still a line.
    Joining the result reproduces the input exactly.

    Examples:
        >>> split_lines("aaa\\nbbb\\r\\nccc")
        ('aaa\\n', 'bbb\\r\\n', 'ccc')
        >>> split_lines("")
        ()
    """
    if not text:
        return ()

    lines: list[Line] = []
    start = 0
    while True:
        end = text.find("\n", start)
        if end == -1:
            break
        lines.append(text[start:end + 1])
        start = end + 1

    if start < len(text):
        lines.append(text[start:])
    return tuple(lines)
