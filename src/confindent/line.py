"""Split document text into lines and lines into key/value pairs."""

from __future__ import annotations

from typing import Iterator

from confindent.exceptions import EmptyKeyError

# Characters with the Unicode White_Space property. str.strip() also drops
# the \x1c-\x1f separators, which are not whitespace.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def iter_lines(source: str) -> Iterator[tuple[int, str]]:
    """Yield (1-based line number, line) pairs.

    Only ``\\n`` breaks lines. Trailing ``\\r`` characters are dropped so
    CRLF input reads the same as LF input. A final newline does not produce
    an extra line.
    """
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for number, line in enumerate(lines, start=1):
        yield number, line.rstrip("\r")


def is_blank(line: str) -> bool:
    """Check whether a line is empty or whitespace only."""
    return not line.strip(WHITESPACE)


def join_line(key: str, value: str | None) -> str:
    """Inverse of split_line: the unindented text of one line."""
    return key if value is None else f"{key} {value}"


def split_line(content: str, line_number: int = 0) -> tuple[str, str | None]:
    """Split an unindented line into its key and optional value.

    The key runs up to the first space. Everything after that single space
    is the value, verbatim, and may be empty. Without a space the value is
    None.

    Args:
        content: Line text with its indentation removed.
        line_number: 1-based line number for error reporting.

    Returns:
        Tuple of (key, value).

    Raises:
        EmptyKeyError: If the content is empty or starts with a space.
    """
    key, sep, value = content.partition(" ")
    if not key:
        raise EmptyKeyError("Line has no key", line=line_number)
    return key, value if sep else None
