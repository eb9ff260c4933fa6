"""Classify the leading indentation of document lines into depth levels."""

from __future__ import annotations

from confindent.exceptions import InvalidIndentationError, MixedIndentationError

_INDENT_CHARS = " \t"


def measure_indent(line: str) -> tuple[str, str]:
    """Split a line into its leading run of spaces/tabs and the rest.

    Args:
        line: A single source line without its line terminator.

    Returns:
        Tuple of (indent, content).
    """
    content = line.lstrip(_INDENT_CHARS)
    return line[: len(line) - len(content)], content


def describe_indent(indent: str) -> str:
    """Human readable description of an indent run, used in error messages."""
    if not indent:
        return "no indentation"
    name = "tab" if indent[0] == "\t" else "space"
    count = len(indent)
    return f"{count} {name}{'s' if count != 1 else ''}"


class IndentTracker:
    """Resolve indentation runs to depth levels, one root block at a time.

    Levels are identified by the exact width first seen for them; widths are
    never compared in absolute units. A block begins at every line with no
    indentation and fixes its indent character at its first indented line.
    """

    def __init__(self) -> None:
        self._levels: list[int] = []
        self._char: str | None = None

    @property
    def levels(self) -> tuple[int, ...]:
        """Widths of the currently open levels, root first."""
        return tuple(self._levels)

    @property
    def block_char(self) -> str | None:
        """Indent character of the current block, if one was seen yet."""
        return self._char

    def resolve(self, indent: str, line_number: int) -> int:
        """Return the depth for a line indented by ``indent``.

        Args:
            indent: The line's leading run of spaces and tabs.
            line_number: 1-based line number for error reporting.

        Returns:
            The depth of the line, 0 for a root line.

        Raises:
            MixedIndentationError: If the run mixes tabs and spaces, or uses
                a different character than the rest of its block.
            InvalidIndentationError: If the line is indented before any root
                line, or its width falls between two open levels.
        """
        if " " in indent and "\t" in indent:
            raise MixedIndentationError("Indent mixed between tabs and spaces", line=line_number)

        if not indent:
            self._levels = [0]
            self._char = None
            return 0

        if not self._levels:
            raise InvalidIndentationError(
                "Cannot start document with an indented line", line=line_number
            )

        char = indent[0]
        if self._char is None:
            self._char = char
        elif char != self._char:
            block = "tab" if self._char == "\t" else "space"
            raise MixedIndentationError(
                f"Found {describe_indent(indent)} in a {block}-indented block",
                line=line_number,
            )

        width = len(indent)
        if width > self._levels[-1]:
            self._levels.append(width)
            return len(self._levels) - 1

        for depth, level in enumerate(self._levels):
            if level == width:
                del self._levels[depth + 1 :]
                return depth

        raise InvalidIndentationError(
            f"Indentation of {describe_indent(indent)} does not match any open level",
            line=line_number,
        )
