"""Parse confindent text into a document tree."""

from __future__ import annotations

import logging

from confindent.exceptions import ParseError
from confindent.indent import IndentTracker, measure_indent
from confindent.line import is_blank, iter_lines, split_line
from confindent.schemas import Confindent, Value

logger = logging.getLogger(__name__)


def parse_text(source: str) -> Confindent:
    """Parse a whole document.

    Each non-blank line becomes a Value. Its parent is the closest earlier
    line at a shallower depth, tracked on a stack of (depth, Value) pairs.
    Blank lines are skipped and leave the stack untouched.

    Args:
        source: Decoded document text.

    Returns:
        The parsed document.

    Raises:
        MixedIndentationError: If tabs and spaces are mixed in one block.
        InvalidIndentationError: If a line is indented before the first root
            line, or to a width between two open levels.
        EmptyKeyError: If a line has no key.
    """
    document = Confindent()
    tracker = IndentTracker()
    stack: list[tuple[int, Value]] = []
    count = 0

    for line_number, line in iter_lines(source):
        if is_blank(line):
            continue

        indent, content = measure_indent(line)
        try:
            depth = tracker.resolve(indent, line_number)
            key, value = split_line(content, line_number)
        except ParseError as exc:
            logger.debug("Rejected line %d %r: %s", line_number, line, exc)
            raise

        node = Value(key=key, value=value)

        while stack and stack[-1][0] >= depth:
            stack.pop()

        if stack:
            stack[-1][1].nodes.append(node)
        else:
            document.nodes.append(node)

        stack.append((depth, node))
        count += 1

    logger.debug("Parsed %d values, %d at root", count, len(document.nodes))
    return document
