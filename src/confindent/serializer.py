"""Serialize document trees back to confindent text."""

from __future__ import annotations

from typing import Iterable

from confindent import config
from confindent.schemas import Confindent, Value


def serialize(document: Confindent, indent: str | None = None) -> str:
    """Render a document as text, one line per Value in pre-order.

    The source indentation is not kept: every level is written with the same
    indent unit, a tab unless configured otherwise. A missing value writes
    only the key; an empty value writes the key and a single space.

    Args:
        document: The document to render.
        indent: Indent unit written once per depth level. Defaults to
            CONFINDENT_INDENT.

    Returns:
        The document text, each line terminated by a newline.

    Raises:
        ValueError: If the indent unit is not a run of one whitespace
            character (spaces or tabs).
    """
    unit = config.CONFINDENT_INDENT if indent is None else indent
    if not unit or unit.strip(unit[0]) or unit[0] not in " \t":
        raise ValueError(f"Indent unit must be spaces or tabs, got {unit!r}")

    lines: list[str] = []
    _render_nodes(document.nodes, unit, 0, lines)
    return "".join(line + "\n" for line in lines)


def _render_nodes(nodes: Iterable[Value], unit: str, depth: int, lines: list[str]) -> None:
    for node in nodes:
        line = unit * depth + node.key
        if node.value is not None:
            line += " " + node.value
        lines.append(line)
        _render_nodes(node.nodes, unit, depth + 1, lines)
