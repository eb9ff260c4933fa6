"""confindent: read and write indentation-based configuration trees."""

from confindent.exceptions import (
    ConfindentError,
    EmptyKeyError,
    FileReadError,
    InvalidIndentationError,
    MixedIndentationError,
    ParseError,
    ParseErrorKind,
    ValueParseError,
)
from confindent.files import load, load_async, save, save_async
from confindent.parser import parse_text
from confindent.schemas import ConfParent, Confindent, Value
from confindent.serializer import serialize

__all__ = [
    "ConfParent",
    "Confindent",
    "ConfindentError",
    "EmptyKeyError",
    "FileReadError",
    "InvalidIndentationError",
    "MixedIndentationError",
    "ParseError",
    "ParseErrorKind",
    "Value",
    "ValueParseError",
    "load",
    "load_async",
    "parse_text",
    "save",
    "save_async",
    "serialize",
]
