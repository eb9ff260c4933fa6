"""Custom exceptions for confindent."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ParseErrorKind(str, Enum):
    """Enumeration of the reasons a document can fail to parse."""

    MIXED_INDENTATION = "mixed_indentation"
    INVALID_INDENTATION = "invalid_indentation"
    EMPTY_KEY = "empty_key"


class ConfindentError(Exception):
    """Base exception for confindent operations."""


class ParseError(ConfindentError, ValueError):
    """Error while parsing a document.

    Attributes:
        line: 1-based number of the offending line.
        kind: What went wrong, as a ParseErrorKind.
    """

    kind: ParseErrorKind

    def __init__(self, message: str, *, line: int) -> None:
        super().__init__(f"{message} (line {line})")
        self.line = line


class MixedIndentationError(ParseError):
    """Tabs and spaces were mixed within one indentation chain."""

    kind = ParseErrorKind.MIXED_INDENTATION


class InvalidIndentationError(ParseError):
    """Indentation does not match any open level."""

    kind = ParseErrorKind.INVALID_INDENTATION


class EmptyKeyError(ParseError):
    """A non-blank line has no key."""

    kind = ParseErrorKind.EMPTY_KEY


class ValueParseError(ConfindentError, ValueError):
    """Converting a value into the requested type failed.

    The original conversion error is available as ``__cause__``.
    """

    def __init__(self, value: str, target: Any) -> None:
        name = getattr(target, "__name__", repr(target))
        super().__init__(f"Failed to parse configuration value {value!r} as {name}")
        self.value = value
        self.target = target


class FileReadError(ConfindentError):
    """A configuration file could not be read."""
