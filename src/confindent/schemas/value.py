"""Document tree models."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable, get_origin

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator
from pydantic.errors import PydanticSchemaGenerationError

from confindent import config
from confindent.exceptions import ValueParseError
from confindent.line import is_blank, join_line


class ConfParent:
    """Lookup and append operations shared by Value and Confindent.

    Subclasses provide a ``nodes`` list holding their direct children in
    document order.
    """

    def child(self, key: str) -> Value | None:
        """Get the first direct child with exactly the provided key."""
        for node in self.nodes:
            if node.key == key:
                return node
        return None

    def child_mut(self, key: str) -> Value | None:
        """Get the first direct child with the provided key for modification.

        The returned Value is the live node, so ``create`` on it appends to
        this tree.
        """
        return self.child(key)

    def children(self, key: str) -> list[Value]:
        """Get all direct children with the provided key, in document order."""
        return [node for node in self.nodes if node.key == key]

    def has_child(self, key: str) -> bool:
        """Check whether any direct child has the provided key."""
        return any(node.key == key for node in self.nodes)

    def child_value(self, key: str) -> str | None:
        """Get the value of the first child with the provided key.

        Returns None both when there is no such child and when the child has
        no value.
        """
        node = self.child(key)
        if node is None:
            return None
        return node.value

    def child_parse(self, key: str, target: Any = str) -> Any:
        """Parse the value of the first child with the provided key.

        A missing child is handled like a child without a value: the empty
        string is handed to the conversion. See Value.parse.

        Raises:
            ValueParseError: If the conversion fails.
        """
        node = self.child(key)
        raw = node.value if node is not None else None
        return convert_value("" if raw is None else raw, target)

    def get(self, path: str) -> str | None:
        """Get a nested value by a delimited path of keys, e.g. ``"Host/User"``."""
        return self.get_delim(path, config.CONFINDENT_PATH_DELIMITER)

    def get_delim(self, path: str, delimiter: str) -> str | None:
        """Get a nested value by a path of keys separated by ``delimiter``.

        Each step follows the first child with the matching key.

        Raises:
            ValueError: If ``delimiter`` is empty.
        """
        if not delimiter:
            err = "path delimiter cannot be empty"
            raise ValueError(err)
        current: ConfParent = self
        for key in path.split(delimiter):
            node = current.child(key)
            if node is None:
                return None
            current = node
        if isinstance(current, Value):
            return current.value
        return None

    def create(self, key: str, value: str | None = None) -> Value:
        """Append a new child and return it."""
        node = Value(key=key, value=value)
        self.nodes.append(node)
        return node


class Value(ConfParent, BaseModel):
    """A single key with an optional value and ordered children.

    ``value`` is None for a bare key (``Key``) and ``""`` for a key followed
    by a single space (``Key ``).
    """

    model_config = ConfigDict(validate_assignment=True)

    key: str
    value: str | None = None
    nodes: list[Value] = Field(default_factory=list)

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Validate that ``key`` can be written back on a single line."""
        if not v:
            err = "key cannot be empty"
            raise ValueError(err)
        if " " in v or "\n" in v:
            err = "key cannot contain spaces or newlines"
            raise ValueError(err)
        if v.startswith("\t"):
            err = "key cannot start with a tab"
            raise ValueError(err)
        return v

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str | None) -> str | None:
        """Validate that ``value`` fits on a single line."""
        if v is not None and "\n" in v:
            err = "value cannot contain newlines"
            raise ValueError(err)
        return v

    @model_validator(mode="after")
    def validate_line(self) -> Value:
        """Validate that the key and value read back as the same line.

        The written line must not be blank and must not end with a carriage
        return, both of which the parser drops.
        """
        line = join_line(self.key, self.value)
        if is_blank(line):
            err = "key and value cannot be whitespace only"
            raise ValueError(err)
        if line.endswith("\r"):
            err = "line cannot end with a carriage return"
            raise ValueError(err)
        return self

    def parse(self, target: Any = str) -> Any:
        """Convert this node's value into ``target``.

        A missing value is converted as the empty string, so whether a bare
        key is acceptable is up to the target type.

        Args:
            target: A type or type annotation (converted by pydantic in lax
                mode, so ``"256"`` becomes ``256`` and ``"yes"`` becomes
                ``True``), or any callable taking the string.

        Returns:
            The converted value.

        Raises:
            ValueParseError: If the conversion fails. The original error is
                chained as ``__cause__``.
        """
        return convert_value("" if self.value is None else self.value, target)


class Confindent(ConfParent, BaseModel):
    """A parsed configuration document holding the unindented values."""

    model_config = ConfigDict(validate_assignment=True)

    nodes: list[Value] = Field(default_factory=list)

    @classmethod
    def from_str(cls, source: str) -> Confindent:
        """Parse a document from text. See parser.parse_text."""
        from confindent.parser import parse_text

        return parse_text(source)

    def __str__(self) -> str:
        from confindent.serializer import serialize

        return serialize(self)


def _is_plain_callable(target: Any) -> bool:
    return callable(target) and not isinstance(target, type) and get_origin(target) is None


@lru_cache(maxsize=128)
def _converter(target: Any) -> Callable[[str], Any]:
    if _is_plain_callable(target):
        return target
    try:
        return TypeAdapter(target).validate_python
    except PydanticSchemaGenerationError:
        # Classes pydantic knows nothing about are built from the string.
        if callable(target):
            return target
        raise


def convert_value(raw: str, target: Any) -> Any:
    """Convert a raw string with a callable or through a pydantic TypeAdapter.

    Types pydantic cannot build a schema for are called with the string,
    like any other callable.

    Raises:
        ValueParseError: If the conversion raises, or no conversion exists
            for ``target``.
    """
    try:
        return _converter(target)(raw)
    except Exception as exc:
        raise ValueParseError(raw, target) from exc
