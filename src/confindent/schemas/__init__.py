"""Shared schemas for confindent."""

from confindent.schemas.value import ConfParent, Confindent, Value

__all__ = ["ConfParent", "Confindent", "Value"]
