"""Exceptions raised inside the evaluator.

None of these escape :func:`jsonpath_tester.evaluate`; the engine converts them
into the ``error`` field of its result.
"""

from __future__ import annotations


class JsonPathError(Exception):
    """Base class for evaluator errors."""


class PropertyNotFoundError(JsonPathError):
    """Raised when a bare property lookup misses on the root value."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Property '{name}' not found")


class FilterSyntaxError(JsonPathError):
    """Raised when a filter expression does not have the comparison shape."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(f"unsupported filter expression {expression!r}")


__all__ = ["FilterSyntaxError", "JsonPathError", "PropertyNotFoundError"]
