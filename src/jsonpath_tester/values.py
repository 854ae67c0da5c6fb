"""JSON value aliases and shape helpers shared by the evaluator."""

from __future__ import annotations

from typing import TypeAlias, TypeGuard

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = (
    JSONScalar | list["JSONValue"] | tuple["JSONValue", ...] | dict[str, "JSONValue"]
)


class _Missing:
    """Sentinel for a property absent from a mapping."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: _Missing = _Missing()


def is_mapping(value: object) -> TypeGuard[dict[str, JSONValue]]:
    return isinstance(value, dict)


def is_sequence(value: object) -> TypeGuard[list[JSONValue] | tuple[JSONValue, ...]]:
    return isinstance(value, (list, tuple))


def children(value: object) -> list[JSONValue]:
    """Return the direct members of a sequence or the values of a mapping.

    Scalars have no children.
    """

    if is_sequence(value):
        return list(value)
    if is_mapping(value):
        return list(value.values())
    return []


def get_key(value: object, key: str) -> JSONValue | _Missing:
    if is_mapping(value) and key in value:
        return value[key]
    return MISSING


__all__ = [
    "MISSING",
    "JSONScalar",
    "JSONValue",
    "children",
    "get_key",
    "is_mapping",
    "is_sequence",
]
