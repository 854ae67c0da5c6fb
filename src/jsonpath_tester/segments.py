"""Segment models produced by the path lexer."""

from __future__ import annotations

import re
import sys
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

_INDEX_RE = re.compile(r"[0-9]+")
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")
_QUOTES = "'\""
# Integers this long are out of range for any sequence.
_MAX_DIGITS = len(str(sys.maxsize))


class _SegmentNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ChildSegment(_SegmentNode):
    kind: Literal["child"] = "child"
    name: str


class RecursiveSegment(_SegmentNode):
    kind: Literal["recursive"] = "recursive"
    name: str


class WildcardSegment(_SegmentNode):
    kind: Literal["wildcard"] = "wildcard"


class IndexSegment(_SegmentNode):
    kind: Literal["index"] = "index"
    index: int = Field(ge=0)


class SliceSegment(_SegmentNode):
    kind: Literal["slice"] = "slice"
    start: int | None = None
    end: int | None = None


class KeySegment(_SegmentNode):
    kind: Literal["key"] = "key"
    name: str


class FilterSegment(_SegmentNode):
    kind: Literal["filter"] = "filter"
    expression: str


Segment: TypeAlias = Annotated[
    ChildSegment
    | RecursiveSegment
    | WildcardSegment
    | IndexSegment
    | SliceSegment
    | KeySegment
    | FilterSegment,
    Field(discriminator="kind"),
]


def strip_quotes(text: str) -> str:
    """Drop one leading and one trailing quote character, independently."""

    if text and text[0] in _QUOTES:
        text = text[1:]
    if text and text[-1] in _QUOTES:
        text = text[:-1]
    return text


def _to_int(text: str) -> int:
    """Convert a signed ASCII digit run, saturating at ``sys.maxsize``."""

    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) >= _MAX_DIGITS:
        return sign * sys.maxsize
    return sign * int(digits)


def _slice_bound(raw: str) -> int | None:
    if not raw:
        return None
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return 0
    return _to_int(match.group(1))


def classify_segment(token: str) -> Segment:
    """Turn a raw token from :func:`split_segments` into a segment model."""

    if token.startswith(".."):
        return RecursiveSegment(name=token[2:])

    if token.startswith("["):
        content = token[1:-1]
        if content == "*":
            return WildcardSegment()
        if _INDEX_RE.fullmatch(content):
            return IndexSegment(index=_to_int(content))
        if ":" in content:
            parts = content.split(":")
            return SliceSegment(start=_slice_bound(parts[0]), end=_slice_bound(parts[1]))
        if content.startswith("?"):
            return FilterSegment(expression=content)
        return KeySegment(name=strip_quotes(content))

    if token.startswith("."):
        name = token[1:]
        if name == "*":
            return WildcardSegment()
        return ChildSegment(name=name)

    raise ValueError(f"unrecognized path segment {token!r}")


__all__ = [
    "ChildSegment",
    "FilterSegment",
    "IndexSegment",
    "KeySegment",
    "RecursiveSegment",
    "Segment",
    "SliceSegment",
    "WildcardSegment",
    "classify_segment",
    "strip_quotes",
]
