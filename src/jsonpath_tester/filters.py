"""Single-comparison filter predicates for ``[?(...)]`` segments."""

from __future__ import annotations

import math
import operator
import re
from collections.abc import Callable
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict

from .errors import FilterSyntaxError
from .runtime.logging import get_logger
from .segments import strip_quotes
from .values import MISSING, get_key, is_mapping

logger = get_logger(__name__)

Operator: TypeAlias = Literal["==", "!=", ">", "<", ">=", "<="]
FilterLiteral: TypeAlias = int | float | str

# Two-character operators must precede their one-character prefixes.
_FILTER_RE = re.compile(r"@\.(\w+)\s*(==|!=|>=|<=|>|<)\s*(.+)", re.ASCII)
_FILTER_PREFIX = "?("
_FILTER_SUFFIX = ")"

_ORDERINGS: dict[str, Callable[[object, object], bool]] = {
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
}


class FilterExpression(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    prop: str
    op: Operator
    literal: FilterLiteral


def strip_filter(raw: str) -> str:
    """Remove a leading ``?(`` and a trailing ``)`` when present."""

    expression = raw
    if expression.startswith(_FILTER_PREFIX):
        expression = expression[len(_FILTER_PREFIX) :]
    if expression.endswith(_FILTER_SUFFIX):
        expression = expression[: -len(_FILTER_SUFFIX)]
    return expression


def parse_number(raw: str) -> int | float | None:
    """Parse ``raw`` as an int or float, or return ``None``.

    Empty text, non-ASCII digits, digit separators and NaN are not numbers
    here.
    """

    if not raw or not raw.isascii() or "_" in raw:
        return None
    try:
        if "." in raw or "e" in raw or "E" in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        try:
            parsed = float(raw)
        except ValueError:
            return None
    if math.isnan(parsed):
        return None
    return parsed


def coerce_literal(raw: str) -> FilterLiteral:
    text = strip_quotes(raw.strip())
    number = parse_number(text)
    if number is None:
        return text
    return number


def parse_filter(raw: str) -> FilterExpression:
    """Parse ``@.prop <op> literal`` out of a filter segment's content.

    Raises ``FilterSyntaxError`` when no comparison can be found.
    """

    expression = strip_filter(raw)
    match = _FILTER_RE.search(expression)
    if match is None:
        raise FilterSyntaxError(expression)

    prop, op, literal = match.groups()
    return FilterExpression(prop=prop, op=op, literal=coerce_literal(literal))


def _to_number(value: object) -> float:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        parsed = parse_number(value.strip())
        if parsed is not None:
            return parsed
    return math.nan


def loose_equal(actual: object, expected: FilterLiteral) -> bool:
    """Compare a property value with a filter literal.

    Numeric literals match numbers, booleans (as 0/1) and numeric strings;
    string literals only match equal strings.
    """

    if actual is MISSING or actual is None:
        return False
    if isinstance(expected, str):
        return isinstance(actual, str) and actual == expected
    if isinstance(actual, (str, bool, int, float)):
        return _to_number(actual) == expected
    return False


def ordered(actual: object, op: str, expected: FilterLiteral) -> bool:
    compare = _ORDERINGS[op]
    if isinstance(actual, str) and isinstance(expected, str):
        return compare(actual, expected)
    # NaN on either side makes every ordering false.
    return compare(_to_number(actual), _to_number(expected))


def evaluate_filter(item: object, expression: FilterExpression) -> bool:
    actual = get_key(item, expression.prop)
    if expression.op == "==":
        return loose_equal(actual, expression.literal)
    if expression.op == "!=":
        return not loose_equal(actual, expression.literal)
    return ordered(actual, expression.op, expression.literal)


def matches_filter(item: object, raw: str) -> bool:
    """Return whether ``item`` passes the filter segment content ``raw``.

    Unrecognized filters, non-mapping items and evaluation failures all pass.
    """

    try:
        if "@." not in strip_filter(raw) or not is_mapping(item):
            return True
        try:
            expression = parse_filter(raw)
        except FilterSyntaxError as exc:
            logger.debug("filter passes everything: %s", exc)
            return True
        return evaluate_filter(item, expression)
    except Exception:
        logger.debug("filter %r failed; treating as pass", raw, exc_info=True)
        return True


__all__ = [
    "FilterExpression",
    "FilterLiteral",
    "Operator",
    "coerce_literal",
    "evaluate_filter",
    "loose_equal",
    "matches_filter",
    "ordered",
    "parse_filter",
    "parse_number",
    "strip_filter",
]
