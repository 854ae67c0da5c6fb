"""Path evaluation over an in-memory JSON value."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import JSONPATH_TESTER_CONFIG
from .errors import PropertyNotFoundError
from .filters import matches_filter
from .lexer import ROOT_SIGILS, normalize_path, parse_segments
from .runtime.logging import get_logger
from .segments import (
    ChildSegment,
    FilterSegment,
    IndexSegment,
    KeySegment,
    RecursiveSegment,
    Segment,
    SliceSegment,
    WildcardSegment,
)
from .values import JSONValue, children, is_mapping, is_sequence

logger = get_logger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """Matched values in discovery order, or an error with no matches."""

    results: list[JSONValue] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def ok(cls, results: list[JSONValue]) -> EvaluationResult:
        return cls(results=results)

    @classmethod
    def failure(cls, message: str) -> EvaluationResult:
        return cls(results=[], error=message)

    @property
    def is_error(self) -> bool:
        return self.error is not None


def recursive_search(value: JSONValue, key: str) -> list[JSONValue]:
    """Collect every value stored under ``key`` at any depth of ``value``.

    Pre-order depth-first: a mapping's own ``key`` is collected before its
    children are visited.
    """

    found: list[JSONValue] = []
    stack: list[JSONValue] = [value]
    while stack:
        current = stack.pop()
        if is_mapping(current) and key in current:
            found.append(current[key])
        stack.extend(reversed(children(current)))
    return found


def _slice(
    items: list[JSONValue] | tuple[JSONValue, ...], segment: SliceSegment
) -> list[JSONValue]:
    start = 0 if segment.start is None else max(segment.start, 0)
    end = len(items) if segment.end is None else max(segment.end, 0)
    return list(items[start:end])


def apply_segment(segment: Segment, item: JSONValue) -> list[JSONValue]:
    """Return the matches ``segment`` produces for a single working-set item."""

    if isinstance(segment, RecursiveSegment):
        return recursive_search(item, segment.name)
    if isinstance(segment, WildcardSegment):
        return children(item)
    if isinstance(segment, IndexSegment):
        if is_sequence(item) and segment.index < len(item):
            return [item[segment.index]]
        return []
    if isinstance(segment, SliceSegment):
        if is_sequence(item):
            return _slice(item, segment)
        return []
    if isinstance(segment, FilterSegment):
        if is_sequence(item):
            return [elem for elem in item if matches_filter(elem, segment.expression)]
        return []
    if isinstance(segment, (ChildSegment, KeySegment)):
        if is_mapping(item) and segment.name in item:
            return [item[segment.name]]
        return []

    raise TypeError(f"unsupported segment {segment!r}")


def _lookup_root(data: JSONValue, name: str) -> list[JSONValue]:
    if is_mapping(data) and name in data:
        return [data[name]]
    raise PropertyNotFoundError(name)


def _traverse(data: JSONValue, segments: list[Segment]) -> list[JSONValue]:
    current: list[JSONValue] = [data]
    for segment in segments:
        current = [match for item in current for match in apply_segment(segment, item)]
        if JSONPATH_TESTER_CONFIG.trace_segments:
            logger.debug("segment %s -> %d match(es)", segment, len(current))
        if not current:
            break
    return current


def evaluate(data: JSONValue, path: str) -> EvaluationResult:
    """Evaluate ``path`` against ``data``.

    Never raises: a root-level property miss or any unexpected failure is
    reported through ``EvaluationResult.error``.
    """

    try:
        stripped = path.strip()
        if not stripped:
            return EvaluationResult.ok([])
        if stripped in ROOT_SIGILS:
            return EvaluationResult.ok([data])

        normalized = normalize_path(stripped)
        segments = parse_segments(normalized)
        if not segments and normalized.strip():
            return EvaluationResult.ok(_lookup_root(data, normalized))
        return EvaluationResult.ok(_traverse(data, segments))
    except PropertyNotFoundError as exc:
        return EvaluationResult.failure(str(exc))
    except Exception as exc:
        logger.warning("evaluating %r failed: %s", path, exc, exc_info=True)
        return EvaluationResult.failure(str(exc))


__all__ = ["EvaluationResult", "apply_segment", "evaluate", "recursive_search"]
