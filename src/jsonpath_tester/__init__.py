"""
jsonpath-tester: best-effort JSONPath evaluation for interactive tools.

This package uses a src-layout. Import the package as `jsonpath_tester`.
"""

from importlib.metadata import version

__version__ = version("jsonpath-tester")

from .config import JSONPATH_TESTER_CONFIG, JsonPathTesterConfig
from .engine import EvaluationResult, apply_segment, evaluate, recursive_search
from .errors import FilterSyntaxError, JsonPathError, PropertyNotFoundError
from .filters import FilterExpression, matches_filter, parse_filter
from .lexer import normalize_path, parse_segments, split_segments
from .runtime import configure_logging, get_logger
from .segments import (
    ChildSegment,
    FilterSegment,
    IndexSegment,
    KeySegment,
    RecursiveSegment,
    Segment,
    SliceSegment,
    WildcardSegment,
    classify_segment,
)
from .values import JSONScalar, JSONValue

__all__ = [
    "__version__",
    "JSONPATH_TESTER_CONFIG",
    "ChildSegment",
    "EvaluationResult",
    "FilterExpression",
    "FilterSegment",
    "FilterSyntaxError",
    "IndexSegment",
    "JSONScalar",
    "JSONValue",
    "JsonPathError",
    "JsonPathTesterConfig",
    "KeySegment",
    "PropertyNotFoundError",
    "RecursiveSegment",
    "Segment",
    "SliceSegment",
    "WildcardSegment",
    "apply_segment",
    "classify_segment",
    "configure_logging",
    "evaluate",
    "get_logger",
    "matches_filter",
    "normalize_path",
    "parse_filter",
    "parse_segments",
    "recursive_search",
    "split_segments",
]
