import logging

import pytest

from jsonpath_tester import engine
from jsonpath_tester.config import JsonPathTesterConfig
from jsonpath_tester.engine import EvaluationResult, evaluate, recursive_search
from jsonpath_tester.segments import Segment

STORE = {
    "store": {
        "book": [
            {"title": "Sayings", "price": 8.95, "category": "reference"},
            {"title": "Sword", "price": 12.99, "category": "fiction"},
            {"title": "Moby Dick", "price": 8.99, "category": "fiction"},
        ],
        "bicycle": {"color": "red", "price": 19.95},
    }
}


@pytest.mark.parametrize("value", [None, 1, "s", [1, 2], {"a": 1}, True])
@pytest.mark.parametrize("path", ["$", "@", "  $  "])
def test_root_shorthand_returns_value(value: object, path: str) -> None:
    assert evaluate(value, path) == EvaluationResult(results=[value], error=None)


@pytest.mark.parametrize("path", ["", "   ", "\t\n"])
def test_blank_path_returns_nothing(path: str) -> None:
    assert evaluate({"a": 1}, path) == EvaluationResult(results=[], error=None)


def test_dot_children() -> None:
    assert evaluate({"a": {"b": 5}}, "$.a.b").results == [5]
    assert evaluate({"a": {"b": 5}}, "@.a.b").results == [5]


def test_bracket_wildcard_keeps_order() -> None:
    assert evaluate({"items": [1, 2, 3]}, "$.items[*]").results == [1, 2, 3]


def test_dot_wildcard_on_mapping_and_scalar() -> None:
    data = {"obj": {"x": 1, "y": 2}, "n": 3}

    assert evaluate(data, "$.obj.*").results == [1, 2]
    assert evaluate(data, "$.n.*").results == []


def test_recursive_descent_discovery_order() -> None:
    data = {"a": {"name": "x"}, "b": [{"name": "y"}]}

    assert evaluate(data, "$..name").results == ["x", "y"]


def test_recursive_descent_collects_own_key_before_children() -> None:
    data = {"name": "a", "child": {"name": {"name": "c"}}, "list": [{"name": "d"}]}

    assert evaluate(data, "$..name").results == [
        "a",
        {"name": "c"},
        "c",
        "d",
    ]


def test_recursive_descent_then_child() -> None:
    assert evaluate(STORE, "$..book[0].title").results == ["Sayings"]
    assert evaluate(STORE, "$.store..price").results == [8.95, 12.99, 8.99, 19.95]


def test_recursive_search_survives_deep_documents() -> None:
    depth = 5000
    data: dict = {}
    cursor = data
    for level in range(depth):
        cursor["level"] = level
        cursor["next"] = {}
        cursor = cursor["next"]

    found = recursive_search(data, "level")

    assert len(found) == depth
    assert found[0] == 0
    assert found[-1] == depth - 1


def test_index_and_out_of_range() -> None:
    data = {"items": [10, 20, 30]}

    assert evaluate(data, "$.items[1]").results == [20]
    assert evaluate(data, "$.items[10]") == EvaluationResult(results=[], error=None)
    assert evaluate(data, "$.items[-1]").results == []


def test_huge_index_and_slice_bounds_are_soft_misses() -> None:
    data = {"items": [1, 2, 3]}
    huge = "1" * 5000

    assert evaluate(data, f"$.items[{huge}]") == EvaluationResult()
    assert evaluate(data, f"$.items[{huge}:]") == EvaluationResult()
    assert evaluate(data, f"$.items[:{huge}]").results == [1, 2, 3]
    assert evaluate(data, f"$.items[-{huge}:2]").results == [1, 2]


def test_dot_names_do_not_index_sequences() -> None:
    data = {"items": [10, 20, 30]}

    assert evaluate(data, "$.items.0") == EvaluationResult(results=[], error=None)
    assert evaluate(data, "$.items.length").results == []
    assert evaluate(data, "$.items['0']").results == []


def test_slices() -> None:
    data = {"items": [10, 20, 30, 40]}

    assert evaluate(data, "$.items[1:3]").results == [20, 30]
    assert evaluate(data, "$.items[:2]").results == [10, 20]
    assert evaluate(data, "$.items[2:]").results == [30, 40]
    assert evaluate(data, "$.items[1:100]").results == [20, 30, 40]
    assert evaluate(data, "$.items[-2:]").results == [10, 20, 30, 40]
    assert evaluate(data, "$.items[3:1]").results == []


def test_slice_and_index_ignore_mappings() -> None:
    data = {"obj": {"0": "zero"}}

    assert evaluate(data, "$.obj[0]").results == []
    assert evaluate(data, "$.obj[0:1]").results == []


def test_tuples_are_sequences() -> None:
    assert evaluate({"items": (1, 2, 3)}, "$.items[1]").results == [2]
    assert evaluate({"items": (1, 2, 3)}, "$.items[0:2]").results == [1, 2]


def test_filter_segment() -> None:
    data = {"items": [{"age": 25}, {"age": 35}]}

    assert evaluate(data, "$.items[?(@.age > 30)]").results == [{"age": 35}]


def test_filter_by_string_then_child() -> None:
    result = evaluate(STORE, "$.store.book[?(@.category == 'fiction')].title")

    assert result.results == ["Sword", "Moby Dick"]


def test_unrecognized_filter_keeps_everything() -> None:
    data = {"items": [{"a": 1}, 2, "x"]}

    assert evaluate(data, "$.items[?(@.a)]").results == [{"a": 1}, 2, "x"]


def test_filter_on_mapping_contributes_nothing() -> None:
    assert evaluate({"obj": {"a": 1}}, "$.obj[?(@.a == 1)]").results == []


def test_bracket_keys() -> None:
    data = {"a b": 1, "c.d": 2, "plain": 3}

    assert evaluate(data, "$['a b']").results == [1]
    assert evaluate(data, '$["c.d"]').results == [2]
    assert evaluate(data, "$[plain]").results == [3]


def test_missing_property_mid_path_is_not_an_error() -> None:
    assert evaluate({}, "$.missing") == EvaluationResult(results=[], error=None)
    assert evaluate(STORE, "$.store.missing[*]..title") == EvaluationResult()


def test_bare_property_fallback() -> None:
    assert evaluate({"foo": 1}, "foo") == EvaluationResult(results=[1], error=None)
    assert evaluate({"foo": 1}, "$foo").results == [1]


def test_bare_property_fallback_miss_is_an_error() -> None:
    result = evaluate({}, "foo")

    assert result.results == []
    assert result.error == "Property 'foo' not found"
    assert result.is_error is True
    assert evaluate([1, 2], "foo").error == "Property 'foo' not found"


def test_sigils_only_returns_root() -> None:
    assert evaluate({"a": 1}, "$@").results == [{"a": 1}]


def test_evaluation_is_repeatable() -> None:
    first = evaluate(STORE, "$..price")
    second = evaluate(STORE, "$..price")

    assert first == second
    assert STORE["store"]["bicycle"] == {"color": "red", "price": 19.95}


def test_unexpected_failure_becomes_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(segment: Segment, item: object) -> list:
        raise RuntimeError("boom")

    monkeypatch.setattr(engine, "apply_segment", boom)

    assert evaluate({"a": 1}, "$.a") == EvaluationResult(results=[], error="boom")


def test_non_string_path_becomes_error() -> None:
    result = evaluate({"a": 1}, None)  # type: ignore[arg-type]

    assert result.results == []
    assert result.error is not None


def test_trace_segments_logs_each_step(
    jsonpath_tester_config: JsonPathTesterConfig,
    caplog: pytest.LogCaptureFixture,
) -> None:
    jsonpath_tester_config.trace_segments = True
    caplog.set_level(logging.DEBUG, logger="jsonpath_tester")

    evaluate({"a": {"b": 5}}, "$.a.b")

    messages = [record.getMessage() for record in caplog.records]
    assert len([message for message in messages if "match(es)" in message]) == 2
