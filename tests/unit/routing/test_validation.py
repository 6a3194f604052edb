"""
sitecheck — unit tests for static paths validation

File: tests/unit/routing/test_validation.py

What this test file should cover
- Hard shape failures for the result, each entry, and each entry's params.
- Soft warnings for suspicious parameter values, one per offending value.
- The get_static_paths export requirement for statically generated routes.
"""

from __future__ import annotations

import threading
import types

import pytest

from sitecheck.errors import IssueKind, ValidationError
from sitecheck.observability import CollectingWarningSink
from sitecheck.routing import (
    RouteData,
    has_static_paths_export,
    validate_dynamic_route_module,
    validate_static_paths_result,
)

ROUTE = RouteData(component="src/pages/blog/[slug].py", route="/blog/[slug]")


def _validate(result: object) -> CollectingWarningSink:
    sink = CollectingWarningSink()
    validate_static_paths_result(result, ROUTE, sink)
    return sink


def test_well_formed_result_is_accepted_without_warnings() -> None:
    result = [
        {"params": {"slug": "hello"}},
        {"params": {"slug": 2, "page": 1.5}},
        {"params": {"slug": None}, "props": {"title": "Draft"}},
    ]

    sink = _validate(result)

    assert len(sink) == 0


def test_tuple_result_is_a_sequence() -> None:
    assert len(_validate(({"params": {"slug": "a"}},))) == 0


@pytest.mark.parametrize("result", [{"params": {"slug": "a"}}, "slug", None, 3])
def test_non_sequence_result_is_rejected(result: object) -> None:
    with pytest.raises(ValidationError) as excinfo:
        _validate(result)

    assert excinfo.value.kind is IssueKind.NOT_A_SEQUENCE
    assert excinfo.value.location is not None
    assert excinfo.value.location.file == ROUTE.component


def test_mapping_result_message_names_the_type() -> None:
    with pytest.raises(ValidationError, match="Expected a list, got `dict`"):
        _validate({})


@pytest.mark.parametrize("entry", [None, ["params"], "slug"])
def test_non_mapping_entry_is_invalid_entry_shape(entry: object) -> None:
    with pytest.raises(ValidationError) as excinfo:
        _validate([{"params": {"slug": "a"}}, entry])

    assert excinfo.value.kind is IssueKind.INVALID_ENTRY_SHAPE
    assert "at index 1" in excinfo.value.issues[0].message


@pytest.mark.parametrize(
    "entry",
    [{"params": {}}, {}, {"params": None}, {"params": ["slug"]}, {"props": {"a": 1}}],
)
def test_missing_or_empty_params_is_rejected(entry: object) -> None:
    with pytest.raises(ValidationError) as excinfo:
        _validate([entry])

    assert excinfo.value.kind is IssueKind.MISSING_PARAMS


def test_empty_string_param_warns_once() -> None:
    sink = _validate([{"params": {"slug": ""}}])

    issues = sink.issues()
    assert [issue.kind for issue in issues] == [IssueKind.EMPTY_STRING_PARAM]
    assert "invalid path param: slug" in issues[0].message
    assert sink.warnings[0].label == "getStaticPaths"


def test_object_param_warns_invalid_type_once() -> None:
    sink = _validate([{"params": {"slug": {}}}])

    issues = sink.issues()
    assert [issue.kind for issue in issues] == [IssueKind.INVALID_PARAM_VALUE_TYPE]
    assert "but got `{}`" in issues[0].message


def test_boolean_param_is_not_a_number() -> None:
    sink = _validate([{"params": {"draft": True}}])

    assert [issue.kind for issue in sink.issues()] == [IssueKind.INVALID_PARAM_VALUE_TYPE]


def test_warnings_do_not_stop_validation_of_later_entries() -> None:
    result = [
        {"params": {"slug": ""}},
        {"params": {"slug": ["a", "b"]}},
        {"params": {"slug": "ok"}},
        {"params": {"slug": ""}},
    ]

    sink = _validate(result)

    assert [issue.kind for issue in sink.issues()] == [
        IssueKind.EMPTY_STRING_PARAM,
        IssueKind.INVALID_PARAM_VALUE_TYPE,
        IssueKind.EMPTY_STRING_PARAM,
    ]


def test_hard_failure_after_warnings_keeps_earlier_warnings() -> None:
    sink = CollectingWarningSink()

    with pytest.raises(ValidationError):
        validate_static_paths_result(
            [{"params": {"slug": ""}}, {"params": {}}], ROUTE, sink
        )

    assert [issue.kind for issue in sink.issues()] == [IssueKind.EMPTY_STRING_PARAM]


def test_validating_twice_yields_identical_warnings() -> None:
    result = [{"params": {"slug": ""}}, {"params": {"id": object()}}]

    first = _validate(result).issues()
    second = _validate(result).issues()

    assert first == second
    assert len(first) == 2


def test_result_is_not_mutated() -> None:
    result = [{"params": {"slug": ""}}]

    _validate(result)

    assert result == [{"params": {"slug": ""}}]


def test_concurrent_validations_share_one_sink() -> None:
    sink = CollectingWarningSink()
    result = [{"params": {"slug": ""}} for _ in range(25)]

    def _worker() -> None:
        validate_static_paths_result(result, ROUTE, sink)

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(sink) == 8 * 25
    assert {issue.kind for issue in sink.issues()} == {IssueKind.EMPTY_STRING_PARAM}


def _get_static_paths() -> list[dict[str, object]]:
    return [{"params": {"slug": "a"}}]


def test_static_route_without_export_is_rejected() -> None:
    module = types.ModuleType("blog_slug")

    with pytest.raises(ValidationError) as excinfo:
        validate_dynamic_route_module(module, ssr=False, route=ROUTE)

    assert excinfo.value.kind is IssueKind.MISSING_REQUIRED_EXPORT
    assert "get_static_paths() function is required" in excinfo.value.issues[0].message


def test_static_route_with_export_is_accepted() -> None:
    module = types.ModuleType("blog_slug")
    module.get_static_paths = _get_static_paths  # type: ignore[attr-defined]

    validate_dynamic_route_module(module, ssr=False, route=ROUTE)
    validate_dynamic_route_module(
        {"get_static_paths": _get_static_paths}, ssr=False, route=ROUTE
    )


def test_server_rendered_route_does_not_need_export() -> None:
    validate_dynamic_route_module({}, ssr=True, route=ROUTE)


def test_prerendered_route_needs_export_even_with_ssr() -> None:
    route = RouteData(component="src/pages/[id].py", prerender=True)

    with pytest.raises(ValidationError) as excinfo:
        validate_dynamic_route_module({"get_static_paths": None}, ssr=True, route=route)

    assert excinfo.value.kind is IssueKind.MISSING_REQUIRED_EXPORT


def test_has_static_paths_export_checks_mapping_and_attributes() -> None:
    assert has_static_paths_export({"get_static_paths": _get_static_paths})
    assert not has_static_paths_export({"other": _get_static_paths})
    assert not has_static_paths_export(object())


def test_route_data_requires_component() -> None:
    with pytest.raises(ValueError):
        RouteData(component="  ")
