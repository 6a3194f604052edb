"""
sitecheck — static paths result and route module validation.

File: src/sitecheck/routing/validation.py

Purpose
- Check the shape of the value a route's ``get_static_paths`` returned.
- Check that statically generated dynamic routes export ``get_static_paths``.

Functional requirements
- Shape violations (result, entry, params) raise immediately and stop validation.
- Suspicious parameter values only produce warnings, and every entry is still checked.
- The result is accepted as-is; nothing is transformed or returned.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from sitecheck.constants import STATIC_PATHS_EXPORT, STATIC_PATHS_WARNING_LABEL
from sitecheck.errors import IssueKind, ValidationError, ValidationIssue
from sitecheck.observability.sinks import WarningSink
from sitecheck.routing.route import RouteData

logger = logging.getLogger(__name__)


def validate_dynamic_route_module(module: object, *, ssr: bool, route: RouteData) -> None:
    """Raise ``MissingRequiredExport`` when a prerendered route lacks ``get_static_paths``."""

    if route.requires_static_paths(ssr=ssr) and not has_static_paths_export(module):
        raise ValidationError.single(
            IssueKind.MISSING_REQUIRED_EXPORT,
            f"{STATIC_PATHS_EXPORT}() function is required for dynamic routes. "
            "Make sure that you export it from the route module.",
            location=route.location,
        )


def has_static_paths_export(module: object) -> bool:
    if isinstance(module, Mapping):
        export = module.get(STATIC_PATHS_EXPORT)
    else:
        export = getattr(module, STATIC_PATHS_EXPORT, None)
    return export is not None


def validate_static_paths_result(
    result: object,
    route: RouteData,
    warnings: WarningSink,
) -> None:
    """Validate a ``get_static_paths`` result, forwarding soft issues to ``warnings``."""

    if not isinstance(result, (list, tuple)):
        raise ValidationError.single(
            IssueKind.NOT_A_SEQUENCE,
            f"Invalid type returned by {STATIC_PATHS_EXPORT}. Expected a list, "
            f"got `{_type_name(result)}`",
            location=route.location,
        )

    for index, entry in enumerate(result):
        if not isinstance(entry, Mapping):
            raise ValidationError.single(
                IssueKind.INVALID_ENTRY_SHAPE,
                f"Invalid entry returned by {STATIC_PATHS_EXPORT} at index {index}. "
                f"Expected a mapping, got `{_type_name(entry)}`",
                location=route.location,
            )

        params = entry.get("params")
        if not isinstance(params, Mapping) or not params:
            raise ValidationError.single(
                IssueKind.MISSING_PARAMS,
                f"Missing or empty 'params' in entry {index} returned by {STATIC_PATHS_EXPORT}.",
                location=route.location,
            )

        for key, value in params.items():
            _check_param_value(str(key), value, route, warnings)

    logger.debug("validated %d static path entries for %s", len(result), route.component)


def _check_param_value(
    key: str,
    value: object,
    route: RouteData,
    warnings: WarningSink,
) -> None:
    if not _is_valid_param_type(value):
        warnings.warn(
            STATIC_PATHS_WARNING_LABEL,
            ValidationIssue(
                kind=IssueKind.INVALID_PARAM_VALUE_TYPE,
                message=(
                    f"invalid path param: {key}. A string, number or None value was "
                    f"expected, but got `{_printed(value)}`."
                ),
                location=route.location,
            ),
        )
    if isinstance(value, str) and value == "":
        warnings.warn(
            STATIC_PATHS_WARNING_LABEL,
            ValidationIssue(
                kind=IssueKind.EMPTY_STRING_PARAM,
                message=(
                    f"invalid path param: {key}. `None` expected for an optional param, "
                    "but got empty string."
                ),
                location=route.location,
            ),
        )


def _is_valid_param_type(value: object) -> bool:
    if value is None or isinstance(value, str):
        return True
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _printed(value: object) -> str:
    try:
        return json.dumps(value, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


def _type_name(value: object) -> str:
    if value is None:
        return "None"
    return type(value).__name__


__all__ = [
    "has_static_paths_export",
    "validate_dynamic_route_module",
    "validate_static_paths_result",
]
