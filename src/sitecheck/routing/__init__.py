"""Route validation: static paths results and route module contracts."""

from sitecheck.routing.loader import load_route_module, load_static_paths_file
from sitecheck.routing.route import RouteData
from sitecheck.routing.validation import (
    has_static_paths_export,
    validate_dynamic_route_module,
    validate_static_paths_result,
)

__all__ = [
    "RouteData",
    "has_static_paths_export",
    "load_route_module",
    "load_static_paths_file",
    "validate_dynamic_route_module",
    "validate_static_paths_result",
]
