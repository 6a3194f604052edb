"""Command-line interface router for sitecheck."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from sitecheck.config import SiteCheckSettings, load_settings
from sitecheck.constants import STATIC_PATHS_EXPORT
from sitecheck.env import EnvSchema, dump_schema, load_schema_file, validate_env_schema
from sitecheck.errors import ValidationError, ValidationIssue
from sitecheck.observability import (
    CollectingWarningSink,
    LoggingWarningSink,
    setup_logging,
)
from sitecheck.routing import (
    RouteData,
    load_route_module,
    load_static_paths_file,
    validate_dynamic_route_module,
    validate_static_paths_result,
)
from sitecheck.ui.render import CLIRenderer, create_renderer

logger = logging.getLogger("sitecheck.cli")

EXIT_SUCCESS = 0
EXIT_REJECTED = 1


class _TeeWarningSink:
    """Log each warning and keep it for the final summary."""

    def __init__(self) -> None:
        self.collected = CollectingWarningSink()
        self._logging = LoggingWarningSink()

    def warn(self, label: str, issue: ValidationIssue) -> None:
        self.collected.warn(label, issue)
        self._logging.warn(label, issue)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse command router."""

    parser = argparse.ArgumentParser(
        prog="sitecheck",
        description=(
            "sitecheck — validate env variable schemas and static route paths.\n\n"
            "Common workflows:\n"
            "  sitecheck env env.schema.yaml            Validate an env schema file\n"
            "  sitecheck paths paths.json --route P     Validate a get_static_paths result\n"
            "  sitecheck route pages/post.py            Check a route module and its paths\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to sitecheck.toml (default: ./sitecheck.toml if present).",
    )
    parser.add_argument("--log-level", default=None, help="Override the log level.")
    parser.add_argument(
        "--log-format",
        choices=("text", "json"),
        default=None,
        help="Log output format.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Show fix hints for every issue.",
    )
    parser.add_argument(
        "--ssr",
        action="store_const",
        const=True,
        default=None,
        help="Treat routes as server rendered unless they opt into prerendering.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    env_parser = subparsers.add_parser("env", help="Validate an env schema file.")
    env_parser.add_argument("schema_file", help="Schema file (.toml, .yaml, .yml or .json).")
    env_parser.add_argument(
        "--public-prefix",
        default=None,
        help="Name prefix required for public variables (default: PUBLIC_).",
    )
    env_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the validated schema as JSON, with secret defaults redacted.",
    )
    env_parser.set_defaults(handler=_cmd_env)

    paths_parser = subparsers.add_parser(
        "paths", help="Validate a recorded get_static_paths result."
    )
    paths_parser.add_argument("result_file", help="Result file (.json, .yaml or .yml).")
    paths_parser.add_argument(
        "--route",
        default=None,
        help="Route component path used in messages (default: the result file path).",
    )
    paths_parser.set_defaults(handler=_cmd_paths)

    route_parser = subparsers.add_parser(
        "route", help="Check a route module export and validate its static paths."
    )
    route_parser.add_argument("module_file", help="Route module (.py).")
    route_parser.add_argument(
        "--prerender",
        action="store_true",
        default=False,
        help="The route opts into prerendering even when ssr is enabled.",
    )
    route_parser.set_defaults(handler=_cmd_route)

    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(
        args.config_path,
        cli_overrides={
            "log_level": args.log_level,
            "log_format": args.log_format,
            "public_prefix": getattr(args, "public_prefix", None),
            "ssr": args.ssr,
        },
    )
    setup_logging(level=settings.log_level, log_format=settings.log_format)
    renderer = create_renderer(verbose=args.verbose)

    try:
        return int(args.handler(args, settings, renderer))
    except ValidationError as exc:
        renderer.heading(f"Validation failed with {len(exc.issues)} issue(s):")
        for issue in exc.issues:
            renderer.issue(issue)
        return EXIT_REJECTED


def _cmd_env(args: argparse.Namespace, settings: SiteCheckSettings, renderer: CLIRenderer) -> int:
    schema_path = Path(args.schema_file)
    declarations = load_schema_file(schema_path)
    schema = validate_env_schema(
        declarations,
        public_prefix=settings.public_prefix,
        source_file=str(schema_path),
    )
    logger.info("validated env schema %s (%d variables)", schema_path, len(schema))

    if args.json:
        renderer.heading(dump_schema(schema))
        return EXIT_SUCCESS

    renderer.heading(f"{schema_path}: {len(schema)} variable(s) valid")
    renderer.table(("KEY", "CONTEXT", "ACCESS", "TYPE", "OPTIONAL"), _schema_rows(schema))
    return EXIT_SUCCESS


def _cmd_paths(
    args: argparse.Namespace, settings: SiteCheckSettings, renderer: CLIRenderer
) -> int:
    result_path = Path(args.result_file)
    route = RouteData(component=args.route or str(result_path))
    result = load_static_paths_file(result_path)
    return _report_static_paths(result, route, renderer)


def _cmd_route(
    args: argparse.Namespace, settings: SiteCheckSettings, renderer: CLIRenderer
) -> int:
    module_path = Path(args.module_file)
    route = RouteData(component=str(module_path), prerender=args.prerender)
    module = load_route_module(module_path)

    validate_dynamic_route_module(module, ssr=settings.ssr, route=route)
    if not route.requires_static_paths(ssr=settings.ssr):
        renderer.heading(f"{route.component}: server rendered, {STATIC_PATHS_EXPORT} not required")
        return EXIT_SUCCESS

    result = getattr(module, STATIC_PATHS_EXPORT)()
    logger.debug("%s returned %s", STATIC_PATHS_EXPORT, type(result).__name__)
    return _report_static_paths(result, route, renderer)


def _report_static_paths(result: object, route: RouteData, renderer: CLIRenderer) -> int:
    sink = _TeeWarningSink()
    validate_static_paths_result(result, route, sink)

    warnings = sink.collected.issues()
    renderer.heading(f"{route.component}: static paths valid ({len(warnings)} warning(s))")
    for issue in warnings:
        renderer.issue(issue)
    return EXIT_SUCCESS


def _schema_rows(schema: EnvSchema) -> list[tuple[str, str, str, str, str]]:
    return [
        (
            key,
            str(item.context),
            str(item.access),
            item.field_type.tag,
            "yes" if item.optional else "no",
        )
        for key, item in sorted(schema.items())
    ]


__all__ = ["build_parser", "run_cli"]
