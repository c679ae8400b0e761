"""Command-line helpers for building figure documents."""

from __future__ import annotations

import argparse
import json
import sys
import warnings
from typing import Any, Sequence

from .core.config_helpers import split_csv
from .serializers import figure_to_json
from .spec.builder import figure
from .tools.registry import supported_tools
from .utils.exceptions import FigspecError, explain_exception


def _parse_param(text: str) -> tuple[str, Any]:
    """Parse ``key=value``; values are read as JSON when possible."""
    key, sep, raw = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key.strip(), value


def _cmd_build(args: argparse.Namespace) -> int:
    kwargs: dict[str, Any] = {"width": args.width, "height": args.height}
    if args.title is not None:
        kwargs["title"] = args.title
    if args.xlab is not None:
        kwargs["xlab"] = args.xlab
    if args.ylab is not None:
        kwargs["ylab"] = args.ylab
    if args.theme is not None:
        kwargs["theme"] = args.theme
    if args.no_tools:
        kwargs["tools"] = None
    elif args.tools is not None:
        kwargs["tools"] = split_csv(args.tools)
    kwargs.update(dict(args.param or ()))

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        fig = figure(**kwargs)
    for warning in caught:
        print(f"warning: {warning.message}", file=sys.stderr)
    print(figure_to_json(fig, indent=args.indent))
    return 0


def _cmd_tools(args: argparse.Namespace) -> int:
    for name in supported_tools():
        print(name)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the figspec CLI entry point and return the exit code."""
    parser = argparse.ArgumentParser(description="Build figure documents for the plotting renderer")
    subparsers = parser.add_subparsers(dest="command")

    build_parser = subparsers.add_parser("build", help="Print a figure document as JSON")
    build_parser.add_argument("--width", type=int, default=480)
    build_parser.add_argument("--height", type=int, default=520)
    build_parser.add_argument("--title")
    build_parser.add_argument("--xlab")
    build_parser.add_argument("--ylab")
    build_parser.add_argument("--theme")
    tool_group = build_parser.add_mutually_exclusive_group()
    tool_group.add_argument("--tools", help="Comma-separated tool names")
    tool_group.add_argument("--no-tools", action="store_true", help="Hide the toolbar")
    build_parser.add_argument(
        "--param",
        action="append",
        type=_parse_param,
        metavar="KEY=VALUE",
        help="Extra style parameter (repeatable)",
    )
    build_parser.add_argument("--indent", type=int, default=None)
    build_parser.set_defaults(func=_cmd_build)

    tools_parser = subparsers.add_parser("tools", help="List supported tool names")
    tools_parser.set_defaults(func=_cmd_tools)

    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 2
    try:
        return args.func(args)
    except FigspecError as exc:
        print(explain_exception(exc), file=sys.stderr)
        return 1


__all__ = ["main"]
