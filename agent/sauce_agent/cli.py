"""Command line preview of the variables a ``sauce`` feature exports.

The command runs the build-start hook against an in-process build, without
opening tunnels, and prints the resulting shared environment.
"""

from __future__ import annotations

import argparse
import json
import logging
import shlex
import sys
from collections.abc import Sequence
from pathlib import Path

from .browsers import BrowserFactory, SauceBrowserFactory, StaticBrowserFactory
from .config import AgentSettings, load_settings
from .host import AgentEventDispatcher
from .lifecycle import SauceLifeCycleAdapter
from .local import LocalBuild


def _parse_pair(value: str) -> tuple[str, str]:
    key, separator, item = value.partition("=")
    if not separator or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, item


def _parameter_value(value: object) -> str:
    # Feature parameters are strings; JSON booleans map to the editor's "true"/"false".
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _load_parameters(path: Path) -> dict[str, str]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of feature parameters")
    return {str(key): _parameter_value(value) for key, value in data.items() if value is not None}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sauce-agent", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    env = commands.add_parser("env", help="Print the variables shared with a build")
    env.add_argument(
        "--feature",
        action="append",
        type=Path,
        default=[],
        metavar="FILE",
        help="JSON file with the parameters of one sauce build feature (repeatable)",
    )
    env.add_argument(
        "-p",
        "--param",
        action="append",
        type=_parse_pair,
        default=[],
        metavar="KEY=VALUE",
        help="Feature parameter, applied on top of every --feature file",
    )
    env.add_argument("--format", choices=("shell", "json"), default="shell")
    env.add_argument(
        "--resolve-browsers",
        action="store_true",
        help="Look up the selected browser in the Sauce platform catalog",
    )
    env.add_argument(
        "--compat-null",
        action="store_true",
        help="Render missing driver URI values as 'null' like older agents",
    )
    return parser


def render(environment: dict[str, str], output_format: str) -> str:
    if output_format == "json":
        return json.dumps(environment, indent=2, sort_keys=True)
    return "\n".join(f"export {key}={shlex.quote(value)}" for key, value in environment.items())


def run_env(args: argparse.Namespace) -> int:
    settings = load_settings()
    if args.compat_null:
        settings = AgentSettings(**{**settings.model_dump(), "render_missing_as_null": True})

    overrides = dict(args.param)
    parameter_sets = [{**_load_parameters(path), **overrides} for path in args.feature]
    if not parameter_sets and overrides:
        parameter_sets = [overrides]

    browser_factory: BrowserFactory
    if args.resolve_browsers:
        browser_factory = SauceBrowserFactory(settings)
    else:
        browser_factory = StaticBrowserFactory()

    build = LocalBuild.from_parameters(*parameter_sets)
    dispatcher = AgentEventDispatcher()
    SauceLifeCycleAdapter(dispatcher, browser_factory, None, settings=settings)
    try:
        dispatcher.dispatch_build_started(build)
    finally:
        if isinstance(browser_factory, SauceBrowserFactory):
            browser_factory.close()

    for level, text in build.build_logger.lines:
        print(f"[{level}] {text}", file=sys.stderr)
    output = render(build.environment, args.format)
    if output:
        print(output)
    return 1 if any(level == "error" for level, _ in build.build_logger.lines) else 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_env(args)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))


__all__ = ["build_parser", "main", "render", "run_env"]
