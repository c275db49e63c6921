"""Command-line interface for termblock."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from .exceptions import ConfigurationError
from .lines import classify
from .logging_utils import configure_logging
from .render import render_html
from .ruleset import RuleSet
from .settings import get_settings


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Transcript file to read ('-' or omitted reads stdin).",
    )
    parser.add_argument(
        "--language",
        default=None,
        help="Language hint of the block (default: treat as a bash transcript).",
    )
    parser.add_argument(
        "--program-name",
        default=None,
        help="Program name recognized as a command (default: mako).",
    )
    parser.add_argument(
        "--command",
        action="append",
        default=[],
        help="Extra command name to recognize; may be repeated.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for diagnostics on stderr.",
    )


def _read_source(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def _build_rules(args: argparse.Namespace) -> RuleSet:
    settings = get_settings(program_name=args.program_name, log_level=args.log_level)
    configure_logging(settings.log_level)
    return settings.to_ruleset(extra_commands=args.command)


def _run_classify(args: argparse.Namespace, rules: RuleSet, text: str) -> int:
    lines = classify(text, args.language, rules=rules)
    json.dump([line.to_dict() for line in lines], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def _run_render(args: argparse.Namespace, rules: RuleSet, text: str) -> int:
    lines = classify(text, args.language, rules=rules)
    sys.stdout.write(render_html(lines) + "\n")
    return 0


def _dispatch(args: argparse.Namespace) -> int:
    try:
        rules = _build_rules(args)
    except (ConfigurationError, ValidationError) as exc:
        sys.stderr.write(f"termblock: invalid configuration: {exc}\n")
        return 2
    try:
        text = _read_source(args.file)
    except OSError as exc:
        sys.stderr.write(f"termblock: cannot read {args.file}: {exc}\n")
        return 2
    logger.debug("Read {} characters from {}", len(text), args.file)
    return args.func(args, rules, text)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="termblock")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    classify_parser = subparsers.add_parser("classify", help="Print line and token classes as JSON")
    _add_common_flags(classify_parser)
    classify_parser.set_defaults(func=_run_classify)

    render_parser = subparsers.add_parser("render", help="Print the block as styled HTML")
    _add_common_flags(render_parser)
    render_parser.set_defaults(func=_run_render)

    args = parser.parse_args(argv)
    exit_code = _dispatch(args)
    raise SystemExit(exit_code)


__all__ = ["main"]
