"""
Command line interface for inspecting generated prompt methods.

Subcommands
-----------
* show    - print the generated source of every method of a record
* check   - print the resolved prompt kind of every field; exit 1 on errors

Examples
--------
  asker show myapp.settings:Deploy --theme none
  asker check myapp.settings:Deploy
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Optional

from . import __version__
from .core.config import AskerConfig
from .core.exceptions import AskerError, GenerationError
from .core.theme import ThemeChoice
from .generator import generate_methods

logger = logging.getLogger(__name__)


def load_record(target: str) -> type:
    """Import ``package.module:Class`` (nested classes as ``Outer.Inner``)."""
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise SystemExit(f"Expected MODULE:Record, got {target!r}")
    try:
        obj = importlib.import_module(module_name)
    except ImportError as exc:
        raise SystemExit(f"Cannot import {module_name}: {exc}") from exc
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise SystemExit(f"{module_name} has no attribute {qualname}") from None
    return obj


def _config_from_args(args: argparse.Namespace) -> AskerConfig:
    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.prefix:
        overrides["method_prefix"] = args.prefix
    if args.theme:
        overrides["theme"] = args.theme
    return AskerConfig.from_env(**overrides)


def _report(exc: GenerationError) -> int:
    kinds = ", ".join(f"{count} {name}" for name, count in exc.get_error_summary().items())
    print(f"error: {exc.summary} ({exc.record}; {kinds})", file=sys.stderr)
    for error in exc.errors:
        print(f"  {error.field}: {error.message}", file=sys.stderr)
    return 1


def cmd_show(args: argparse.Namespace, config: AskerConfig) -> int:
    methods = generate_methods(load_record(args.record), config)
    print("\n".join(method.source for method in methods), end="")
    return 0


def cmd_check(args: argparse.Namespace, config: AskerConfig) -> int:
    methods = generate_methods(load_record(args.record), config)
    for method in methods:
        params = ", ".join(method.params) or "-"
        print(f"{method.field:<24} {method.kind:<12} {method.name}({params})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asker", description="Inspect generated prompt methods.")
    parser.add_argument("--version", action="version", version=f"asker {__version__}")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("show", cmd_show, "print generated method source"),
        ("check", cmd_check, "print the resolved prompt kind per field"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("record", help="MODULE:Record")
        p.add_argument("--theme", choices=[choice.value for choice in ThemeChoice if choice is not ThemeChoice.EXTERNAL_COLORFUL])
        p.add_argument("--prefix", default=None, help="generated method name prefix (default ask_)")
        p.set_defaults(func=handler)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = _config_from_args(args)
        logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
        return args.func(args, config)
    except GenerationError as exc:
        return _report(exc)
    except AskerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
