from .cli import apply_cli_overrides, build_parser, parse_args
from .render import render_json, render_text
from .runtime import resolve_suite, run, run_with_config

__all__ = [
    "apply_cli_overrides",
    "build_parser",
    "parse_args",
    "render_json",
    "render_text",
    "resolve_suite",
    "run",
    "run_with_config",
]
