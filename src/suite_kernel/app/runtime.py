from __future__ import annotations

import importlib
import inspect
import sys
from pathlib import Path

from suite_kernel.app.cli import apply_cli_overrides, parse_args
from suite_kernel.app.render import render_json, render_text
from suite_kernel.config.loader import ConfigError, load_runner_config
from suite_kernel.config.models import RunnerConfig
from suite_kernel.kernel.errors import StructuralError
from suite_kernel.kernel.report import ExecutionReport, has_failures
from suite_kernel.kernel.runner import run_tests
from suite_kernel.kernel.units import TestGroup
from suite_kernel.observability.logging import JsonlLogSink, LogChannel, build_log_sink

EXIT_OK = 0
EXIT_TEST_FAILURES = 1
EXIT_STRUCTURAL = 2


def resolve_suite(reference: str) -> TestGroup | type:
    # "package.module:Attribute" -> the class or TestGroup it names.
    module_name, sep, attr = reference.partition(":")
    if not module_name or not sep or not attr:
        raise ConfigError(f"Suite reference must look like 'package.module:Attribute', got {reference!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(f"Cannot import suite module {module_name}: {exc}") from exc
    target = getattr(module, attr, None)
    if target is None:
        raise ConfigError(f"Module {module_name} has no attribute {attr}")
    if not (inspect.isclass(target) or isinstance(target, TestGroup)):
        raise ConfigError(f"{reference} is neither a class nor a TestGroup")
    return target


def run_with_config(config: RunnerConfig) -> int:
    # Runs one group and prints its report; exit code reflects failures.
    if not config.suite:
        raise ConfigError("suite must be provided via --suite or the config file")
    sink = build_log_sink(config.logging.sink, config.logging.path)
    log = LogChannel(sink=sink, source="suite_kernel", min_level=config.logging.level)
    try:
        group = resolve_suite(config.suite)
        report = run_tests(group, log=log)
        log.info("Test finished with result", summary=_summary_fields(report))
    finally:
        if isinstance(sink, JsonlLogSink):
            sink.close()

    if config.report.format == "json":
        print(render_json(report))
    else:
        print(render_text(report, show_reasons=config.report.show_reasons))
    return EXIT_TEST_FAILURES if has_failures(report) else EXIT_OK


def run(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        config = load_runner_config(Path(args.config) if args.config else None)
        config = apply_cli_overrides(config, args)
        return run_with_config(config)
    except (ConfigError, StructuralError, ValueError) as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return EXIT_STRUCTURAL


def _summary_fields(report: ExecutionReport) -> dict[str, list[str]]:
    return {kind.value: [info.display_name for info in infos] for kind, infos in report.items()}
