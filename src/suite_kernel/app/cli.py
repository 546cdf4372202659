from __future__ import annotations

import argparse

from suite_kernel.config.models import RunnerConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="suite-kernel")
    parser.add_argument("--suite", help="Test group reference, e.g. package.module:ClassName")
    parser.add_argument("--config")
    parser.add_argument("--format", choices=["text", "json"])
    parser.add_argument("--log-sink", choices=["stdout", "stderr", "jsonl", "none"])
    parser.add_argument("--log-path")
    parser.add_argument("--log-level", choices=["debug", "info", "warning", "error"])
    parser.add_argument("--hide-reasons", action="store_true")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def apply_cli_overrides(config: RunnerConfig, args: argparse.Namespace) -> RunnerConfig:
    # Flags given on the command line win over the YAML values.
    logging_updates: dict[str, object] = {}
    if args.log_sink:
        logging_updates["sink"] = args.log_sink
    if args.log_path:
        logging_updates["path"] = args.log_path
        # A path alone selects the JSONL sink unless a sink was named explicitly.
        logging_updates.setdefault("sink", "jsonl")
    if args.log_level:
        logging_updates["level"] = args.log_level

    report_updates: dict[str, object] = {}
    if args.format:
        report_updates["format"] = args.format
    if args.hide_reasons:
        report_updates["show_reasons"] = False

    merged = config.model_dump()
    if args.suite:
        merged["suite"] = args.suite
    merged["logging"].update(logging_updates)
    merged["report"].update(report_updates)
    # Re-validate so overrides go through the same checks as YAML.
    return RunnerConfig.model_validate(merged)
