from __future__ import annotations

import pytest
from pydantic import ValidationError

from suite_kernel.app.cli import apply_cli_overrides, parse_args
from suite_kernel.config.models import LoggingConfig, RunnerConfig


def test_parse_args_reads_flags() -> None:
    args = parse_args(
        [
            "--suite",
            "pkg.mod:Group",
            "--config",
            "cfg.yml",
            "--format",
            "json",
            "--log-sink",
            "stdout",
            "--log-level",
            "debug",
            "--hide-reasons",
        ]
    )
    assert args.suite == "pkg.mod:Group"
    assert args.config == "cfg.yml"
    assert args.format == "json"
    assert args.log_sink == "stdout"
    assert args.log_level == "debug"
    assert args.hide_reasons is True


def test_cli_overrides_win_over_config() -> None:
    cfg = RunnerConfig(suite="a.b:C", logging=LoggingConfig(sink="stdout"))
    args = parse_args(["--suite", "x.y:Z", "--format", "json", "--hide-reasons"])
    merged = apply_cli_overrides(cfg, args)
    assert merged.suite == "x.y:Z"
    assert merged.logging.sink == "stdout"
    assert merged.report.format == "json"
    assert merged.report.show_reasons is False


def test_log_path_alone_selects_jsonl_sink() -> None:
    merged = apply_cli_overrides(RunnerConfig(), parse_args(["--log-path", "run.jsonl"]))
    assert merged.logging.sink == "jsonl"
    assert merged.logging.path == "run.jsonl"


def test_overrides_are_revalidated() -> None:
    # Selecting the jsonl sink without a path is rejected like in YAML.
    with pytest.raises(ValidationError):
        apply_cli_overrides(RunnerConfig(), parse_args(["--log-sink", "jsonl"]))
