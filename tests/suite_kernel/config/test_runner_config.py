from __future__ import annotations

from pathlib import Path

import pytest

from suite_kernel.config.loader import ConfigError, load_runner_config, load_yaml_config, parse_runner_config


def test_load_runner_config_reads_yaml(tmp_path: Path) -> None:
    path = tmp_path / "runner.yml"
    path.write_text(
        "suite: demo_suite.common_suite:CommonSuite\n"
        "logging:\n"
        "  sink: jsonl\n"
        "  path: out/log.jsonl\n"
        "  level: debug\n"
        "report:\n"
        "  format: json\n",
        encoding="utf-8",
    )
    cfg = load_runner_config(path)
    assert cfg.suite == "demo_suite.common_suite:CommonSuite"
    assert cfg.logging.sink == "jsonl"
    assert cfg.logging.level == "debug"
    assert cfg.report.format == "json"
    assert cfg.report.show_reasons is True


def test_missing_config_path_yields_defaults() -> None:
    cfg = load_runner_config(None)
    assert cfg.suite is None
    assert cfg.logging.sink == "none"
    assert cfg.report.format == "text"


def test_empty_yaml_is_an_empty_mapping(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_yaml_config(path) == {}


def test_non_mapping_root_fails(tmp_path: Path) -> None:
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_yaml_config(path)


def test_unreadable_file_fails(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_yaml_config(tmp_path / "missing.yml")


@pytest.mark.parametrize(
    "raw",
    [
        {"unknown": 1},
        {"suite": "no_colon"},
        {"logging": {"sink": "jsonl"}},
        {"report": {"format": "xml"}},
    ],
)
def test_invalid_sections_are_rejected(raw: dict[str, object]) -> None:
    # Unknown keys and inconsistent values fail fast.
    with pytest.raises(ConfigError):
        parse_runner_config(raw)
