from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from suite_kernel.config.models import RunnerConfig


class ConfigError(ValueError):
    # Raised for invalid runner config (fail fast).
    pass


def load_yaml_config(path: Path) -> dict[str, object]:
    # Raw mapping loader; validation happens in parse_runner_config.
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    raw = yaml.safe_load(text)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def parse_runner_config(raw: dict[str, object]) -> RunnerConfig:
    try:
        return RunnerConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid runner config: {exc}") from exc


def load_runner_config(path: Path | None) -> RunnerConfig:
    if path is None:
        return RunnerConfig()
    return parse_runner_config(load_yaml_config(path))
