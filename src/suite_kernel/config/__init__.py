from .loader import ConfigError, load_runner_config, load_yaml_config, parse_runner_config
from .models import LoggingConfig, ReportConfig, RunnerConfig

__all__ = [
    "ConfigError",
    "load_runner_config",
    "load_yaml_config",
    "parse_runner_config",
    "LoggingConfig",
    "ReportConfig",
    "RunnerConfig",
]
