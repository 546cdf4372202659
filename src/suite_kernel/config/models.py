from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Runner config maps the YAML sections to typed structures; CLI flags override them.


class LoggingConfig(BaseModel):
    # Sink selection for the injected log channel.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "stderr", "jsonl", "none"] = "none"
    path: str | None = None
    level: Literal["debug", "info", "warning", "error"] = "info"

    @model_validator(mode="after")
    def _require_path_for_jsonl(self) -> LoggingConfig:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when logging.sink is jsonl")
        return self


class ReportConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    format: Literal["text", "json"] = "text"
    show_reasons: bool = True


class RunnerConfig(BaseModel):
    # Top-level runner config; suite is a "package.module:Attribute" reference.
    model_config = ConfigDict(extra="forbid")
    suite: str | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @model_validator(mode="after")
    def _check_suite_reference(self) -> RunnerConfig:
        if self.suite is not None:
            module_name, sep, attr = self.suite.partition(":")
            if not module_name or not sep or not attr:
                raise ValueError("suite must look like 'package.module:Attribute'")
        return self
