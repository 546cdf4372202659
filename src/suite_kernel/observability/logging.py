from __future__ import annotations

import json
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol, TextIO

LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload emitted by the kernel and the app layer.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")
        if self.level not in LEVELS:
            raise ValueError(f"LogMessage.level must be one of: {list(LEVELS)}")

    def to_json(self) -> str:
        # UTC timestamps end in "Z"; non-JSON field values fall back to str().
        stamp = self.timestamp.isoformat().replace("+00:00", "Z")
        payload = {"timestamp": stamp, "level": self.level, "message": self.message, "fields": self.fields}
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        raise NotImplementedError("LogSink is a protocol")


class NullLogSink:
    def emit(self, message: LogMessage) -> None:
        _ = message


class StreamLogSink:
    # Writes each message as a JSON line to a text stream, resolved at emit time
    # so captured or redirected streams are honoured.
    def __init__(self, stream: Callable[[], TextIO]) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        out = self._stream()
        out.write(message.to_json() + "\n")
        out.flush()


class StdoutLogSink(StreamLogSink):
    def __init__(self) -> None:
        super().__init__(lambda: sys.stdout)


class StderrLogSink(StreamLogSink):
    # Keeps diagnostics off stdout when stdout carries a report.
    def __init__(self) -> None:
        super().__init__(lambda: sys.stderr)


class JsonlLogSink:
    # Appends to a run log file; close() must be called by the owner.
    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.path = path
        self._handle = path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._handle.write(message.to_json() + "\n")
        self._handle.flush()

    def close(self) -> None:
        self._handle.close()


@dataclass(frozen=True, slots=True)
class LogChannel:
    # Injected logger facade: tags messages with a source and filters by level.
    sink: LogSink
    source: str = "suite_kernel"
    min_level: str = "debug"

    def __post_init__(self) -> None:
        if self.min_level not in LEVELS:
            raise ValueError(f"LogChannel.min_level must be one of: {list(LEVELS)}")

    def log(self, level: str, message: str, **fields: object) -> None:
        if LEVELS.index(level) < LEVELS.index(self.min_level):
            return
        self.sink.emit(LogMessage(level=level, message=message, fields={"source": self.source, **fields}))

    def debug(self, message: str, **fields: object) -> None:
        self.log("debug", message, **fields)

    def info(self, message: str, **fields: object) -> None:
        self.log("info", message, **fields)

    def warning(self, message: str, **fields: object) -> None:
        self.log("warning", message, **fields)

    def error(self, message: str, **fields: object) -> None:
        self.log("error", message, **fields)


def null_channel() -> LogChannel:
    return LogChannel(sink=NullLogSink())


def build_log_sink(sink: str, path: str | None = None) -> LogSink:
    # Sink selection mirrors the logging section of the runner config.
    if sink == "none":
        return NullLogSink()
    if sink == "stderr":
        return StderrLogSink()
    if sink == "stdout":
        return StdoutLogSink()
    if sink == "jsonl":
        if not isinstance(path, str) or not path:
            raise ValueError("logging.path must be a non-empty string for the jsonl sink")
        return JsonlLogSink(Path(path))
    raise ValueError(f"Unknown log sink: {sink}")
