from .logging import (
    JsonlLogSink,
    LogChannel,
    LogMessage,
    LogSink,
    NullLogSink,
    StderrLogSink,
    StdoutLogSink,
    StreamLogSink,
    build_log_sink,
    null_channel,
)

__all__ = [
    "LogMessage",
    "LogSink",
    "LogChannel",
    "NullLogSink",
    "StdoutLogSink",
    "StderrLogSink",
    "StreamLogSink",
    "JsonlLogSink",
    "build_log_sink",
    "null_channel",
]
