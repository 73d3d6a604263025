from .messages import LEVELS, LogMessage
from .sinks import JsonlLogSink, LevelFilterLogSink, NullLogSink, StderrLogSink

__all__ = [
    "LEVELS",
    "JsonlLogSink",
    "LevelFilterLogSink",
    "LogMessage",
    "NullLogSink",
    "StderrLogSink",
]
