from __future__ import annotations

from pathlib import Path

from fastq_check.observability.sinks import JsonlLogSink, LevelFilterLogSink, NullLogSink, StderrLogSink
from fastq_check.ports.log_sink import LogSink
from fastq_check.usecases.config_models import LoggingConfig


def log_sink_from_config(config: LoggingConfig) -> LogSink:
    # Factory selects one sink and applies the level threshold.
    if not config.enabled:
        return NullLogSink()
    if config.sink == "jsonl":
        assert config.path is not None
        inner: LogSink = JsonlLogSink(Path(config.path))
    else:
        inner = StderrLogSink()
    return LevelFilterLogSink(inner=inner, level=config.level)
