from __future__ import annotations

import json
from pathlib import Path

from fastq_check.adapters.log_sinks import log_sink_from_config
from fastq_check.observability.messages import LogMessage
from fastq_check.observability.sinks import LevelFilterLogSink, NullLogSink, StderrLogSink
from fastq_check.usecases.config_models import LoggingConfig


def test_disabled_logging_uses_null_sink() -> None:
    assert isinstance(log_sink_from_config(LoggingConfig(enabled=False)), NullLogSink)


def test_default_logging_filters_stderr_sink() -> None:
    sink = log_sink_from_config(LoggingConfig())
    assert isinstance(sink, LevelFilterLogSink)
    assert isinstance(sink.inner, StderrLogSink)
    assert sink.level == "warning"


def test_jsonl_logging_writes_to_configured_path(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "scan.jsonl"
    sink = log_sink_from_config(LoggingConfig(sink="jsonl", path=str(path), level="info"))
    sink.emit(LogMessage(level="debug", message="dropped"))
    sink.emit(LogMessage(level="info", message="kept", fields={"records_seen": 3}))
    sink.close()
    rows = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [row["message"] for row in rows] == ["kept"]
    assert rows[0]["fields"] == {"records_seen": 3}
