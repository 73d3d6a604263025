from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from fastq_check.observability.messages import LEVELS, LogMessage
if TYPE_CHECKING:
    from fastq_check.ports.log_sink import LogSink


class StderrLogSink:
    # Compact JSON lines on stderr; stdout is reserved for the scan summary.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(_to_json(message) + "\n")

    def close(self) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.flush()


class JsonlLogSink:
    # File-backed structured log sink; appends across runs.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_to_json(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class NullLogSink:
    def emit(self, message: LogMessage) -> None:
        return None

    def close(self) -> None:
        return None


@dataclass
class LevelFilterLogSink:
    # Drops messages below the configured threshold before delegating.
    inner: "LogSink"
    level: str = "info"

    def __post_init__(self) -> None:
        if self.level not in LEVELS:
            raise ValueError(f"Unknown log level: {self.level}")

    def emit(self, message: LogMessage) -> None:
        if LEVELS.index(message.level) >= LEVELS.index(self.level):
            self.inner.emit(message)

    def close(self) -> None:
        self.inner.close()


def _to_json(message: LogMessage) -> str:
    payload = {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
