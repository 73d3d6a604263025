from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from fastq_check.domain.errors import ReportWriteError
from fastq_check.ports.error_sink import ErrorSink


@dataclass
class FileErrorSink(ErrorSink):
    # File-based ErrorSink: truncated once per run, then append-only.
    path: Path
    encoding: str = "utf-8"
    _handle: TextIO | None = field(default=None, init=False, repr=False)

    def open(self) -> None:
        if self._handle is not None:
            return
        try:
            self._handle = self.path.open("w", encoding=self.encoding)
        except OSError as exc:
            raise ReportWriteError(self.path, exc) from exc

    def write_line(self, line: str) -> None:
        # Open lazily so construction does not touch the filesystem.
        if self._handle is None:
            self.open()
        assert self._handle is not None
        try:
            self._handle.write(line + "\n")
        except OSError as exc:
            raise ReportWriteError(self.path, exc) from exc

    def close(self) -> None:
        # Close is idempotent; safe to call on every shutdown path.
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        try:
            handle.flush()
            handle.close()
        except OSError as exc:
            raise ReportWriteError(self.path, exc) from exc


@dataclass
class MemoryErrorSink(ErrorSink):
    # In-memory sink used for embedding the checker and in tests.
    lines: list[str] = field(default_factory=list)
    opened: bool = False
    closed: bool = False

    def open(self) -> None:
        self.lines.clear()
        self.opened = True

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def close(self) -> None:
        self.closed = True

    def text(self) -> str:
        return "".join(line + "\n" for line in self.lines)
