from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fastq_check.domain.errors import InputReadError
from fastq_check.domain.records import SourceLine
from fastq_check.ports.line_source import LineSource


@dataclass(frozen=True, slots=True)
class FileLineSource(LineSource):
    # File-based LineSource adapter: streams the file, never loads it whole.
    path: Path
    encoding: str = "utf-8"
    decode_errors: str = "strict"

    def __post_init__(self) -> None:
        if self.decode_errors not in {"strict", "replace"}:
            raise ValueError("decode_errors must be one of: strict, replace")

    def read(self) -> Iterable[SourceLine]:
        # Lines split on "\n" only; a bare "\r" inside a line stays part of its text.
        try:
            with self.path.open(
                "r", encoding=self.encoding, errors=self.decode_errors, newline="\n"
            ) as handle:
                for idx, line in enumerate(handle, start=1):
                    yield SourceLine(line_no=idx, text=_strip_terminator(line))
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(self.path, exc) from exc


def _strip_terminator(line: str) -> str:
    # Drop one "\n", then one "\r" so CRLF input reads like LF input.
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
