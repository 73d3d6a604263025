from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# FASTQ records are fixed groups of four physical lines.
RECORD_LINES = 4


class FindingKind(str, Enum):
    # Kind tags are written verbatim into the diagnostic output.
    TRUNCATED_GROUP = "TruncatedGroup"
    HEADER_ERROR = "HeaderError"
    PLUS_LINE_ERROR = "PlusLineError"
    LENGTH_MISMATCH_ERROR = "LengthMismatchError"
    QUALITY_RANGE_ERROR = "QualityRangeError"


@dataclass(frozen=True, slots=True)
class SourceLine:
    # SourceLine preserves input order via line_no (1-based, terminator stripped).
    line_no: int
    text: str


@dataclass(frozen=True, slots=True)
class Finding:
    kind: FindingKind
    line_numbers: tuple[int, ...]
    detail: str


@dataclass(frozen=True, slots=True)
class Record:
    # One four-line validation unit; start_line is the header's line number.
    start_line: int
    header: str
    sequence: str
    plus_line: str
    quality: str

    @property
    def lines(self) -> tuple[str, ...]:
        return (self.header, self.sequence, self.plus_line, self.quality)

    @property
    def sequence_line_no(self) -> int:
        return self.start_line + 1

    @property
    def plus_line_no(self) -> int:
        return self.start_line + 2

    @property
    def quality_line_no(self) -> int:
        return self.start_line + 3


@dataclass(frozen=True, slots=True)
class TruncatedGroup:
    # Leftover 1-3 lines at end of input; never validated as a Record.
    start_line: int
    lines: tuple[str, ...]

    def __post_init__(self) -> None:
        if not 0 < len(self.lines) < RECORD_LINES:
            raise ValueError("TruncatedGroup holds between 1 and 3 lines")

    @property
    def finding(self) -> Finding:
        present = len(self.lines)
        return Finding(
            kind=FindingKind.TRUNCATED_GROUP,
            line_numbers=tuple(range(self.start_line, self.start_line + present)),
            detail=f"expected {RECORD_LINES} lines, found {present}",
        )
