from __future__ import annotations

from dataclasses import dataclass

from fastq_check.domain.records import Finding, FindingKind, Record

HEADER_PREFIX = "@"
PLUS_PREFIX = "+"

# Phred+33: quality characters are printable ASCII "!" through "~".
PHRED33_MIN = 33
PHRED33_MAX = 126


@dataclass(frozen=True, slots=True)
class QualityRange:
    min_code: int = PHRED33_MIN
    max_code: int = PHRED33_MAX

    def __post_init__(self) -> None:
        if self.min_code > self.max_code:
            raise ValueError("quality range min must not exceed max")

    def contains(self, char: str) -> bool:
        return self.min_code <= ord(char) <= self.max_code


@dataclass(frozen=True, slots=True)
class RecordValidator:
    # quality_range is None unless strict mode is configured.
    quality_range: QualityRange | None = None

    def validate(self, record: Record) -> list[Finding]:
        # Every rule runs; a record may collect several findings, in rule order.
        findings: list[Finding] = []
        if not record.header.startswith(HEADER_PREFIX):
            findings.append(
                Finding(
                    kind=FindingKind.HEADER_ERROR,
                    line_numbers=(record.start_line,),
                    detail=f"line {record.start_line} does not start with '{HEADER_PREFIX}'",
                )
            )
        if not record.plus_line.startswith(PLUS_PREFIX):
            findings.append(
                Finding(
                    kind=FindingKind.PLUS_LINE_ERROR,
                    line_numbers=(record.plus_line_no,),
                    detail=f"line {record.plus_line_no} does not start with '{PLUS_PREFIX}'",
                )
            )
        if len(record.sequence) != len(record.quality):
            findings.append(
                Finding(
                    kind=FindingKind.LENGTH_MISMATCH_ERROR,
                    line_numbers=(record.sequence_line_no, record.quality_line_no),
                    detail=f"{len(record.sequence)} != {len(record.quality)}",
                )
            )
        if self.quality_range is not None:
            finding = self._check_quality_range(record, self.quality_range)
            if finding is not None:
                findings.append(finding)
        return findings

    @staticmethod
    def _check_quality_range(record: Record, quality_range: QualityRange) -> Finding | None:
        # Offending positions are 1-based and collapsed into one finding.
        positions = [
            idx for idx, char in enumerate(record.quality, start=1) if not quality_range.contains(char)
        ]
        if not positions:
            return None
        listed = ", ".join(str(pos) for pos in positions)
        return Finding(
            kind=FindingKind.QUALITY_RANGE_ERROR,
            line_numbers=(record.quality_line_no,),
            detail=(
                f"{len(positions)} character(s) outside {quality_range.min_code}..{quality_range.max_code}"
                f" at position(s) {listed}"
            ),
        )
