from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

# Records and findings are immutable values handed between reader, validator and reporter.
from fastq_check.domain.records import Finding, FindingKind, Record, TruncatedGroup


def test_record_is_immutable() -> None:
    record = Record(start_line=1, header="@r1", sequence="ACGT", plus_line="+", quality="!!!!")
    with pytest.raises(FrozenInstanceError):
        record.header = "@r2"  # type: ignore[misc]


def test_record_line_numbers_follow_start_line() -> None:
    record = Record(start_line=5, header="@r2", sequence="AC", plus_line="+", quality="!!")
    assert record.lines == ("@r2", "AC", "+", "!!")
    assert record.sequence_line_no == 6
    assert record.plus_line_no == 7
    assert record.quality_line_no == 8


def test_truncated_group_finding_reports_present_lines() -> None:
    group = TruncatedGroup(start_line=9, lines=("@r3", "ACGT"))
    assert group.finding == Finding(
        kind=FindingKind.TRUNCATED_GROUP,
        line_numbers=(9, 10),
        detail="expected 4 lines, found 2",
    )


@pytest.mark.parametrize("lines", [(), ("a", "b", "c", "d")])
def test_truncated_group_rejects_invalid_sizes(lines: tuple[str, ...]) -> None:
    with pytest.raises(ValueError):
        TruncatedGroup(start_line=1, lines=lines)


def test_finding_kind_values_are_stable() -> None:
    # Kind values appear verbatim in diagnostic files consumed by operators.
    assert [kind.value for kind in FindingKind] == [
        "TruncatedGroup",
        "HeaderError",
        "PlusLineError",
        "LengthMismatchError",
        "QualityRangeError",
    ]
