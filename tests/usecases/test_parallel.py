from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from fastq_check.adapters.error_sink import MemoryErrorSink
from fastq_check.domain.errors import InputReadError
from fastq_check.domain.records import SourceLine
from fastq_check.domain.tally import ScanStatus
from fastq_check.usecases.driver import Driver
from fastq_check.usecases.error_report import ErrorReporter
from fastq_check.usecases.parallel import ParallelDriver, partition_lines, scan_partition
from fastq_check.usecases.validator import QualityRange, RecordValidator


def _lines(*texts: str) -> list[SourceLine]:
    return [SourceLine(line_no=idx, text=text) for idx, text in enumerate(texts, start=1)]


def _mixed_input(records: int, tail: int = 0) -> list[SourceLine]:
    # Every third record has a bad header, every fifth a length mismatch.
    texts: list[str] = []
    for idx in range(records):
        header = f"r{idx}" if idx % 3 == 0 else f"@r{idx}"
        quality = "!!" if idx % 5 == 0 else "! !"
        texts.extend([header, "ACG", "+", quality])
    texts.extend(["@tail", "ACGT", "+"][:tail])
    return _lines(*texts)


def test_partitions_align_on_record_boundaries() -> None:
    partitions = list(partition_lines(_lines(*[str(i) for i in range(22)]), partition_records=2))
    assert [(index, start, len(texts)) for index, start, texts in partitions] == [
        (0, 1, 8),
        (1, 9, 8),
        (2, 17, 6),
    ]


def test_partition_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        list(partition_lines([], partition_records=0))


def test_scan_partition_uses_absolute_line_numbers() -> None:
    result = scan_partition(RecordValidator(), 3, 101, ["X", "A", "+", "!", "@ok", "A", "+", "!"])
    assert (result.index, result.seen, result.invalid) == (3, 2, 1)
    assert result.invalid_start_lines == (101,)
    assert result.blocks[0][0] == "Record starting at line 101:"


def test_scan_partition_reports_truncated_tail() -> None:
    result = scan_partition(RecordValidator(), 0, 1, ["@a", "A", "+", "!", "@b"])
    assert (result.seen, result.invalid) == (2, 1)
    assert result.blocks[0][1] == "  - TruncatedGroup: expected 4 lines, found 1"


@pytest.mark.parametrize("tail", [0, 2])
def test_parallel_output_matches_sequential(tail: int) -> None:
    validator = RecordValidator(quality_range=QualityRange())
    lines = _mixed_input(records=53, tail=tail)

    sequential_sink = MemoryErrorSink()
    expected = Driver(validator=validator, reporter=ErrorReporter(sink=sequential_sink)).run(lines)

    parallel_sink = MemoryErrorSink()
    driver = ParallelDriver(
        validator=validator,
        reporter=ErrorReporter(sink=parallel_sink),
        workers=2,
        partition_records=4,
        queue_depth=2,
    )
    result = driver.run(lines)

    assert result.status is expected.status is ScanStatus.FORMAT_ERRORS_FOUND
    assert result.tally == expected.tally
    assert parallel_sink.text() == sequential_sink.text()


def test_parallel_clean_input() -> None:
    sink = MemoryErrorSink()
    driver = ParallelDriver(validator=RecordValidator(), reporter=ErrorReporter(sink=sink), workers=2)
    result = driver.run(_lines("@r1", "A", "+", "!", "@r2", "C", "+", "!"))
    assert result.status is ScanStatus.CLEAN
    assert result.tally.records_valid == 2
    assert sink.lines == []


def test_parallel_read_failure_is_fatal() -> None:
    def failing_source() -> Iterator[SourceLine]:
        yield from _mixed_input(records=12)
        raise InputReadError(Path("reads.fq"), OSError(5, "Input/output error"))

    sink = MemoryErrorSink()
    driver = ParallelDriver(
        validator=RecordValidator(),
        reporter=ErrorReporter(sink=sink),
        workers=2,
        partition_records=2,
        queue_depth=1,
    )
    result = driver.run(failing_source())
    assert result.status is ScanStatus.FATAL
    assert result.tally.complete is False
    assert sink.closed


def test_parallel_driver_rejects_non_positive_settings() -> None:
    with pytest.raises(ValueError):
        ParallelDriver(validator=RecordValidator(), reporter=ErrorReporter(sink=MemoryErrorSink()), workers=0)


def test_parallel_unreadable_input_does_not_open_report() -> None:
    def missing_source() -> Iterator[SourceLine]:
        raise InputReadError(Path("absent.fq"), FileNotFoundError(2, "No such file or directory"))
        yield  # pragma: no cover

    sink = MemoryErrorSink()
    driver = ParallelDriver(validator=RecordValidator(), reporter=ErrorReporter(sink=sink), workers=2)
    result = driver.run(missing_source())
    assert result.status is ScanStatus.FATAL
    assert sink.opened is False
