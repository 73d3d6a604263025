from __future__ import annotations

import multiprocessing as mp
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice
from multiprocessing.pool import AsyncResult

from fastq_check.domain.errors import FatalIOError
from fastq_check.domain.records import RECORD_LINES, SourceLine, TruncatedGroup
from fastq_check.domain.tally import Tally
from fastq_check.observability.messages import LogMessage
from fastq_check.observability.sinks import NullLogSink
from fastq_check.ports.log_sink import LogSink
from fastq_check.usecases.driver import ScanResult, abort_scan, open_input, summarize_scan
from fastq_check.usecases.error_report import ErrorReporter, format_block
from fastq_check.usecases.record_reader import read_records
from fastq_check.usecases.validator import RecordValidator


@dataclass(frozen=True, slots=True)
class PartitionResult:
    # Worker output for one record-aligned partition; blocks are pre-formatted.
    index: int
    seen: int
    invalid: int
    blocks: tuple[tuple[str, ...], ...]
    invalid_start_lines: tuple[int, ...]


def scan_partition(
    validator: RecordValidator, index: int, start_line: int, texts: list[str]
) -> PartitionResult:
    # Runs in a worker process; must stay a module-level function to be picklable.
    lines = (SourceLine(line_no=start_line + offset, text=text) for offset, text in enumerate(texts))
    seen = 0
    blocks: list[tuple[str, ...]] = []
    starts: list[int] = []
    for group in read_records(lines):
        seen += 1
        findings = [group.finding] if isinstance(group, TruncatedGroup) else validator.validate(group)
        if findings:
            blocks.append(tuple(format_block(group, findings)))
            starts.append(group.start_line)
    return PartitionResult(
        index=index,
        seen=seen,
        invalid=len(blocks),
        blocks=tuple(blocks),
        invalid_start_lines=tuple(starts),
    )


def partition_lines(
    lines: Iterable[SourceLine], partition_records: int
) -> Iterator[tuple[int, int, list[str]]]:
    """Cut the line stream into (index, start_line, texts) partitions.

    Every partition except the last holds exactly partition_records * 4
    lines, so boundaries never fall inside a record.
    """
    if partition_records < 1:
        raise ValueError("partition_records must be >= 1")
    size = partition_records * RECORD_LINES
    source = iter(lines)
    index = 0
    while True:
        chunk = list(islice(source, size))
        if not chunk:
            return
        yield index, chunk[0].line_no, [line.text for line in chunk]
        index += 1


@dataclass
class ParallelDriver:
    """Validate record-aligned partitions on a process pool.

    At most queue_depth partitions are in flight; results are flushed to the
    reporter strictly by partition index, so the diagnostic output matches
    the sequential Driver byte for byte.
    """

    validator: RecordValidator
    reporter: ErrorReporter
    workers: int = 2
    partition_records: int = 10_000
    queue_depth: int = 4
    log: LogSink = field(default_factory=NullLogSink)
    start_method: str | None = None

    def __post_init__(self) -> None:
        if self.workers < 1 or self.queue_depth < 1 or self.partition_records < 1:
            raise ValueError("workers, queue_depth and partition_records must be >= 1")

    def run(self, lines: Iterable[SourceLine]) -> ScanResult:
        tally = Tally()
        self.log.emit(
            LogMessage(
                level="info",
                message="scan started",
                fields={
                    "mode": "parallel",
                    "workers": self.workers,
                    "partition_records": self.partition_records,
                    "queue_depth": self.queue_depth,
                },
            )
        )
        ctx = mp.get_context(self.start_method)
        try:
            lines = open_input(lines)
            self.reporter.sink.open()
            # Pool.__exit__ terminates workers, including on a fatal error mid-scan.
            with ctx.Pool(processes=self.workers) as pool:
                pending: deque[AsyncResult[PartitionResult]] = deque()
                for index, start_line, texts in partition_lines(lines, self.partition_records):
                    pending.append(
                        pool.apply_async(scan_partition, (self.validator, index, start_line, texts))
                    )
                    if len(pending) >= self.queue_depth:
                        self._flush(pending.popleft().get(), tally)
                while pending:
                    self._flush(pending.popleft().get(), tally)
            self.reporter.sink.close()
        except FatalIOError as exc:
            return abort_scan(self.reporter, self.log, tally, exc)
        tally.complete = True
        return summarize_scan(self.log, tally)

    def _flush(self, result: PartitionResult, tally: Tally) -> None:
        # Only the driver writes to the sink; partitions arrive here in index order.
        for start_line, block in zip(result.invalid_start_lines, result.blocks):
            self.log.emit(
                LogMessage(
                    level="debug",
                    message="invalid record",
                    fields={"start_line": start_line, "partition": result.index},
                )
            )
            self.reporter.write_block(block)
        tally.merge(seen=result.seen, invalid=result.invalid)
