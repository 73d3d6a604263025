from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import chain

from fastq_check.domain.errors import FatalIOError
from fastq_check.domain.records import SourceLine, TruncatedGroup
from fastq_check.domain.tally import ScanStatus, Tally
from fastq_check.observability.messages import LogMessage
from fastq_check.observability.sinks import NullLogSink
from fastq_check.ports.log_sink import LogSink
from fastq_check.usecases.error_report import ErrorReporter
from fastq_check.usecases.record_reader import read_records
from fastq_check.usecases.validator import RecordValidator


@dataclass(frozen=True, slots=True)
class ScanResult:
    tally: Tally
    status: ScanStatus
    error: str | None = None

    @property
    def exit_code(self) -> int:
        return self.status.exit_code


@dataclass
class Driver:
    """Sequential single-pass scan: read, validate, report, tally.

    Any FatalIOError from the line source or the error sink ends the scan
    with status Fatal; blocks already written stay intact.
    """

    validator: RecordValidator
    reporter: ErrorReporter
    log: LogSink = field(default_factory=NullLogSink)

    def run(self, lines: Iterable[SourceLine]) -> ScanResult:
        tally = Tally()
        self.log.emit(LogMessage(level="info", message="scan started", fields={"mode": "sequential"}))
        try:
            lines = open_input(lines)
            self.reporter.sink.open()
            self._scan(lines, tally)
            self.reporter.sink.close()
        except FatalIOError as exc:
            return abort_scan(self.reporter, self.log, tally, exc)
        tally.complete = True
        return summarize_scan(self.log, tally)

    def _scan(self, lines: Iterable[SourceLine], tally: Tally) -> None:
        for group in read_records(lines):
            if isinstance(group, TruncatedGroup):
                findings = [group.finding]
            else:
                findings = self.validator.validate(group)
            if not findings:
                tally.mark_valid()
                continue
            tally.mark_invalid()
            self.log.emit(
                LogMessage(
                    level="debug",
                    message="invalid record",
                    fields={
                        "start_line": group.start_line,
                        "kinds": [finding.kind.value for finding in findings],
                    },
                )
            )
            self.reporter.report(group, findings)


def open_input(lines: Iterable[SourceLine]) -> Iterator[SourceLine]:
    # Pull the first line before the report is truncated, so an unreadable
    # input leaves the previous report in place.
    source = iter(lines)
    first = next(source, None)
    if first is None:
        return source
    return chain((first,), source)


def summarize_scan(log: LogSink, tally: Tally) -> ScanResult:
    status = tally.status()
    log.emit(
        LogMessage(
            level="info",
            message="scan finished",
            fields={
                "status": status.value,
                "records_seen": tally.records_seen,
                "records_valid": tally.records_valid,
                "records_invalid": tally.records_invalid,
            },
        )
    )
    return ScanResult(tally=tally, status=status)


def abort_scan(reporter: ErrorReporter, log: LogSink, tally: Tally, exc: FatalIOError) -> ScanResult:
    # Keep whatever was written; a failing close must not mask the original error.
    tally.complete = False
    try:
        reporter.sink.close()
    except FatalIOError as close_exc:
        log.emit(LogMessage(level="error", message="closing diagnostics failed", fields={"error": str(close_exc)}))
    log.emit(
        LogMessage(
            level="error",
            message="scan aborted",
            fields={"path": str(exc.path), "error": str(exc.cause), "records_seen": tally.records_seen},
        )
    )
    return ScanResult(tally=tally, status=ScanStatus.FATAL, error=str(exc))
