from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

from fastq_check.domain.records import RECORD_LINES, Record, SourceLine, TruncatedGroup


def read_records(lines: Iterable[SourceLine]) -> Iterator[Record | TruncatedGroup]:
    """Group a line stream into four-line records.

    The reader holds at most one in-flight group. If the stream ends with 1-3
    leftover lines a single TruncatedGroup is yielded and iteration stops.
    Content is never inspected here; rule checks belong to RecordValidator.
    """
    source = iter(lines)
    while True:
        group = tuple(islice(source, RECORD_LINES))
        if not group:
            return
        if len(group) < RECORD_LINES:
            yield TruncatedGroup(
                start_line=group[0].line_no,
                lines=tuple(line.text for line in group),
            )
            return
        header, sequence, plus_line, quality = group
        yield Record(
            start_line=header.line_no,
            header=header.text,
            sequence=sequence.text,
            plus_line=plus_line.text,
            quality=quality.text,
        )
