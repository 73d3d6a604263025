from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from fastq_check.domain.records import Finding, Record, TruncatedGroup
from fastq_check.ports.error_sink import ErrorSink

_INDENT = "  "


def format_block(group: Record | TruncatedGroup, findings: Sequence[Finding]) -> list[str]:
    # Block layout: heading, one bullet per finding, the raw lines verbatim, blank separator.
    block = [f"Record starting at line {group.start_line}:"]
    block.extend(f"{_INDENT}- {finding.kind.value}: {finding.detail}" for finding in findings)
    block.extend(f"{_INDENT}{line}" for line in group.lines)
    block.append("")
    return block


@dataclass
class ErrorReporter:
    # Appends one diagnostic block per bad group, in the order report() is called.
    sink: ErrorSink
    blocks_written: int = 0

    def report(self, group: Record | TruncatedGroup, findings: Sequence[Finding]) -> None:
        if not findings:
            raise ValueError("report() requires at least one finding")
        self.write_block(format_block(group, findings))

    def write_block(self, block: Sequence[str]) -> None:
        for line in block:
            self.sink.write_line(line)
        self.blocks_written += 1
