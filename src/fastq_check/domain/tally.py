from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScanStatus(str, Enum):
    CLEAN = "Clean"
    FORMAT_ERRORS_FOUND = "FormatErrorsFound"
    FATAL = "Fatal"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    ScanStatus.CLEAN: 0,
    ScanStatus.FORMAT_ERRORS_FOUND: 1,
    ScanStatus.FATAL: 2,
}


@dataclass
class Tally:
    # Mutated once per group by the driver; read once at shutdown.
    records_seen: int = 0
    records_valid: int = 0
    records_invalid: int = 0
    complete: bool = False

    def mark_valid(self) -> None:
        self.records_seen += 1
        self.records_valid += 1

    def mark_invalid(self) -> None:
        self.records_seen += 1
        self.records_invalid += 1

    def merge(self, *, seen: int, invalid: int) -> None:
        # Partition results arrive as counts from worker processes.
        self.records_seen += seen
        self.records_invalid += invalid
        self.records_valid += seen - invalid

    def status(self) -> ScanStatus:
        if not self.complete:
            return ScanStatus.FATAL
        if self.records_invalid:
            return ScanStatus.FORMAT_ERRORS_FOUND
        return ScanStatus.CLEAN
