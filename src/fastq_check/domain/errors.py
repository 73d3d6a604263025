from __future__ import annotations

from pathlib import Path


class FatalIOError(Exception):
    # I/O failures abort the scan; findings never do.
    action = "I/O failure on"

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"{self.action} {path}: {cause}")
        self.path = path
        self.cause = cause


class InputReadError(FatalIOError):
    action = "cannot read input"


class ReportWriteError(FatalIOError):
    action = "cannot write diagnostics to"
