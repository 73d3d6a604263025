from __future__ import annotations

from collections.abc import Sequence

from fastq_check.app.cli import run


def main(argv: Sequence[str] | None = None) -> int:
    # Console entrypoint; returns the process exit code.
    return run(list(argv) if argv is not None else None)
