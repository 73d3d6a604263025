from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from fastq_check.domain.records import SourceLine


# LineSource port defines how raw input lines enter the checker.
@runtime_checkable
class LineSource(Protocol):
    def read(self) -> Iterable[SourceLine]:
        """Yield SourceLine values lazily in file order."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("LineSource is a port; use a concrete adapter.")
