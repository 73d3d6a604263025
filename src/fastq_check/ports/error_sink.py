from __future__ import annotations

from typing import Protocol, runtime_checkable


# ErrorSink port receives formatted diagnostic lines, append-only.
@runtime_checkable
class ErrorSink(Protocol):
    def open(self) -> None:
        """Start a fresh diagnostic output for this run."""
        raise NotImplementedError("ErrorSink is a port; use a concrete adapter.")

    def write_line(self, line: str) -> None:
        """Append one diagnostic line."""
        raise NotImplementedError("ErrorSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Flush and release resources held by the sink."""
        raise NotImplementedError("ErrorSink is a port; use a concrete adapter.")
