from __future__ import annotations

from pathlib import Path

import pytest

from fastq_check.adapters.error_sink import FileErrorSink, MemoryErrorSink
from fastq_check.domain.errors import ReportWriteError


def test_error_sink_writes_lines_in_order(tmp_path: Path) -> None:
    path = tmp_path / "errors.txt"
    sink = FileErrorSink(path)
    sink.open()
    sink.write_line("first")
    sink.write_line("second")
    sink.close()
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"


def test_error_sink_open_truncates_previous_run(tmp_path: Path) -> None:
    # Each run starts from an empty report so repeated runs are byte-identical.
    path = tmp_path / "errors.txt"
    path.write_text("stale\n", encoding="utf-8")
    sink = FileErrorSink(path)
    sink.open()
    sink.close()
    assert path.read_text(encoding="utf-8") == ""


def test_error_sink_opens_lazily_on_first_write(tmp_path: Path) -> None:
    path = tmp_path / "errors.txt"
    sink = FileErrorSink(path)
    assert not path.exists()
    sink.write_line("line")
    sink.close()
    assert path.read_text(encoding="utf-8") == "line\n"


def test_error_sink_close_is_idempotent(tmp_path: Path) -> None:
    path = tmp_path / "errors.txt"
    sink = FileErrorSink(path)
    sink.write_line("line")
    sink.close()
    sink.close()
    assert path.read_text(encoding="utf-8") == "line\n"


def test_error_sink_unwritable_path_raises_report_write_error(tmp_path: Path) -> None:
    sink = FileErrorSink(tmp_path / "missing-dir" / "errors.txt")
    with pytest.raises(ReportWriteError) as excinfo:
        sink.open()
    assert "missing-dir" in str(excinfo.value)


def test_memory_sink_collects_text() -> None:
    sink = MemoryErrorSink()
    sink.open()
    sink.write_line("a")
    sink.write_line("")
    sink.close()
    assert sink.text() == "a\n\n"
    assert sink.closed is True
