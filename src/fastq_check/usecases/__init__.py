from .driver import Driver, ScanResult
from .error_report import ErrorReporter, format_block
from .parallel import ParallelDriver
from .record_reader import read_records
from .validator import QualityRange, RecordValidator

__all__ = [
    "Driver",
    "ErrorReporter",
    "ParallelDriver",
    "QualityRange",
    "RecordValidator",
    "ScanResult",
    "format_block",
    "read_records",
]
