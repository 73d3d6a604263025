from .errors import FatalIOError, InputReadError, ReportWriteError
from .records import RECORD_LINES, Finding, FindingKind, Record, SourceLine, TruncatedGroup
from .tally import ScanStatus, Tally

# Public domain exports keep imports explicit across layers.
__all__ = [
    "RECORD_LINES",
    "FatalIOError",
    "Finding",
    "FindingKind",
    "InputReadError",
    "Record",
    "ReportWriteError",
    "ScanStatus",
    "SourceLine",
    "Tally",
    "TruncatedGroup",
]
