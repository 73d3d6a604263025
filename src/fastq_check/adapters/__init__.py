from .error_sink import FileErrorSink, MemoryErrorSink
from .line_source import FileLineSource
from .log_sinks import log_sink_from_config

# Public adapter exports are optional but make wiring simpler.
__all__ = ["FileErrorSink", "FileLineSource", "MemoryErrorSink", "log_sink_from_config"]
