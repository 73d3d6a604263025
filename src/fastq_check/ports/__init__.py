from .error_sink import ErrorSink
from .line_source import LineSource
from .log_sink import LogSink

# Public port exports keep wiring explicit at composition time.
__all__ = ["ErrorSink", "LineSource", "LogSink"]
