from .file_library import FileLibrary
from .poller import BoundedPoller
from .reporting import LoggingReporter, RecordingReporter, Reporter

__all__ = [
    "BoundedPoller",
    "FileLibrary",
    "LoggingReporter",
    "RecordingReporter",
    "Reporter",
]
