"""File-system steps for GUI test automation."""

from .config import Settings
from .core.exceptions import (
    DirectoryListingError,
    FileCountMismatchError,
    FileStepError,
)
from .models import DeletionReport, FileQuery, PollResult, PollStatus, ReportLevel
from .services import (
    BoundedPoller,
    FileLibrary,
    LoggingReporter,
    RecordingReporter,
    Reporter,
)

__all__ = [
    "BoundedPoller",
    "DeletionReport",
    "DirectoryListingError",
    "FileCountMismatchError",
    "FileLibrary",
    "FileQuery",
    "FileStepError",
    "LoggingReporter",
    "PollResult",
    "PollStatus",
    "RecordingReporter",
    "ReportLevel",
    "Reporter",
    "Settings",
]
