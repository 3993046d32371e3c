"""Reporting sinks for test step outcomes."""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import ReportEntry, ReportLevel


_LOG_LEVELS = {
    ReportLevel.INFO: logging.INFO,
    ReportLevel.WARNING: logging.WARNING,
    ReportLevel.ERROR: logging.ERROR,
    ReportLevel.SUCCESS: logging.INFO,
    ReportLevel.FAILURE: logging.ERROR,
}


class Reporter(ABC):
    """Abstract sink accepting leveled messages from the file steps."""

    @abstractmethod
    def report(
        self, level: ReportLevel, message: str, category: Optional[str] = None
    ) -> None:
        """Deliver one message."""
        pass

    def info(self, message: str, category: Optional[str] = None) -> None:
        self.report(ReportLevel.INFO, message, category)

    def warning(self, message: str, category: Optional[str] = None) -> None:
        self.report(ReportLevel.WARNING, message, category)

    def error(self, message: str, category: Optional[str] = None) -> None:
        self.report(ReportLevel.ERROR, message, category)

    def success(self, message: str, category: Optional[str] = None) -> None:
        self.report(ReportLevel.SUCCESS, message, category)

    def failure(self, message: str, category: Optional[str] = None) -> None:
        self.report(ReportLevel.FAILURE, message, category)


class LoggingReporter(Reporter):
    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("filesteps.report")

    def report(
        self, level: ReportLevel, message: str, category: Optional[str] = None
    ) -> None:
        prefix = f"[{level.value}]"
        if category:
            prefix = f"{prefix} {category}:"
        self._logger.log(_LOG_LEVELS[level], f"{prefix} {message}")


class RecordingReporter(Reporter):
    """
    Keeps every report entry in memory so callers can inspect the report stream.

    Optionally forwards each entry to another reporter.
    """

    def __init__(self, forward_to: Optional[Reporter] = None):
        self.entries: List[ReportEntry] = []
        self._forward_to = forward_to

    def report(
        self, level: ReportLevel, message: str, category: Optional[str] = None
    ) -> None:
        self.entries.append(
            ReportEntry(level=level, message=message, category=category)
        )
        if self._forward_to is not None:
            self._forward_to.report(level, message, category)

    def entries_at(self, level: ReportLevel) -> List[ReportEntry]:
        return [entry for entry in self.entries if entry.level == level]

    @property
    def has_failures(self) -> bool:
        return any(
            entry.level in (ReportLevel.FAILURE, ReportLevel.ERROR)
            for entry in self.entries
        )

    @property
    def last(self) -> Optional[ReportEntry]:
        return self.entries[-1] if self.entries else None

    def clear(self) -> None:
        self.entries.clear()
