from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict


class PollStatus(str, Enum):
    """Terminal state of a poll."""

    FOUND = "Found"  # Betingelsen blev opfyldt inden deadline
    TIMED_OUT = "TimedOut"  # Deadline passeret uden match


class ReportLevel(str, Enum):
    """Levels accepted by the reporting collaborator"""

    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    SUCCESS = "Success"
    FAILURE = "Failure"


class FileQuery(BaseModel):
    """
    Directory plus glob-style filename pattern.

    Immutable for the duration of a poll.
    """

    path: str = Field(..., description="Directory to search (relative or absolute)")
    pattern: str = Field(..., description="Glob pattern, e.g. '*.log'")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"path": "./output", "pattern": "*.log"}},
    )


class PollResult(BaseModel):
    status: PollStatus
    count: int = Field(default=0, ge=0, description="Last observed match count")
    expected_count: Optional[int] = Field(
        default=None, ge=0, description="Target count for count-based polls"
    )
    evaluations: int = Field(
        default=0, ge=0, description="Number of times the directory was listed"
    )
    elapsed_seconds: float = Field(default=0.0, ge=0.0)

    model_config = ConfigDict(frozen=True)

    @property
    def matched(self) -> bool:
        return self.status == PollStatus.FOUND


class ReportEntry(BaseModel):
    level: ReportLevel
    message: str
    category: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)


class DeletionFailure(BaseModel):
    file_path: str
    error_message: str


class DeletionReport(BaseModel):
    """
    Outcome of a delete_files step.

    Returned to the caller instead of being tracked in module-level counters.
    """

    query: FileQuery
    deleted: List[str] = Field(default_factory=list)
    failed: List[DeletionFailure] = Field(default_factory=list)

    @property
    def matched_count(self) -> int:
        return len(self.deleted) + len(self.failed)

    @property
    def all_deleted(self) -> bool:
        return not self.failed
