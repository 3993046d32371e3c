"""
Reusable file-system steps for GUI test scripts.

Each step is an independent synchronous call: write a timestamped log file,
check a file count, delete matching files, wait for a file to appear.
Outcomes go to a Reporter; only programming errors and unreadable
directories raise.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import aiofiles

from ..config import Settings
from ..core.exceptions import FileCountMismatchError
from ..models import DeletionFailure, DeletionReport, FileQuery, PollResult
from ..utils.file_operations import (
    build_timestamped_filename,
    list_matching_files,
    resolve_path,
    resolve_query,
)
from .poller import VALIDATION_CATEGORY, BoundedPoller
from .reporting import LoggingReporter, Reporter


class FileLibrary:
    def __init__(
        self,
        settings: Settings,
        reporter: Optional[Reporter] = None,
        poller: Optional[BoundedPoller] = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        self._settings = settings
        self.reporter = reporter or LoggingReporter()
        self.poller = poller or BoundedPoller(
            reporter=self.reporter,
            count_poll_sleep_seconds=settings.count_poll_sleep_seconds,
        )
        self._now = now

        logging.debug("FileLibrary initialized")

    def _log_file_path(self, filename_prefix: str, file_extension: str) -> Path:
        filename = build_timestamped_filename(
            filename_prefix,
            file_extension,
            self._now(),
            self._settings.timestamp_format,
        )
        return Path(resolve_path(self._settings.output_directory)) / filename

    def write_to_file(
        self, text: str, filename_prefix: str, file_extension: str
    ) -> Optional[Path]:
        """
        Create <prefix>_<timestamp>.<extension> in the output directory.

        Creation errors are logged and swallowed so a broken log file never
        fails the test step. Returns the written path, or None on error.
        """
        file_path = self._log_file_path(filename_prefix, file_extension)
        self.reporter.info(file_path.name)

        try:
            data = text.encode("utf-8")
            with open(file_path, "wb") as f:
                f.write(data)
        except (OSError, ValueError):
            logging.exception(f"Could not write log file {file_path}")
            return None

        return file_path

    async def write_to_file_async(
        self, text: str, filename_prefix: str, file_extension: str
    ) -> Optional[Path]:
        file_path = self._log_file_path(filename_prefix, file_extension)
        self.reporter.info(file_path.name)

        try:
            data = text.encode("utf-8")
            async with aiofiles.open(file_path, "wb") as f:
                await f.write(data)
        except (OSError, ValueError):
            logging.exception(f"Could not write log file {file_path}")
            return None

        return file_path

    def check_files_exist(
        self, path: str, pattern: str, expected_count: int, timeout: float
    ) -> PollResult:
        """
        Validate that expected_count files matching pattern exist in path.

        Args:
            path: relative or absolute directory to search
            pattern: glob pattern for the file names
            expected_count: number of files that must match
            timeout: search timeout in seconds

        Raises:
            FileCountMismatchError: on mismatch, if raise_on_validation_failure is set
        """
        query = resolve_query(FileQuery(path=path, pattern=pattern))
        result = self.poller.poll_until_count_matches(query, expected_count, timeout)

        self.reporter.info(
            f"Check if '{expected_count}' file(s) with pattern '{pattern}' exist "
            f"in the directory '{query.path}'. Search time {timeout} seconds."
        )

        if result.matched:
            self.reporter.success(
                f"Found {result.count} file(s) with pattern '{pattern}' in "
                f"'{query.path}' as expected.",
                VALIDATION_CATEGORY,
            )
            return result

        self.reporter.failure(
            f"Expected {expected_count} file(s) with pattern '{pattern}' in "
            f"'{query.path}', but found {result.count}.",
            VALIDATION_CATEGORY,
        )
        if self._settings.raise_on_validation_failure:
            raise FileCountMismatchError(
                query.path, pattern, expected_count, result.count
            )
        return result

    def delete_files(self, path: str, pattern: str) -> DeletionReport:
        """Delete every file matching pattern in path, once, without retries."""
        query = resolve_query(FileQuery(path=path, pattern=pattern))
        files = list_matching_files(query)
        report = DeletionReport(query=query)

        if not files:
            self.reporter.warning(
                f"No files have been found in '{query.path}' with the pattern "
                f"'{pattern}'."
            )
            return report

        for file_path in files:
            try:
                os.remove(file_path)
            except OSError as e:
                self.reporter.error(str(e))
                report.failed.append(
                    DeletionFailure(file_path=file_path, error_message=str(e))
                )
                continue

            self.reporter.info(f"File has been deleted: {file_path}")
            report.deleted.append(file_path)

        if report.failed:
            logging.warning(
                f"Deleted {len(report.deleted)} of {report.matched_count} files "
                f"matching '{pattern}' in {query.path}"
            )

        return report

    def wait_for_file(
        self,
        path: str,
        pattern: str,
        duration: Optional[int] = None,
        interval: Optional[int] = None,
    ) -> None:
        """
        Repeatedly check for a file matching pattern in path.

        duration and interval are in milliseconds; the outcome is reported,
        not returned.
        """
        self.poller.poll_until_exists(
            FileQuery(path=path, pattern=pattern),
            self._duration(duration),
            self._interval(interval),
        )

    async def wait_for_file_async(
        self,
        path: str,
        pattern: str,
        duration: Optional[int] = None,
        interval: Optional[int] = None,
    ) -> None:
        await self.poller.poll_until_exists_async(
            FileQuery(path=path, pattern=pattern),
            self._duration(duration),
            self._interval(interval),
        )

    def _duration(self, duration: Optional[int]) -> int:
        if duration is None:
            return self._settings.default_wait_duration_ms
        return duration

    def _interval(self, interval: Optional[int]) -> int:
        if interval is None:
            return self._settings.default_wait_interval_ms
        return interval
