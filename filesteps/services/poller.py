import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional

from ..models import FileQuery, PollResult, PollStatus
from ..utils.file_operations import (
    count_files_matching,
    count_files_matching_async,
    resolve_query,
)
from .reporting import LoggingReporter, Reporter


VALIDATION_CATEGORY = "Validation"


class BoundedPoller:
    """
    Re-evaluates a file query until it matches or a deadline passes.

    Deadlines are taken from a monotonic clock once at poll start. Polls
    cannot be cancelled; they run until matched or the deadline is exceeded.
    """

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        count_poll_sleep_seconds: float = 0.001,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        async_sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        count_files: Callable[[FileQuery], int] = count_files_matching,
        count_files_async: Callable[
            [FileQuery], Awaitable[int]
        ] = count_files_matching_async,
    ):
        if count_poll_sleep_seconds < 0:
            raise ValueError("count_poll_sleep_seconds must be non-negative")

        self.reporter = reporter or LoggingReporter()
        self._count_poll_sleep = count_poll_sleep_seconds
        self._clock = clock
        self._sleep = sleep
        self._async_sleep = async_sleep
        self._count_files = count_files
        self._count_files_async = count_files_async

    def poll_until_count_matches(
        self, query: FileQuery, expected_count: int, timeout: float
    ) -> PollResult:
        """
        Poll until exactly expected_count files match, or timeout seconds pass.

        With count_poll_sleep_seconds == 0 this is a pure busy-poll.
        A timeout of 0 performs exactly one evaluation.
        """
        if expected_count < 0:
            raise ValueError(f"expected_count must be non-negative: {expected_count}")
        if timeout < 0:
            raise ValueError(f"timeout must be non-negative: {timeout}")

        query = resolve_query(query)
        start = self._clock()
        deadline = start + timeout

        count = self._count_files(query)
        evaluations = 1

        while count != expected_count and self._clock() < deadline:
            if self._count_poll_sleep > 0:
                self._sleep(self._count_poll_sleep)
            count = self._count_files(query)
            evaluations += 1

        elapsed = max(0.0, self._clock() - start)
        status = PollStatus.FOUND if count == expected_count else PollStatus.TIMED_OUT

        logging.debug(
            f"Count poll {query.path}/{query.pattern}: {count}/{expected_count} "
            f"after {evaluations} evaluations ({elapsed:.3f}s) -> {status.value}"
        )

        return PollResult(
            status=status,
            count=count,
            expected_count=expected_count,
            evaluations=evaluations,
            elapsed_seconds=elapsed,
        )

    def wait_until_exists(
        self, query: FileQuery, duration_ms: int, interval_ms: int
    ) -> PollResult:
        """Poll for at least one match, sleeping interval_ms between checks."""
        duration, interval = _validate_wait_arguments(duration_ms, interval_ms)

        query = resolve_query(query)
        start = self._clock()
        deadline = start + duration

        count = self._count_files(query)
        evaluations = 1

        while count == 0 and self._clock() < deadline:
            self._sleep(interval)
            count = self._count_files(query)
            evaluations += 1

        return self._existence_result(query, start, count, evaluations)

    async def wait_until_exists_async(
        self, query: FileQuery, duration_ms: int, interval_ms: int
    ) -> PollResult:
        duration, interval = _validate_wait_arguments(duration_ms, interval_ms)

        query = resolve_query(query)
        start = self._clock()
        deadline = start + duration

        count = await self._count_files_async(query)
        evaluations = 1

        while count == 0 and self._clock() < deadline:
            await self._async_sleep(interval)
            count = await self._count_files_async(query)
            evaluations += 1

        return self._existence_result(query, start, count, evaluations)

    def poll_until_exists(
        self, query: FileQuery, duration_ms: int, interval_ms: int
    ) -> None:
        """
        Wait for a file matching query and report the outcome.

        Nothing is returned; success or failure goes to the reporter.
        """
        result = self.wait_until_exists(query, duration_ms, interval_ms)
        self.report_existence(resolve_query(query), result)

    async def poll_until_exists_async(
        self, query: FileQuery, duration_ms: int, interval_ms: int
    ) -> None:
        result = await self.wait_until_exists_async(query, duration_ms, interval_ms)
        self.report_existence(resolve_query(query), result)

    def report_existence(self, query: FileQuery, result: PollResult) -> None:
        if result.matched:
            self.reporter.success(
                f"File with pattern '{query.pattern}' was found in directory "
                f"'{query.path}'.",
                VALIDATION_CATEGORY,
            )
        else:
            self.reporter.failure(
                f"File with pattern '{query.pattern}' wasn't found in directory "
                f"'{query.path}'.",
                VALIDATION_CATEGORY,
            )

    def _existence_result(
        self, query: FileQuery, start: float, count: int, evaluations: int
    ) -> PollResult:
        elapsed = max(0.0, self._clock() - start)
        status = PollStatus.FOUND if count > 0 else PollStatus.TIMED_OUT

        logging.debug(
            f"Existence poll {query.path}/{query.pattern}: {count} match(es) "
            f"after {evaluations} evaluations ({elapsed:.3f}s) -> {status.value}"
        )

        return PollResult(
            status=status,
            count=count,
            evaluations=evaluations,
            elapsed_seconds=elapsed,
        )


def _validate_wait_arguments(duration_ms: int, interval_ms: int):
    if duration_ms < 0:
        raise ValueError(f"duration_ms must be non-negative: {duration_ms}")
    if interval_ms < 0:
        raise ValueError(f"interval_ms must be non-negative: {interval_ms}")
    return duration_ms / 1000.0, interval_ms / 1000.0
