"""
Tests for the reporting sinks.
"""

import logging

import pytest

from filesteps.models import ReportLevel
from filesteps.services.reporting import LoggingReporter, RecordingReporter


class TestLoggingReporter:
    @pytest.mark.parametrize(
        "method, log_level",
        [
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
            ("success", logging.INFO),
            ("failure", logging.ERROR),
        ],
    )
    def test_levels_map_to_logging(self, caplog, method, log_level):
        reporter = LoggingReporter()

        with caplog.at_level(logging.DEBUG, logger="filesteps.report"):
            getattr(reporter, method)("message")

        assert caplog.records[-1].levelno == log_level

    def test_category_included_in_message(self, caplog):
        reporter = LoggingReporter()

        with caplog.at_level(logging.INFO, logger="filesteps.report"):
            reporter.success("File found", "Validation")

        assert caplog.records[-1].getMessage() == "[Success] Validation: File found"


class TestRecordingReporter:
    def test_records_entries_in_order(self):
        reporter = RecordingReporter()

        reporter.info("one")
        reporter.warning("two")
        reporter.success("three", "Validation")

        assert [e.level for e in reporter.entries] == [
            ReportLevel.INFO,
            ReportLevel.WARNING,
            ReportLevel.SUCCESS,
        ]
        assert reporter.last.category == "Validation"
        assert not reporter.has_failures

    @pytest.mark.parametrize("method", ["error", "failure"])
    def test_has_failures(self, method):
        reporter = RecordingReporter()

        getattr(reporter, method)("broken")

        assert reporter.has_failures

    def test_forwards_to_other_reporter(self):
        inner = RecordingReporter()
        reporter = RecordingReporter(forward_to=inner)

        reporter.failure("missing", "Validation")

        assert [(e.level, e.message, e.category) for e in inner.entries] == [
            (ReportLevel.FAILURE, "missing", "Validation")
        ]

    def test_clear(self):
        reporter = RecordingReporter()
        reporter.info("x")

        reporter.clear()

        assert reporter.entries == []
        assert reporter.last is None
