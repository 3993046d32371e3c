import logging
import logging.handlers
from typing import List

from rich.console import Console
from rich.logging import RichHandler

from .config import Settings

FILE_FORMAT = (
    "%(asctime)s - %(levelname)s - %(name)s - "
    "%(filename)s:%(lineno)d in %(funcName)s() - %(message)s"
)

# Step outcomes are always written, even when log_level is stricter
REPORT_LOGGER = "filesteps.report"


def _console_handler(settings: Settings) -> logging.Handler:
    handler = RichHandler(
        console=Console(width=120, stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(settings.log_level)
    return handler


def _file_handler(settings: Settings) -> logging.Handler:
    settings.log_directory.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=settings.log_file_path,
        when="midnight",
        backupCount=settings.log_retention_days,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(settings: Settings, console: bool = True) -> List[logging.Handler]:
    """
    Route all logging to a rotating log file and, optionally, a Rich console.

    The file handler accepts every level the loggers let through, so report
    entries reach the file even if the console is filtered by log_level.
    Returns the installed handlers.
    """
    handlers = [_file_handler(settings)]
    if console:
        handlers.append(_console_handler(settings))

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)

    report_logger = logging.getLogger(REPORT_LOGGER)
    report_logger.setLevel(min(logging.INFO, root_logger.level))

    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.info(
        f"Logging initialized - File: {settings.log_file_path}, "
        f"Level: {settings.log_level}, "
        f"Retention: {settings.log_retention_days} days"
    )
    return handlers
