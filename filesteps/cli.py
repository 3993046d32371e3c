#!/usr/bin/env python3
"""
Command line entry for the file steps.
Runs a single step and exits with status 1 if a failure was reported.
"""

import argparse
import logging
from typing import List, Optional

from .core.exceptions import FileStepError
from .dependencies import get_file_library, get_reporter, get_settings
from .logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filesteps", description="File-system steps for test automation"
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Skip console/file logging setup (use the current logging config)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    write = subparsers.add_parser("write", help="Write a timestamped log file")
    write.add_argument("text")
    write.add_argument("--prefix", default="log")
    write.add_argument("--extension", default="txt")

    check = subparsers.add_parser("check", help="Check the number of matching files")
    check.add_argument("path")
    check.add_argument("pattern")
    check.add_argument("--expected", type=int, required=True)
    check.add_argument(
        "--timeout", type=float, default=0, help="Search timeout in seconds"
    )

    delete = subparsers.add_parser("delete", help="Delete matching files")
    delete.add_argument("path")
    delete.add_argument("pattern")

    wait = subparsers.add_parser("wait", help="Wait for a matching file")
    wait.add_argument("path")
    wait.add_argument("pattern")
    wait.add_argument("--duration-ms", type=int, default=None)
    wait.add_argument("--interval-ms", type=int, default=None)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if not args.no_log_file:
        setup_logging(get_settings())

    reporter = get_reporter()
    library = get_file_library()

    try:
        if args.command == "write":
            library.write_to_file(args.text, args.prefix, args.extension)
        elif args.command == "check":
            library.check_files_exist(
                args.path, args.pattern, args.expected, args.timeout
            )
        elif args.command == "delete":
            library.delete_files(args.path, args.pattern)
        elif args.command == "wait":
            library.wait_for_file(
                args.path, args.pattern, args.duration_ms, args.interval_ms
            )
    except (FileStepError, ValueError) as e:
        logging.error(str(e))
        return 1

    return 1 if reporter.has_failures else 0

