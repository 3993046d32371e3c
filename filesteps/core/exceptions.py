# filesteps/core/exceptions.py


class FileStepError(Exception):
    """Base class for errors raised by the file steps themselves."""


class DirectoryListingError(FileStepError):
    """Raised when the directory behind a query cannot be listed."""
    def __init__(self, path: str, pattern: str, reason: str):
        self.path = path
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            f"Cannot list '{path}' for pattern '{pattern}': {reason}"
        )


class FileCountMismatchError(FileStepError, AssertionError):
    """Raised when a file-count validation fails."""
    def __init__(self, path: str, pattern: str, expected: int, actual: int):
        self.path = path
        self.pattern = pattern
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected {expected} file(s) with pattern '{pattern}' in "
            f"'{path}', found {actual}."
        )
