from functools import lru_cache
from typing import Dict, Any

from .config import Settings
from .services.file_library import FileLibrary
from .services.reporting import LoggingReporter, RecordingReporter

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Return the Settings singleton instance."""
    return Settings()


def get_reporter() -> RecordingReporter:
    """Report stream shared by all steps; every entry is also logged."""
    if "reporter" not in _singletons:
        _singletons["reporter"] = RecordingReporter(forward_to=LoggingReporter())
    return _singletons["reporter"]


def get_file_library() -> FileLibrary:
    if "file_library" not in _singletons:
        _singletons["file_library"] = FileLibrary(
            settings=get_settings(), reporter=get_reporter()
        )
    return _singletons["file_library"]


def reset_singletons() -> None:
    """Reset all singletons (for testing)."""
    _singletons.clear()
    get_settings.cache_clear()
