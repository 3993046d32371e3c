import fnmatch
import os
from datetime import datetime
from typing import List, Optional

import aiofiles.os

from ..core.exceptions import DirectoryListingError
from ..models import FileQuery


def resolve_path(path: str, cwd: Optional[str] = None) -> str:
    # Only paths starting with "." are treated as relative to the working directory
    if not path.startswith("."):
        return path

    base = cwd if cwd is not None else os.getcwd()
    return os.path.normpath(os.path.join(base, path))


def resolve_query(query: FileQuery, cwd: Optional[str] = None) -> FileQuery:
    resolved = resolve_path(query.path, cwd)
    if resolved == query.path:
        return query
    return FileQuery(path=resolved, pattern=query.pattern)


def matches_pattern(filename: str, pattern: str) -> bool:
    # Only * and ? are wildcards; brackets match literally
    return fnmatch.fnmatch(filename, pattern.replace("[", "[[]"))


def list_matching_files(query: FileQuery) -> List[str]:
    """
    List regular files directly under query.path whose name matches query.pattern.

    The pattern supports * and ? only; "[" and "]" are ordinary characters,
    so "report[1].txt" matches exactly that name.

    Raises:
        DirectoryListingError: if the directory cannot be listed
    """
    try:
        with os.scandir(query.path) as entries:
            matches = [
                entry.path
                for entry in entries
                if entry.is_file() and matches_pattern(entry.name, query.pattern)
            ]
    except OSError as e:
        raise DirectoryListingError(query.path, query.pattern, str(e)) from e

    return sorted(matches)


def count_files_matching(query: FileQuery) -> int:
    return len(list_matching_files(query))


async def list_matching_files_async(query: FileQuery) -> List[str]:
    try:
        names = await aiofiles.os.listdir(query.path)
        matches = []
        for name in names:
            if not matches_pattern(name, query.pattern):
                continue
            file_path = os.path.join(query.path, name)
            if await aiofiles.os.path.isfile(file_path):
                matches.append(file_path)
    except OSError as e:
        raise DirectoryListingError(query.path, query.pattern, str(e)) from e

    return sorted(matches)


async def count_files_matching_async(query: FileQuery) -> int:
    return len(await list_matching_files_async(query))


def build_timestamped_filename(
    prefix: str, extension: str, now: datetime, timestamp_format: str
) -> str:
    return f"{prefix}_{now.strftime(timestamp_format)}.{extension}"
