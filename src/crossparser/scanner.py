"""Directory scanning for crossparser.

Walks a directory tree depth-first and aggregates file counts and sizes,
grouped by the category inferred from each file's extension.
"""

import logging
import os
import stat
from collections import Counter
from pathlib import Path
from typing import Callable

from crossparser.categories import categorize
from crossparser.models import ScanResult, ScanWarning

logger = logging.getLogger(__name__)

# Directory names never descended into (matched against the base name only)
SKIP_DIRECTORIES = frozenset(
    {
        ".git",
        "__pycache__",
        "node_modules",
        ".gradle",
        "build",
    }
)


def _entry_size(entry: os.DirEntry) -> int:
    """Size of a non-directory entry, following symlinks."""
    return entry.stat(follow_symlinks=True).st_size


def _dir_key(path: str) -> tuple[int, int]:
    """Identity of a directory, following symlinks."""
    st = os.stat(path)
    return st.st_dev, st.st_ino


def scan_directory(
    root: str | os.PathLike,
    progress_callback: Callable[[str, int], None] | None = None,
) -> ScanResult:
    """
    Scan a directory tree and summarize its files.

    Directories whose name is in SKIP_DIRECTORIES are skipped together with
    everything beneath them. Symlinks to directories are followed like real
    directories, but each directory is walked at most once, so link cycles
    terminate. Everything that is not a directory counts as a file.

    The scan never raises for filesystem problems: unreadable directories
    contribute nothing, files whose size cannot be read count with size 0,
    and both are reported in ``ScanResult.warnings``.

    Args:
        root: Directory to scan (may start with ~)
        progress_callback: Optional callback(path, dirs_scanned) called for
            each directory as it is listed

    Returns:
        ScanResult for the whole tree
    """
    root_path = Path(os.path.expanduser(os.fspath(root)))

    total_files = 0
    total_size = 0
    by_type: Counter = Counter()
    warnings: list[ScanWarning] = []

    def warn(path: str, error: OSError) -> None:
        message = error.strerror or str(error)
        logger.warning("Skipping %s: %s", path, message)
        warnings.append(ScanWarning(path=path, error=message))

    if root_path.name in SKIP_DIRECTORIES:
        logger.debug("Root %s is a skipped directory name", root_path)
        return ScanResult()

    try:
        root_stat = os.stat(root_path)
    except OSError as e:
        warn(str(root_path), e)
        return ScanResult(warnings=warnings)

    if not stat.S_ISDIR(root_stat.st_mode):
        logger.debug("Root %s is not a directory", root_path)
        return ScanResult()

    logger.debug("Scanning %s", root_path)

    visited: set[tuple[int, int]] = {(root_stat.st_dev, root_stat.st_ino)}
    stack: list[str] = [str(root_path)]
    dirs_scanned = 0

    while stack:
        current = stack.pop()
        subdirs: list[str] = []

        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    try:
                        is_dir = entry.is_dir()
                    except OSError:
                        is_dir = False

                    if is_dir:
                        if entry.name in SKIP_DIRECTORIES:
                            continue
                        try:
                            key = _dir_key(entry.path)
                        except OSError as e:
                            warn(entry.path, e)
                            continue
                        if key in visited:
                            logger.debug("Already scanned %s", entry.path)
                            continue
                        visited.add(key)
                        subdirs.append(entry.path)
                        continue

                    try:
                        size = _entry_size(entry)
                    except OSError as e:
                        warn(entry.path, e)
                        size = 0

                    total_files += 1
                    total_size += size
                    by_type[categorize(entry.name)] += 1
        except OSError as e:
            warn(current, e)
            if not subdirs:
                continue

        dirs_scanned += 1
        if progress_callback:
            progress_callback(current, dirs_scanned)

        # Reversed so the first listed subdirectory is visited first
        stack.extend(reversed(subdirs))

    logger.debug(
        "Scanned %s: %d files, %d bytes in %d directories",
        root_path,
        total_files,
        total_size,
        dirs_scanned,
    )

    return ScanResult(
        total_files=total_files,
        total_size=total_size,
        by_type=dict(by_type),
        warnings=warnings,
    )
