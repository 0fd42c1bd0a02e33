"""Candidate scan roots offered to the user."""

import os
from pathlib import Path

from crossparser.config import expand_path
from crossparser.models import ScanRoot, Settings

# Well-known media directories, relative to the storage root
DEFAULT_ROOTS = [
    "Download",
    "DCIM",
    "Pictures",
    "Movies",
    "Android/data",
]


def get_storage_root(storage_root: str | None = None) -> Path:
    """Resolve the storage root: explicit value, $EXTERNAL_STORAGE, then home."""
    if storage_root:
        return expand_path(storage_root)
    env_root = os.environ.get("EXTERNAL_STORAGE")
    if env_root:
        return expand_path(env_root)
    return Path.home()


def _make_root(path: Path) -> ScanRoot:
    return ScanRoot(name=path.name or str(path), path=str(path), exists=path.is_dir())


def get_default_roots(storage_root: str | None = None) -> list[ScanRoot]:
    """
    Get the well-known directories that exist under the storage root.

    Args:
        storage_root: Base directory; see get_storage_root()

    Returns:
        Existing candidate directories, in DEFAULT_ROOTS order
    """
    base = get_storage_root(storage_root)
    roots = [_make_root(base / relative) for relative in DEFAULT_ROOTS]
    return [r for r in roots if r.exists]


def get_scan_roots(settings: Settings | None = None) -> list[ScanRoot]:
    """Default roots plus configured extra roots, without duplicates."""
    settings = settings or Settings()

    roots = get_default_roots(settings.storage_root)
    roots.extend(_make_root(expand_path(p)) for p in settings.extra_roots)

    seen: set[str] = set()
    unique: list[ScanRoot] = []
    for root in roots:
        if not root.exists or root.path in seen:
            continue
        seen.add(root.path)
        unique.append(root)
    return unique
