"""File category definitions for crossparser."""

from crossparser.models import FileCategory

# Lowercase extension (no leading dot) -> category
EXTENSION_CATEGORIES: dict[str, FileCategory] = {
    # Images
    "jpg": FileCategory.IMAGES,
    "jpeg": FileCategory.IMAGES,
    "png": FileCategory.IMAGES,
    "gif": FileCategory.IMAGES,
    "webp": FileCategory.IMAGES,
    "svg": FileCategory.IMAGES,
    # Video
    "mp4": FileCategory.VIDEO,
    "avi": FileCategory.VIDEO,
    "mkv": FileCategory.VIDEO,
    "mov": FileCategory.VIDEO,
    # Audio
    "mp3": FileCategory.AUDIO,
    "wav": FileCategory.AUDIO,
    "flac": FileCategory.AUDIO,
    # Documents
    "pdf": FileCategory.DOCUMENTS,
    "doc": FileCategory.DOCUMENTS,
    "docx": FileCategory.DOCUMENTS,
    "txt": FileCategory.DOCUMENTS,
    # Code
    "java": FileCategory.CODE,
    "kt": FileCategory.CODE,
    "py": FileCategory.CODE,
    "js": FileCategory.CODE,
    "html": FileCategory.CODE,
    "css": FileCategory.CODE,
}


def get_extension(name: str) -> str:
    """
    Get the extension of a file name.

    The extension is everything after the last dot, so ``.bashrc`` has the
    extension ``bashrc`` and ``archive.tar.gz`` has ``gz``. Names without a
    dot have no extension.

    Args:
        name: File base name

    Returns:
        Extension without the leading dot, or an empty string
    """
    _, dot, extension = name.rpartition(".")
    return extension if dot else ""


def categorize(name: str) -> FileCategory:
    """Get the category of a file from its name (case-insensitive)."""
    return EXTENSION_CATEGORIES.get(get_extension(name).lower(), FileCategory.OTHER)


def get_extensions(category: FileCategory) -> list[str]:
    """Get all extensions mapped to a category."""
    return [ext for ext, cat in EXTENSION_CATEGORIES.items() if cat == category]


def get_all_categories() -> list[FileCategory]:
    """Get all categories, in display order."""
    return list(FileCategory)
