"""Data models for crossparser."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from crossparser.formatter import format_size


class FileCategory(str, Enum):
    """Category assigned to a file by its extension."""

    IMAGES = "Images"
    VIDEO = "Video"
    AUDIO = "Audio"
    DOCUMENTS = "Documents"
    CODE = "Code"
    OTHER = "Other"


class ScanWarning(BaseModel):
    """A path the scanner could not fully read."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path that caused the problem")
    error: str = Field(..., description="Reason reported by the filesystem")


class ScanResult(BaseModel):
    """Aggregate result of scanning one directory tree."""

    model_config = ConfigDict(frozen=True)

    total_files: int = Field(0, ge=0, description="Number of files visited")
    total_size: int = Field(0, ge=0, description="Total size of visited files in bytes")
    by_type: dict[FileCategory, int] = Field(
        default_factory=dict,
        description="File count per category (only categories that were seen)",
    )
    warnings: list[ScanWarning] = Field(
        default_factory=list,
        description="Paths that could not be read during the scan",
    )

    @property
    def size_human(self) -> str:
        """Human-readable total size (binary units)."""
        return format_size(self.total_size)

    @property
    def sorted_types(self) -> list[tuple[FileCategory, int]]:
        """Categories ordered by count, largest first."""
        return sorted(self.by_type.items(), key=lambda item: (-item[1], item[0].value))

    def count_for(self, category: FileCategory) -> int:
        """Number of files in a category, 0 if none were seen."""
        return self.by_type.get(category, 0)


class ScanRoot(BaseModel):
    """A directory offered to the user as a scan target."""

    name: str = Field(..., description="Display name (directory base name)")
    path: str = Field(..., description="Absolute path")
    exists: bool = Field(True, description="Whether the directory exists")


class Settings(BaseModel):
    """User configuration stored in config.json."""

    extra_roots: list[str] = Field(
        default_factory=list,
        description="Additional directories offered as scan roots",
    )
    storage_root: Optional[str] = Field(
        None,
        description="Base directory for the well-known scan roots",
    )
    show_warnings: bool = Field(True, description="Print scan warnings after results")
