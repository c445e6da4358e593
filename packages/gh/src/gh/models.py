"""GitHub API data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EntryKind(str, Enum):
    """Classification of a git tree node."""

    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


class Repository(BaseModel):
    """Repository metadata (only the fields we read)."""

    model_config = ConfigDict(frozen=True, strict=True)

    default_branch: str | None = None


class TreeEntry(BaseModel):
    """Single node of a git tree."""

    model_config = ConfigDict(frozen=True, strict=True)

    path: str
    mode: str
    type: str  # "tree", "blob", "commit" (submodule), ...
    sha: str
    size: int | None = Field(default=None, ge=0)  # Only present for blobs
    url: str | None = None

    @property
    def kind(self) -> EntryKind:
        if self.type == "tree":
            return EntryKind.DIRECTORY
        if self.type == "blob":
            return EntryKind.FILE
        return EntryKind.OTHER


class GitTree(BaseModel):
    """Git tree response."""

    model_config = ConfigDict(frozen=True, strict=True)

    sha: str
    url: str
    truncated: bool
    tree: list[TreeEntry]
