"""GitHub API client utilities."""

from .client import GitHubClient, get_token
from .errors import (
    DecodeFailedError,
    GitHubError,
    MissingDefaultBranchError,
    RequestFailedError,
)
from .models import EntryKind, GitTree, Repository, TreeEntry

__all__ = [
    "GitHubClient",
    "GitHubError",
    "RequestFailedError",
    "DecodeFailedError",
    "MissingDefaultBranchError",
    "EntryKind",
    "GitTree",
    "Repository",
    "TreeEntry",
    "get_token",
]
