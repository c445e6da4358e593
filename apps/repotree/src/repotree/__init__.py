"""List the recursive file tree of a GitHub repository."""

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    MalformedIdentifierError,
    MissingCredentialError,
    OutputWriteFailedError,
    RepoTreeError,
)
from .models import RepoIdentifier  # noqa: E402
from .output import write_output  # noqa: E402
from .parser import parse_repo_name  # noqa: E402
from .render import format_tree  # noqa: E402
from .workflow import Stage, TreeLister  # noqa: E402

__all__ = [
    "TreeLister",
    "Stage",
    "RepoIdentifier",
    "parse_repo_name",
    "format_tree",
    "write_output",
    "RepoTreeError",
    "MalformedIdentifierError",
    "MissingCredentialError",
    "OutputWriteFailedError",
]
