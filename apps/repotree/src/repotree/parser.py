"""Repository name parser."""

import logging

from .errors import MalformedIdentifierError
from .models import RepoIdentifier

logger = logging.getLogger(__name__)

SEPARATOR = "/"


def parse_repo_name(value: str) -> RepoIdentifier:
    """
    Parse a repository name in the format "owner/repo".

    The value is split on "/" as-is: no trimming or case folding.

    Raises:
        MalformedIdentifierError: If the value does not split into exactly
            two non-empty parts
    """
    parts = value.split(SEPARATOR)
    if len(parts) != 2 or not all(parts):
        logger.debug("Rejected repository name: %r", value)
        raise MalformedIdentifierError(
            f"Repository name must be in the format 'owner/repo', got {value!r}"
        )
    owner, name = parts
    return RepoIdentifier(owner=owner, name=name)
