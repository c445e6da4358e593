"""Listing workflow: parse -> resolve branch -> fetch tree -> render -> write."""

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from gh import GitHubClient
from gh.client import TOKEN_ENV_VAR

from .errors import MissingCredentialError
from .output import write_output
from .parser import parse_repo_name
from .render import format_tree

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = (
    "GitHub token not provided. Pass it with --token, set the "
    f"{TOKEN_ENV_VAR} environment variable, or add {TOKEN_ENV_VAR}=<token> "
    "to a .env file"
)


class Stage(str, Enum):
    """Pipeline stages, in execution order. FAILED is terminal."""

    PARSING = "parsing"
    RESOLVING_BRANCH = "resolving_branch"
    FETCHING_TREE = "fetching_tree"
    RENDERING = "rendering"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


def require_token(token: str | None) -> str:
    if not token:
        raise MissingCredentialError(MISSING_TOKEN_MESSAGE)
    return token


class TreeLister:
    """Lists the tree of a repository's default branch."""

    def __init__(self, client_factory: Callable[[str], GitHubClient] = GitHubClient):
        """
        Initialize lister.

        Args:
            client_factory: Builds a GitHubClient from a token
        """
        self.client_factory = client_factory
        self.stage = Stage.PARSING
        self.failed_stage: Stage | None = None

    def _enter(self, stage: Stage) -> None:
        logger.debug("Stage: %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    def run(
        self,
        repo_name: str,
        token: str | None,
        output_file: Path | None = None,
    ) -> str:
        """
        Run the full pipeline for ``repo_name`` and write the listing.

        Input and credentials are validated before any request is made.
        Any error moves the lister to FAILED, records the stage it happened
        in as ``failed_stage`` and propagates.

        Args:
            repo_name: Repository in the format "owner/repo"
            token: Resolved GitHub token (None if none was found)
            output_file: Destination file (None for stdout)

        Returns:
            The rendered listing
        """
        try:
            return self._run(repo_name, token, output_file)
        except Exception:
            self.failed_stage = self.stage
            self._enter(Stage.FAILED)
            raise

    def _run(self, repo_name: str, token: str | None, output_file: Path | None) -> str:
        self._enter(Stage.PARSING)
        repo = parse_repo_name(repo_name)
        client = self.client_factory(require_token(token))

        self._enter(Stage.RESOLVING_BRANCH)
        branch = client.resolve_default_branch(repo.owner, repo.name)

        self._enter(Stage.FETCHING_TREE)
        entries = client.fetch_tree(repo.owner, repo.name, branch)

        self._enter(Stage.RENDERING)
        text = format_tree(entries)

        self._enter(Stage.WRITING)
        write_output(text, output_file)

        self._enter(Stage.DONE)
        logger.info("Listed %d entries of %s@%s", len(entries), repo, branch)
        return text
