"""GitHub API client."""

import logging
import os
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import DecodeFailedError, MissingDefaultBranchError, RequestFailedError
from .models import GitTree, Repository, TreeEntry

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "GITHUB_TOKEN"
DEFAULT_TIMEOUT = 30.0  # seconds

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_token(token: str | None = None) -> str | None:
    """
    Get GitHub token from various sources.

    Priority:
    1. Explicitly provided token
    2. Environment variable GITHUB_TOKEN

    Args:
        token: Explicitly provided token

    Returns:
        GitHub token or None
    """
    if token:
        logger.debug("Using explicitly provided token")
        return token

    env_token = os.environ.get(TOKEN_ENV_VAR)
    if env_token:
        logger.info("Using token from environment variable")
        return env_token

    return None


class GitHubClient:
    """GitHub REST API client for repository trees."""

    BASE_URL = "https://api.github.com"
    USER_AGENT = "repotree"

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            token: GitHub personal access token
            base_url: Custom base URL (defaults to GitHub API)
            timeout: Request timeout in seconds
            transport: Custom httpx transport (used by tests)
        """
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout
        self.transport = transport
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": self.USER_AGENT,
            "Authorization": f"token {token}",
        }
        logger.info("GitHub client ready, base_url=%s", self.base_url)

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        """Make a single HTTP request to the GitHub API."""
        url = f"{self.base_url}{endpoint}"
        logger.debug("Request: %s %s", method, url)
        try:
            with httpx.Client(
                timeout=self.timeout, headers=self.headers, transport=self.transport
            ) as client:
                response = client.request(method, url, **kwargs)
                logger.debug(
                    "Response: %s %s (status=%d)",
                    method,
                    endpoint,
                    response.status_code,
                )
                response.raise_for_status()
                return response
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.debug("GitHub API returned %d for %s %s", status, method, endpoint)
            raise RequestFailedError(
                f"GitHub API request failed: {method} {url} returned {status}",
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            logger.debug("GitHub API request error for %s %s: %s", method, endpoint, e)
            raise RequestFailedError(f"GitHub API request failed: {method} {url}: {e}") from e

    def _get_model(self, endpoint: str, model: type[ModelT], **kwargs: Any) -> ModelT:
        """GET an endpoint and decode the JSON body into ``model``."""
        response = self._request("GET", endpoint, **kwargs)
        # Models are strict; invalid JSON and shape mismatches both fail here
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeFailedError(
                f"Unexpected response shape from {endpoint}: {e}"
            ) from e

    def get_repository(self, owner: str, repo: str) -> Repository:
        """
        Get repository metadata.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Repository metadata
        """
        logger.info("Fetching repository: %s/%s", owner, repo)
        return self._get_model(f"/repos/{owner}/{repo}", Repository)

    def resolve_default_branch(self, owner: str, repo: str) -> str:
        """Return the repository's default branch name."""
        repository = self.get_repository(owner, repo)
        if not repository.default_branch:
            logger.debug("Repository %s/%s has no default branch", owner, repo)
            raise MissingDefaultBranchError(
                f"Default branch not found for {owner}/{repo}"
            )
        logger.debug("Default branch of %s/%s: %s", owner, repo, repository.default_branch)
        return repository.default_branch

    def get_tree(
        self, owner: str, repo: str, ref: str, recursive: bool = True
    ) -> GitTree:
        """
        Get the git tree for a ref.

        Args:
            owner: Repository owner
            repo: Repository name
            ref: Branch/tag/commit or tree SHA
            recursive: Whether to list all nested entries

        Returns:
            GitTree with entries in server order
        """
        endpoint = f"/repos/{owner}/{repo}/git/trees/{ref}"
        params = {"recursive": "1"} if recursive else {}
        logger.info("Fetching tree: %s/%s ref=%s recursive=%s", owner, repo, ref, recursive)
        tree = self._get_model(endpoint, GitTree, params=params)
        if tree.truncated:
            logger.warning(
                "Tree for %s/%s@%s was truncated by the API, listing is incomplete",
                owner, repo, ref,
            )
        logger.debug("Tree fetched: %s/%s (%d entries)", owner, repo, len(tree.tree))
        return tree

    def fetch_tree(self, owner: str, repo: str, branch: str) -> list[TreeEntry]:
        """Return every entry under ``branch``, recursively."""
        return self.get_tree(owner, repo, branch, recursive=True).tree
