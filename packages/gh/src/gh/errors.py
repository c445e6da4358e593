"""GitHub API client errors."""


class GitHubError(Exception):
    """Base error for the GitHub client."""


class RequestFailedError(GitHubError):
    """Transport failure or non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeFailedError(GitHubError):
    """Response body does not match the expected schema."""


class MissingDefaultBranchError(GitHubError):
    pass
