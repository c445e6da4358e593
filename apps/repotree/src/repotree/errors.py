"""repotree CLI errors."""


class RepoTreeError(Exception):
    """Base error for the repotree application."""


class MalformedIdentifierError(RepoTreeError):
    pass


class MissingCredentialError(RepoTreeError):
    pass


class OutputWriteFailedError(RepoTreeError):
    pass
