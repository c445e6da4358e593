"""repotree data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepoIdentifier:
    """Repository owner and name."""

    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"
