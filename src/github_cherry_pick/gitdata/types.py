"""Type definitions for Git Data operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepoId:
    """Repository coordinates on the hosting service."""

    owner: str
    name: str

    @staticmethod
    def parse(value: str) -> "RepoId":
        """Parse an ``owner/name`` string.

        Raises:
            ValueError: If value is not exactly two non-empty slash-separated segments
        """
        parts = value.split("/")
        if len(parts) != 2 or not all(parts):
            msg = f"Invalid repository '{value}': expected OWNER/REPO"
            raise ValueError(msg)
        return RepoId(owner=parts[0], name=parts[1])

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class GitActor:
    """Author or committer identity, passed back unchanged on commit creation."""

    name: str
    email: str
    date: str  # ISO 8601, as reported by the service


@dataclass(frozen=True)
class CommitDetails:
    """Metadata of a commit as returned by the Git Data API."""

    sha: str
    author: GitActor
    committer: GitActor
    message: str
    tree: str
    parents: tuple[str, ...]


@dataclass(frozen=True)
class CherryPickHead:
    """Current tip of the sandbox ref, threaded through the sequencer."""

    sha: str
    tree: str
