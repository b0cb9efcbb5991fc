"""No-op wrapper for Git Data operations."""

import hashlib

from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.types import CommitDetails, GitActor, RepoId


def _placeholder_sha(*parts: str) -> str:
    return hashlib.sha1("\0".join(("dry-run",) + parts).encode("utf-8")).hexdigest()


class DryRunGitData(GitData):
    """No-op wrapper for Git Data operations.

    Read operations are delegated to the wrapped implementation.
    Write operations return without executing (no-op behavior). Operations
    that must return a hash return a deterministic placeholder derived from
    their arguments, so a full cherry-pick sequence can run through and
    validate every source commit without mutating the repository.
    """

    def __init__(self, wrapped: GitData) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real Git Data implementation to wrap
        """
        self._wrapped = wrapped

    def get_commit(self, repo: RepoId, sha: str) -> CommitDetails:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.get_commit(repo, sha)

    def create_commit(
        self,
        repo: RepoId,
        *,
        author: GitActor,
        committer: GitActor,
        message: str,
        parent: str,
        tree: str,
    ) -> str:
        """No-op for creating a commit in dry-run mode.

        Returns:
            A placeholder commit hash
        """
        return _placeholder_sha("commit", parent, tree, message)

    def merge(self, repo: RepoId, *, base: str, head: str) -> str:
        """No-op for merging in dry-run mode.

        Returns:
            A placeholder tree hash
        """
        return _placeholder_sha("tree", base, head)

    def get_ref_sha(self, repo: RepoId, ref: str) -> str:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.get_ref_sha(repo, ref)

    def create_ref(self, repo: RepoId, ref: str, sha: str) -> None:
        """No-op for creating a ref in dry-run mode."""
        pass

    def update_ref(self, repo: RepoId, ref: str, sha: str, *, force: bool) -> None:
        """No-op for updating a ref in dry-run mode."""
        pass

    def delete_ref(self, repo: RepoId, ref: str) -> None:
        """No-op for deleting a ref in dry-run mode."""
        pass
