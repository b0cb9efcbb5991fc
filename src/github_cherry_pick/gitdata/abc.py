"""Abstract base class for Git Data operations."""

from abc import ABC, abstractmethod

from github_cherry_pick.gitdata.types import CommitDetails, GitActor, RepoId


class GitData(ABC):
    """Abstract interface for the hosting service's low-level object graph.

    All implementations (real, fake, dry-run, printing) must implement this
    interface. Ref names are branch names relative to refs/heads/.
    """

    @abstractmethod
    def get_commit(self, repo: RepoId, sha: str) -> CommitDetails:
        """Get a commit's metadata.

        Args:
            repo: Repository coordinates
            sha: Commit hash

        Returns:
            CommitDetails with author, committer, message, tree and parents

        Raises:
            GitDataError: If the commit cannot be fetched
        """
        ...

    @abstractmethod
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
        """Create a single-parent commit. No ref is moved.

        Returns:
            Hash of the new commit
        """
        ...

    @abstractmethod
    def merge(self, repo: RepoId, *, base: str, head: str) -> str:
        """Merge a commit into a ref, advancing the ref to the merge commit.

        Args:
            repo: Repository coordinates
            base: Name of the ref receiving the merge
            head: Hash of the commit to merge

        Returns:
            Tree hash of the resulting merge commit

        Raises:
            MergeConflictError: If the changes cannot be combined
        """
        ...

    @abstractmethod
    def get_ref_sha(self, repo: RepoId, ref: str) -> str:
        """Get the commit hash a ref points to."""
        ...

    @abstractmethod
    def create_ref(self, repo: RepoId, ref: str, sha: str) -> None:
        """Create a ref pointing at sha.

        Raises:
            RefAlreadyExistsError: If a ref with this name already exists
        """
        ...

    @abstractmethod
    def update_ref(self, repo: RepoId, ref: str, sha: str, *, force: bool) -> None:
        """Move a ref to sha.

        Args:
            repo: Repository coordinates
            ref: Name of the ref to move
            sha: New commit hash
            force: If False, the update must be a fast forward

        Raises:
            NotFastForwardError: If force is False and sha does not descend
                from the ref's current value
        """
        ...

    @abstractmethod
    def delete_ref(self, repo: RepoId, ref: str) -> None:
        """Delete a ref."""
        ...
