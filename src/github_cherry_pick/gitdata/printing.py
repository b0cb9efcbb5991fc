"""Printing wrapper for Git Data operations."""

from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.types import CommitDetails, GitActor, RepoId
from github_cherry_pick.printing_base import PrintingBase


class PrintingGitData(PrintingBase[GitData], GitData):
    """Wrapper that prints operations before delegating to inner implementation.

    This wrapper prints styled output for operations, then delegates to the
    wrapped implementation (which could be Real or DryRun).

    Usage:
        # For production
        printing_ops = PrintingGitData(real_ops, dry_run=False)

        # For dry-run
        noop_inner = DryRunGitData(real_ops)
        printing_ops = PrintingGitData(noop_inner, dry_run=True)
    """

    # Read-only operations: delegate without printing

    def get_commit(self, repo: RepoId, sha: str) -> CommitDetails:
        """Get commit (read-only, no printing)."""
        return self._wrapped.get_commit(repo, sha)

    def get_ref_sha(self, repo: RepoId, ref: str) -> str:
        """Get ref (read-only, no printing)."""
        return self._wrapped.get_ref_sha(repo, ref)

    # Operations that need printing

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
        """Create commit with printed output."""
        self._emit(
            self._format_command(
                f"gh api -X POST repos/{repo}/git/commits -f tree={tree} -f parents[]={parent}"
            )
        )
        return self._wrapped.create_commit(
            repo, author=author, committer=committer, message=message, parent=parent, tree=tree
        )

    def merge(self, repo: RepoId, *, base: str, head: str) -> str:
        """Merge with printed output."""
        self._emit(
            self._format_command(
                f"gh api -X POST repos/{repo}/merges -f base={base} -f head={head}"
            )
        )
        return self._wrapped.merge(repo, base=base, head=head)

    def create_ref(self, repo: RepoId, ref: str, sha: str) -> None:
        """Create ref with printed output."""
        self._emit(
            self._format_command(
                f"gh api -X POST repos/{repo}/git/refs -f ref=refs/heads/{ref} -f sha={sha}"
            )
        )
        self._wrapped.create_ref(repo, ref, sha)

    def update_ref(self, repo: RepoId, ref: str, sha: str, *, force: bool) -> None:
        """Update ref with printed output."""
        force_flag = "true" if force else "false"
        self._emit(
            self._format_command(
                f"gh api -X PATCH repos/{repo}/git/refs/heads/{ref}"
                f" -f sha={sha} -F force={force_flag}"
            )
        )
        self._wrapped.update_ref(repo, ref, sha, force=force)

    def delete_ref(self, repo: RepoId, ref: str) -> None:
        """Delete ref with printed output."""
        self._emit(self._format_command(f"gh api -X DELETE repos/{repo}/git/refs/heads/{ref}"))
        self._wrapped.delete_ref(repo, ref)
