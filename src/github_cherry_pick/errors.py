"""Exceptions raised by cherry-pick operations.

Every failure aborts the whole operation. The hierarchy lets callers tell
apart the cases they may want to react to differently:

- UnsupportedCommitError: a source commit is a merge (or a root) commit
- MergeConflictError: the remote merge could not combine the changes
- ConcurrentModificationError: the target ref moved while commits were being
  synthesized; re-fetching and retrying the whole operation is safe
- GitDataError: any other remote or transport failure
"""


class CherryPickError(Exception):
    """Base class for all cherry-pick failures."""


class UnsupportedCommitError(CherryPickError):
    """Raised when a source commit does not have exactly one parent."""

    def __init__(self, commit: str, parent_count: int) -> None:
        self.commit = commit
        self.parent_count = parent_count
        super().__init__(
            f"Commit {commit} has {parent_count} parents."
            " github-cherry-pick is designed for the rebase workflow"
            " and doesn't support merge commits."
        )


class GitDataError(CherryPickError):
    """Raised when a Git Data operation fails on the remote side.

    Attributes:
        operation: Step that failed (e.g. "merge", "update ref")
        status: HTTP status reported by the service, or None for transport failures
        command: Command line that failed, when the failure came from a subprocess
        exit_code: Exit code of that command
        stdout: Stripped standard output of that command
        stderr: Stripped standard error of that command
    """

    def __init__(
        self,
        operation: str,
        message: str,
        *,
        status: int | None = None,
        command: str | None = None,
        exit_code: int | None = None,
        stdout: str | None = None,
        stderr: str | None = None,
    ) -> None:
        self.operation = operation
        self.status = status
        self.command = command
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        detail = f"Failed to {operation}: {message}"
        if status is not None:
            detail += f" (HTTP {status})"
        if command is not None:
            detail += f"\nCommand: {command}"
        if exit_code is not None:
            detail += f"\nExit code: {exit_code}"
        if stdout:
            detail += f"\nstdout: {stdout}"
        if stderr:
            detail += f"\nstderr: {stderr}"
        super().__init__(detail)


class MergeConflictError(GitDataError):
    """Raised when the remote merge of a commit into a ref conflicts."""

    def __init__(self, *, base: str, head: str) -> None:
        self.base = base
        self.head = head
        super().__init__("merge", f"Merge conflict merging {head} into {base}", status=409)


class NotFastForwardError(GitDataError):
    """Raised when a non-forced ref update is not a fast forward."""

    def __init__(self, *, ref: str, sha: str) -> None:
        self.ref = ref
        self.sha = sha
        super().__init__(
            "update ref",
            f"Update is not a fast forward: {ref} cannot move to {sha}",
            status=422,
        )


class RefAlreadyExistsError(GitDataError):
    """Raised when creating a ref whose name is already taken."""

    def __init__(self, *, ref: str) -> None:
        self.ref = ref
        super().__init__("create ref", f"Reference already exists: {ref}", status=422)


class ConcurrentModificationError(CherryPickError):
    """Raised when the target ref moved between the initial snapshot and publishing."""

    def __init__(self, *, ref: str, expected_sha: str, new_sha: str) -> None:
        self.ref = ref
        self.expected_sha = expected_sha
        self.new_sha = new_sha
        super().__init__(
            f"Update is not a fast forward: {ref} moved away from {expected_sha}"
            f" while cherry-picking; {new_sha} was not published"
        )
