"""Cherry-pick several commits onto a branch, atomically.

Entry point of the core. The target branch is read once at the start and
written once at the end, with a fast-forward-only update: either every
commit lands or the branch is left exactly as it was.
"""

import logging
import secrets
from collections.abc import Callable, Sequence

from github_cherry_pick.core.sandbox import temporary_ref, temporary_ref_name
from github_cherry_pick.core.sequencer import cherry_pick_commits_on_ref
from github_cherry_pick.errors import ConcurrentModificationError, NotFastForwardError
from github_cherry_pick.events import EventSink, emit
from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.types import RepoId

logger = logging.getLogger(__name__)


def cherry_pick_commits(
    git_data: GitData,
    repo: RepoId,
    *,
    commits: Sequence[str],
    head: str,
    intercept: Callable[[str], None] | None = None,
    on_event: EventSink | None = None,
    token: str | None = None,
) -> str:
    """Cherry-pick commits, in order, onto the head branch.

    Commits are synthesized on a temporary ref created from head's current
    tip, then head is fast-forwarded to the result. Each new commit keeps the
    author, committer and message of its source commit and has a single
    parent.

    A commit's change is computed against its parent on its own branch, as
    `git cherry-pick` does: cherry-picking C without its parent B applies
    only what C changed relative to B.

    Args:
        git_data: Git Data implementation
        repo: Repository coordinates
        commits: Hashes of the commits to cherry-pick, oldest first
        head: Name of the branch to cherry-pick onto
        intercept: Called with head's initial sha before any other work.
            Only meant for tests that need to simulate a concurrent push.
        on_event: Optional sink receiving progress events
        token: Suffix making the temporary ref name unique (random by default)

    Returns:
        The new sha of head

    Raises:
        UnsupportedCommitError: If a commit does not have exactly one parent
        MergeConflictError: If a commit cannot be applied
        ConcurrentModificationError: If head moved while commits were applied
        RefAlreadyExistsError: If the temporary ref name is already taken
        GitDataError: If any other remote call fails
    """
    logger.debug("Starting: commits=%s, head=%s, repo=%s", list(commits), head, repo)
    emit(on_event, "started", head=head, repo=str(repo), commits=",".join(commits))

    initial_head_sha = git_data.get_ref_sha(repo, head)
    emit(on_event, "initial_head", head=head, sha=initial_head_sha)
    if intercept is not None:
        intercept(initial_head_sha)

    name = temporary_ref_name(head, token if token is not None else secrets.token_hex(4))
    with temporary_ref(
        git_data, repo, name=name, sha=initial_head_sha, on_event=on_event
    ) as sandbox_ref:
        logger.debug("Temporary ref: %s", sandbox_ref)
        new_sha = cherry_pick_commits_on_ref(
            git_data,
            repo,
            commits=commits,
            initial_head_sha=initial_head_sha,
            ref=sandbox_ref,
            on_event=on_event,
        )

    logger.debug("Updating %s with new SHA %s", head, new_sha)
    try:
        # Make sure it's a fast-forward update.
        git_data.update_ref(repo, head, new_sha, force=False)
    except NotFastForwardError as e:
        raise ConcurrentModificationError(
            ref=head, expected_sha=initial_head_sha, new_sha=new_sha
        ) from e
    logger.debug("Ref updated")
    emit(on_event, "published", head=head, sha=new_sha)
    return new_sha
