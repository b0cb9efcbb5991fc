"""Synthesize one cherry-picked commit on the sandbox ref.

The hosting service has no cherry-pick primitive, only merges. Merging a
commit directly onto the sandbox would also bring in every ancestor the
sandbox lacks. Instead:

1. point the sandbox at a "sibling" commit: the sandbox's current tree with
   the source commit's parent as its parent, so the merge base of the
   sandbox and the source commit is that parent;
2. merge the source commit into the sandbox; the merge tree is the current
   tree plus exactly the source commit's changes;
3. commit that tree on top of the previous sandbox head with the source
   commit's metadata, and force the sandbox onto it. The sibling and the
   merge commit become unreachable.
"""

import logging

from github_cherry_pick.errors import UnsupportedCommitError
from github_cherry_pick.events import EventSink, emit
from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.types import CherryPickHead, CommitDetails, RepoId

logger = logging.getLogger(__name__)


def retrieve_commit_details(git_data: GitData, repo: RepoId, commit: str) -> CommitDetails:
    """Fetch a source commit, rejecting anything without exactly one parent.

    Raises:
        UnsupportedCommitError: If the commit is a merge commit or a root commit
    """
    details = git_data.get_commit(repo, commit)
    if len(details.parents) != 1:
        raise UnsupportedCommitError(commit, len(details.parents))
    return details


def create_sibling_commit(
    git_data: GitData,
    repo: RepoId,
    *,
    source: CommitDetails,
    ref: str,
    tree: str,
) -> str:
    """Create the sibling of source carrying tree and force ref onto it."""
    sha = git_data.create_commit(
        repo,
        author=source.author,
        committer=source.committer,
        message=f"Sibling of {source.sha}",
        parent=source.parents[0],
        tree=tree,
    )
    git_data.update_ref(repo, ref, sha, force=True)
    return sha


def cherry_pick_commit(
    git_data: GitData,
    repo: RepoId,
    *,
    commit: str,
    head: CherryPickHead,
    ref: str,
    on_event: EventSink | None = None,
) -> CherryPickHead:
    """Apply commit's changes on top of head, on the sandbox ref.

    Args:
        git_data: Git Data implementation
        repo: Repository coordinates
        commit: Hash of the source commit
        head: Current tip of the sandbox ref
        ref: Name of the sandbox ref
        on_event: Optional event sink

    Returns:
        The new tip of the sandbox ref

    Raises:
        UnsupportedCommitError: If commit does not have exactly one parent
        MergeConflictError: If commit's changes conflict with head
        GitDataError: If any remote call fails
    """
    source = retrieve_commit_details(git_data, repo, commit)

    logger.debug("Creating sibling commit of %s", commit)
    sibling = create_sibling_commit(git_data, repo, source=source, ref=ref, tree=head.tree)
    emit(on_event, "commit.sibling_created", commit=commit, sibling=sibling)

    logger.debug("Merging %s into %s", commit, ref)
    tree = git_data.merge(repo, base=ref, head=commit)
    emit(on_event, "commit.merged", commit=commit, tree=tree)

    logger.debug("Creating commit with tree %s", tree)
    sha = git_data.create_commit(
        repo,
        author=source.author,
        committer=source.committer,
        message=source.message,
        parent=head.sha,
        tree=tree,
    )

    logger.debug("Updating %s to %s", ref, sha)
    # Replaces both the merge commit and its sibling parent with a single
    # commit, as a fast-forward cherry-pick would have produced.
    git_data.update_ref(repo, ref, sha, force=True)
    emit(on_event, "commit.created", commit=commit, sha=sha)

    return CherryPickHead(sha=sha, tree=tree)
