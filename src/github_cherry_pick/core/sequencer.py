"""Apply a list of commits, in order, on the sandbox ref."""

import logging
from collections.abc import Sequence

from github_cherry_pick.core.synthesizer import cherry_pick_commit
from github_cherry_pick.errors import GitDataError
from github_cherry_pick.events import EventSink, emit
from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.types import CherryPickHead, RepoId

logger = logging.getLogger(__name__)


def cherry_pick_commits_on_ref(
    git_data: GitData,
    repo: RepoId,
    *,
    commits: Sequence[str],
    initial_head_sha: str,
    ref: str,
    on_event: EventSink | None = None,
) -> str:
    """Cherry-pick commits one after another onto ref.

    Each commit is synthesized on top of the previous one's result. The first
    failure stops the sequence: later commits are never attempted and ref is
    left wherever the last successful step put it. A GitDataError gets a note
    naming the commit being cherry-picked.

    Returns:
        Hash of the last synthesized commit (initial_head_sha if commits is empty)
    """
    initial = git_data.get_commit(repo, initial_head_sha)
    head = CherryPickHead(sha=initial_head_sha, tree=initial.tree)

    for index, commit in enumerate(commits, start=1):
        logger.debug("Cherry-picking %s onto %s (%s)", commit, ref, head.sha)
        emit(
            on_event,
            "commit.started",
            commit=commit,
            position=f"{index}/{len(commits)}",
            onto=head.sha,
        )
        try:
            head = cherry_pick_commit(
                git_data, repo, commit=commit, head=head, ref=ref, on_event=on_event
            )
        except GitDataError as e:
            e.add_note(f"while cherry-picking {commit} ({index}/{len(commits)}) onto {ref}")
            raise

    return head.sha
