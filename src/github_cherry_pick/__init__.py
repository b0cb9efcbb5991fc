"""Cherry-pick commits on a GitHub branch using only the Git Data API."""

from github_cherry_pick.core.publisher import cherry_pick_commits
from github_cherry_pick.errors import (
    CherryPickError,
    ConcurrentModificationError,
    GitDataError,
    MergeConflictError,
    NotFastForwardError,
    RefAlreadyExistsError,
    UnsupportedCommitError,
)
from github_cherry_pick.events import CherryPickEvent, EventSink
from github_cherry_pick.gitdata import GitData, RealGitData, RepoId

__version__ = "0.1.0"

__all__ = [
    "CherryPickError",
    "CherryPickEvent",
    "ConcurrentModificationError",
    "EventSink",
    "GitData",
    "GitDataError",
    "MergeConflictError",
    "NotFastForwardError",
    "RealGitData",
    "RefAlreadyExistsError",
    "RepoId",
    "UnsupportedCommitError",
    "cherry_pick_commits",
]
