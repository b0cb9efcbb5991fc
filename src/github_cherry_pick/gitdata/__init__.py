"""Git Data (low-level object graph) integration."""

from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.dry_run import DryRunGitData
from github_cherry_pick.gitdata.fake import FakeGitData
from github_cherry_pick.gitdata.printing import PrintingGitData
from github_cherry_pick.gitdata.real import RealGitData
from github_cherry_pick.gitdata.types import CherryPickHead, CommitDetails, GitActor, RepoId

__all__ = [
    "CherryPickHead",
    "CommitDetails",
    "DryRunGitData",
    "FakeGitData",
    "GitActor",
    "GitData",
    "PrintingGitData",
    "RealGitData",
    "RepoId",
]
