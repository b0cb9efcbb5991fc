"""Tests for DryRunGitData."""

from github_cherry_pick.core.publisher import cherry_pick_commits
from github_cherry_pick.gitdata.dry_run import DryRunGitData
from tests.fakes.history import REPO, CommitSpec, History, actor_for, build_history


def _history() -> History:
    return build_history(
        CommitSpec(("initial", "initial"), "initial"),
        {
            "feature": [CommitSpec(("initial", "feature 1st"), "feature 1st")],
            "master": [CommitSpec(("master 1st", "initial"), "master 1st")],
        },
    )


def test_reads_are_delegated() -> None:
    history = _history()
    dry_run = DryRunGitData(history.git_data)

    assert dry_run.get_ref_sha(REPO, "master") == history.shas["master"][-1]
    assert dry_run.get_commit(REPO, history.shas["master"][-1]).message == "master 1st"


def test_writes_are_not_executed() -> None:
    history = _history()
    git_data = history.git_data
    dry_run = DryRunGitData(git_data)
    refs_before = git_data.refs
    actor = actor_for("dry")

    sha = dry_run.create_commit(
        REPO, author=actor, committer=actor, message="dry", parent="p", tree="t"
    )
    dry_run.create_ref(REPO, "other", sha)
    dry_run.update_ref(REPO, "master", sha, force=True)
    dry_run.delete_ref(REPO, "feature")

    assert len(sha) == 40
    assert git_data.refs == refs_before
    assert git_data.created_commits == []
    assert git_data.created_refs == []
    assert git_data.updated_refs == []
    assert git_data.deleted_refs == []


def test_placeholders_are_deterministic() -> None:
    dry_run = DryRunGitData(_history().git_data)

    first = dry_run.merge(REPO, base="cherry-pick-master-t", head="abc")
    second = dry_run.merge(REPO, base="cherry-pick-master-t", head="abc")
    other = dry_run.merge(REPO, base="cherry-pick-master-t", head="def")

    assert first == second
    assert first != other


def test_full_cherry_pick_leaves_repository_untouched() -> None:
    history = _history()
    git_data = history.git_data
    refs_before = git_data.refs

    cherry_pick_commits(
        DryRunGitData(git_data),
        REPO,
        commits=history.shas["feature"][1:],
        head="master",
        token="t",
    )

    assert git_data.refs == refs_before
    assert git_data.created_commits == []
    assert git_data.merges == []
