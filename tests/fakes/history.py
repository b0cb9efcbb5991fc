"""Build FakeGitData instances from line-based commit histories.

Every history starts with one initial commit. Each named ref then gets its own
linear chain of commits on top of it, so that

    build_history(
        CommitSpec(("initial", "initial"), "initial"),
        {"master": [CommitSpec(("master 1st", "initial"), "master 1st")]},
    )

yields a fake repository with a "master" branch two commits deep.
"""

from dataclasses import dataclass

from github_cherry_pick.errors import GitDataError
from github_cherry_pick.gitdata.fake import FakeGitData, commit_sha, tree_sha
from github_cherry_pick.gitdata.types import CommitDetails, GitActor, RepoId

REPO = RepoId(owner="octocat", name="hello-world")


@dataclass(frozen=True)
class CommitSpec:
    """Content and message of one commit."""

    lines: tuple[str, ...]
    message: str


@dataclass(frozen=True)
class History:
    """A fake repository plus the commit hashes of each ref, oldest first.

    Each list starts with the initial commit.
    """

    git_data: FakeGitData
    shas: dict[str, list[str]]


def actor_for(message: str) -> GitActor:
    """Deterministic identity per commit, so metadata can be asserted."""
    slug = message.replace(" ", "-")
    return GitActor(
        name=f"Author {message}", email=f"{slug}@example.com", date="2019-05-01T12:00:00Z"
    )


def build_history(
    initial: CommitSpec,
    refs_commits: dict[str, list[CommitSpec]],
    *,
    delete_ref_error: GitDataError | None = None,
    create_commit_errors: dict[str, GitDataError] | None = None,
) -> History:
    """Create a FakeGitData holding the described history."""
    commits: dict[str, CommitDetails] = {}
    trees: dict[str, tuple[str, ...]] = {}

    def add(spec: CommitSpec, parents: tuple[str, ...]) -> str:
        tree = tree_sha(spec.lines)
        trees[tree] = spec.lines
        actor = actor_for(spec.message)
        sha = commit_sha(
            tree=tree, parents=parents, author=actor, committer=actor, message=spec.message
        )
        commits[sha] = CommitDetails(
            sha=sha,
            author=actor,
            committer=actor,
            message=spec.message,
            tree=tree,
            parents=parents,
        )
        return sha

    initial_sha = add(initial, ())
    shas: dict[str, list[str]] = {}
    refs: dict[str, str] = {}
    for ref, specs in refs_commits.items():
        chain = [initial_sha]
        for spec in specs:
            chain.append(add(spec, (chain[-1],)))
        shas[ref] = chain
        refs[ref] = chain[-1]

    return History(
        git_data=FakeGitData(
            commits=commits,
            trees=trees,
            refs=refs,
            delete_ref_error=delete_ref_error,
            create_commit_errors=create_commit_errors,
        ),
        shas=shas,
    )


def ref_log(git_data: FakeGitData, sha: str) -> list[CommitDetails]:
    """Follow first parents from sha back to the root, returning oldest first."""
    log: list[CommitDetails] = []
    current: str | None = sha
    while current is not None:
        commit = git_data.get_commit(REPO, current)
        log.append(commit)
        current = commit.parents[0] if commit.parents else None
    return list(reversed(log))
