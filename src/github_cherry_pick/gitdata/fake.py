"""Fake Git Data operations for testing.

FakeGitData is an in-memory object graph that accepts pre-configured state in
its constructor. Trees are modelled as tuples of lines of a single file, which
is enough to exercise merges, conflicts and ancestry the way the hosting
service does.
"""

import hashlib
from collections import deque

from github_cherry_pick.errors import (
    GitDataError,
    MergeConflictError,
    NotFastForwardError,
    RefAlreadyExistsError,
)
from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.types import CommitDetails, GitActor, RepoId

MERGE_ACTOR = GitActor(name="GitHub", email="noreply@github.com", date="2019-01-01T00:00:00Z")


def tree_sha(lines: tuple[str, ...]) -> str:
    """Content-address a tree."""
    return hashlib.sha1("\n".join(("tree",) + lines).encode("utf-8")).hexdigest()


def commit_sha(
    *,
    tree: str,
    parents: tuple[str, ...],
    author: GitActor,
    committer: GitActor,
    message: str,
) -> str:
    """Content-address a commit from everything that identifies it."""
    content = "\n".join(
        [
            f"tree {tree}",
            *(f"parent {parent}" for parent in parents),
            f"author {author.name} <{author.email}> {author.date}",
            f"committer {committer.name} <{committer.email}> {committer.date}",
            "",
            message,
        ]
    )
    return hashlib.sha1(content.encode("utf-8")).hexdigest()


def merge_lines(
    base: tuple[str, ...], ours: tuple[str, ...], theirs: tuple[str, ...]
) -> tuple[str, ...] | None:
    """Three-way merge of line tuples. Returns None on conflict."""
    if ours == theirs or theirs == base:
        return ours
    if ours == base:
        return theirs
    if not len(base) == len(ours) == len(theirs):
        return None

    merged: list[str] = []
    for base_line, our_line, their_line in zip(base, ours, theirs, strict=True):
        if our_line == their_line or their_line == base_line:
            merged.append(our_line)
        elif our_line == base_line:
            merged.append(their_line)
        else:
            return None
    return tuple(merged)


class FakeGitData(GitData):
    """In-memory fake implementation of Git Data operations.

    This class has NO public setup methods. All state is provided via
    constructor using keyword arguments with sensible defaults (empty dicts).
    The repository coordinates are accepted and ignored: one fake is one
    repository.
    """

    def __init__(
        self,
        *,
        commits: dict[str, CommitDetails] | None = None,
        trees: dict[str, tuple[str, ...]] | None = None,
        refs: dict[str, str] | None = None,
        delete_ref_error: GitDataError | None = None,
        create_commit_errors: dict[str, GitDataError] | None = None,
    ) -> None:
        """Create FakeGitData with pre-configured state.

        Args:
            commits: Mapping of commit hash -> CommitDetails
            trees: Mapping of tree hash -> file lines
            refs: Mapping of branch name -> commit hash
            delete_ref_error: Error raised by every delete_ref() call (None to succeed)
            create_commit_errors: Mapping of commit message -> error raised by
                create_commit() for a commit with that message
        """
        self._commits = dict(commits or {})
        self._trees = dict(trees or {})
        self._refs = dict(refs or {})
        self._delete_ref_error = delete_ref_error
        self._create_commit_errors = dict(create_commit_errors or {})
        self._created_commits: list[str] = []
        self._created_refs: list[tuple[str, str]] = []
        self._updated_refs: list[tuple[str, str, bool]] = []
        self._deleted_refs: list[str] = []
        self._merges: list[tuple[str, str]] = []

    @property
    def refs(self) -> dict[str, str]:
        """Current branch name -> commit hash mapping, for test assertions."""
        return dict(self._refs)

    @property
    def created_commits(self) -> list[str]:
        """Hashes of commits created through create_commit() or merge()."""
        return self._created_commits

    @property
    def created_refs(self) -> list[tuple[str, str]]:
        """List of (ref, sha) tuples passed to create_ref()."""
        return self._created_refs

    @property
    def updated_refs(self) -> list[tuple[str, str, bool]]:
        """List of (ref, sha, force) tuples for successful update_ref() calls."""
        return self._updated_refs

    @property
    def deleted_refs(self) -> list[str]:
        """Names passed to delete_ref(), including failed attempts."""
        return self._deleted_refs

    @property
    def merges(self) -> list[tuple[str, str]]:
        """List of (base, head) tuples passed to merge()."""
        return self._merges

    def tree_lines(self, tree: str) -> tuple[str, ...]:
        """Read a tree's lines, for test assertions."""
        return self._trees[tree]

    def get_commit(self, repo: RepoId, sha: str) -> CommitDetails:
        """Get a commit from the in-memory graph."""
        commit = self._commits.get(sha)
        if commit is None:
            raise GitDataError("get commit", f"No commit found for SHA: {sha}", status=404)
        return commit

    def _store_commit(
        self,
        *,
        author: GitActor,
        committer: GitActor,
        message: str,
        parents: tuple[str, ...],
        tree: str,
    ) -> str:
        for parent in parents:
            if parent not in self._commits:
                raise GitDataError("create commit", f"Parent {parent} does not exist", status=422)
        if tree not in self._trees:
            raise GitDataError("create commit", f"Tree {tree} does not exist", status=422)
        sha = commit_sha(
            tree=tree, parents=parents, author=author, committer=committer, message=message
        )
        self._commits[sha] = CommitDetails(
            sha=sha,
            author=author,
            committer=committer,
            message=message,
            tree=tree,
            parents=parents,
        )
        self._created_commits.append(sha)
        return sha

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
        """Add a single-parent commit to the graph."""
        error = self._create_commit_errors.get(message)
        if error is not None:
            raise error
        return self._store_commit(
            author=author, committer=committer, message=message, parents=(parent,), tree=tree
        )

    def _ancestors(self, sha: str) -> list[str]:
        """Breadth-first ancestry of sha, starting with sha itself."""
        seen: set[str] = set()
        ordered: list[str] = []
        queue = deque([sha])
        while queue:
            current = queue.popleft()
            if current in seen:
                continue
            seen.add(current)
            ordered.append(current)
            queue.extend(self._commits[current].parents)
        return ordered

    def _is_ancestor(self, ancestor: str, descendant: str) -> bool:
        return ancestor in self._ancestors(descendant)

    def merge(self, repo: RepoId, *, base: str, head: str) -> str:
        """Merge head into the base ref with a line-wise three-way merge."""
        self._merges.append((base, head))
        base_sha = self.get_ref_sha(repo, base)
        if head not in self._commits:
            raise GitDataError("merge", f"No commit found for SHA: {head}", status=404)
        if self._is_ancestor(head, base_sha):
            raise GitDataError("merge", f"Nothing to merge: {head} is already in {base}")

        base_ancestors = set(self._ancestors(base_sha))
        merge_base = next((sha for sha in self._ancestors(head) if sha in base_ancestors), None)
        if merge_base is None:
            raise GitDataError(
                "merge", f"No common ancestor between {head} and {base}", status=422
            )
        merged = merge_lines(
            self._trees[self._commits[merge_base].tree],
            self._trees[self._commits[base_sha].tree],
            self._trees[self._commits[head].tree],
        )
        if merged is None:
            raise MergeConflictError(base=base, head=head)

        tree = tree_sha(merged)
        self._trees[tree] = merged
        merge_sha = self._store_commit(
            author=MERGE_ACTOR,
            committer=MERGE_ACTOR,
            message=f"Merge {head} into {base}",
            parents=(base_sha, head),
            tree=tree,
        )
        self._refs[base] = merge_sha
        return tree

    def get_ref_sha(self, repo: RepoId, ref: str) -> str:
        """Get the commit a branch points to."""
        sha = self._refs.get(ref)
        if sha is None:
            raise GitDataError("get ref", f"Not Found: {ref}", status=404)
        return sha

    def create_ref(self, repo: RepoId, ref: str, sha: str) -> None:
        """Create a branch, refusing to overwrite an existing one."""
        if ref in self._refs:
            raise RefAlreadyExistsError(ref=ref)
        if sha not in self._commits:
            raise GitDataError("create ref", f"Object does not exist: {sha}", status=422)
        self._refs[ref] = sha
        self._created_refs.append((ref, sha))

    def update_ref(self, repo: RepoId, ref: str, sha: str, *, force: bool) -> None:
        """Move a branch, enforcing ancestry unless forced."""
        current = self._refs.get(ref)
        if current is None:
            raise GitDataError("update ref", f"Reference does not exist: {ref}", status=422)
        if sha not in self._commits:
            raise GitDataError("update ref", f"Object does not exist: {sha}", status=422)
        if not force and not self._is_ancestor(current, sha):
            raise NotFastForwardError(ref=ref, sha=sha)
        self._refs[ref] = sha
        self._updated_refs.append((ref, sha, force))

    def delete_ref(self, repo: RepoId, ref: str) -> None:
        """Delete a branch (or raise the configured delete_ref_error)."""
        self._deleted_refs.append(ref)
        if self._delete_ref_error is not None:
            raise self._delete_ref_error
        if ref not in self._refs:
            raise GitDataError("delete ref", f"Reference does not exist: {ref}", status=422)
        del self._refs[ref]
