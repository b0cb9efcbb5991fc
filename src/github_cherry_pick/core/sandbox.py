"""Temporary ref used as scratch space while synthesizing commits."""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from github_cherry_pick.errors import GitDataError
from github_cherry_pick.events import EventSink, emit
from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.types import RepoId

logger = logging.getLogger(__name__)

TEMPORARY_REF_PREFIX = "cherry-pick-"


def temporary_ref_name(ref: str, token: str) -> str:
    """Name of the sandbox ref for a cherry-pick onto ref."""
    return f"{TEMPORARY_REF_PREFIX}{ref}-{token}"


@contextmanager
def temporary_ref(
    git_data: GitData,
    repo: RepoId,
    *,
    name: str,
    sha: str,
    on_event: EventSink | None = None,
) -> Generator[str]:
    """Create a ref at sha for the duration of the with block.

    The ref is deleted on every exit path. Whatever the block returns or
    raises reaches the caller unchanged: a failed deletion is logged and
    reported as a "sandbox.cleanup_failed" event, leaving an orphaned ref
    behind, but never replaces the block's outcome. When the block raises,
    an event sink that also raises during cleanup is logged and the block's
    error propagates.

    Args:
        git_data: Git Data implementation
        repo: Repository coordinates
        name: Name of the ref to create
        sha: Commit the ref initially points to
        on_event: Optional event sink

    Yields:
        The ref name

    Raises:
        RefAlreadyExistsError: If a ref with this name already exists

    Example:
        with temporary_ref(git_data, repo, name="cherry-pick-main-1a2b", sha=sha) as ref:
            git_data.merge(repo, base=ref, head=commit)
    """
    git_data.create_ref(repo, name, sha)
    logger.debug("Created temporary ref %s at %s", name, sha)
    try:
        emit(on_event, "sandbox.created", ref=name, sha=sha)
        yield name
    except BaseException:
        try:
            _delete_temporary_ref(git_data, repo, name, on_event)
        except Exception:
            logger.warning(
                "Event sink failed while deleting temporary ref %s", name, exc_info=True
            )
        raise
    _delete_temporary_ref(git_data, repo, name, on_event)


def _delete_temporary_ref(
    git_data: GitData, repo: RepoId, name: str, on_event: EventSink | None
) -> None:
    try:
        git_data.delete_ref(repo, name)
    except GitDataError as e:
        logger.warning("Failed to delete temporary ref %s: %s", name, e)
        emit(on_event, "sandbox.cleanup_failed", ref=name, error=str(e))
    else:
        logger.debug("Deleted temporary ref %s", name)
        emit(on_event, "sandbox.deleted", ref=name)
