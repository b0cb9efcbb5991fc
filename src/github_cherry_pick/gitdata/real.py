"""Real Git Data implementation using the gh CLI.

All calls go through `gh api`, which owns authentication (GH_TOKEN or
`gh auth login`) and host selection.
"""

import json
import logging
import subprocess
from typing import Any

from github_cherry_pick.errors import (
    GitDataError,
    MergeConflictError,
    NotFastForwardError,
    RefAlreadyExistsError,
)
from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.parsing import (
    parse_commit,
    parse_error_message,
    parse_http_status,
    parse_merge_tree,
    parse_ref_sha,
)
from github_cherry_pick.gitdata.types import CommitDetails, GitActor, RepoId

logger = logging.getLogger(__name__)


def _actor_payload(actor: GitActor) -> dict[str, str]:
    return {"name": actor.name, "email": actor.email, "date": actor.date}


class RealGitData(GitData):
    """Production implementation calling the GitHub REST API through `gh api`.

    Requires the gh CLI to be installed and authenticated.
    """

    def __init__(self, *, hostname: str | None = None, timeout: int = 30) -> None:
        """Initialize RealGitData.

        Args:
            hostname: GitHub host for Enterprise installations (None for gh's default)
            timeout: Seconds before a single API call is abandoned
        """
        self._hostname = hostname
        self._timeout = timeout

    def _api(
        self,
        method: str,
        endpoint: str,
        *,
        operation: str,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Run one `gh api` call and decode its JSON response.

        Returns:
            Decoded response body, or None when the service returned no content

        Raises:
            GitDataError: If gh is missing, times out, or the API call fails
        """
        cmd = ["gh", "api", "--method", method, endpoint]
        if self._hostname is not None:
            cmd.extend(["--hostname", self._hostname])
        if body is not None:
            cmd.extend(["--input", "-"])

        logger.debug("gh api %s %s", method, endpoint)
        try:
            result = subprocess.run(
                cmd,
                input=json.dumps(body) if body is not None else None,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
                timeout=self._timeout,
            )
        except FileNotFoundError as e:
            raise GitDataError(operation, "Command not found: gh") from e
        except subprocess.TimeoutExpired as e:
            raise GitDataError(operation, f"Timed out after {self._timeout}s") from e

        if result.returncode != 0:
            raise GitDataError(
                operation,
                parse_error_message(result.stdout, result.stderr),
                status=parse_http_status(result.stderr),
                command=" ".join(cmd),
                exit_code=result.returncode,
                stdout=result.stdout.strip(),
                stderr=result.stderr.strip(),
            )

        if not result.stdout.strip():
            return None
        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise GitDataError(operation, f"Invalid JSON response from {endpoint}") from e

    def _require(self, data: dict[str, Any] | None, operation: str) -> dict[str, Any]:
        if data is None:
            raise GitDataError(operation, "Empty response")
        return data

    def get_commit(self, repo: RepoId, sha: str) -> CommitDetails:
        """Get commit metadata via GET git/commits/{sha}."""
        data = self._api(
            "GET",
            f"repos/{repo.owner}/{repo.name}/git/commits/{sha}",
            operation="get commit",
        )
        return parse_commit(self._require(data, "get commit"))

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
        """Create an unsigned commit via POST git/commits."""
        data = self._api(
            "POST",
            f"repos/{repo.owner}/{repo.name}/git/commits",
            operation="create commit",
            body={
                "author": _actor_payload(author),
                "committer": _actor_payload(committer),
                "message": message,
                "parents": [parent],
                "tree": tree,
            },
        )
        return self._require(data, "create commit")["sha"]

    def merge(self, repo: RepoId, *, base: str, head: str) -> str:
        """Merge head into base via POST merges."""
        try:
            data = self._api(
                "POST",
                f"repos/{repo.owner}/{repo.name}/merges",
                operation="merge",
                body={"base": base, "head": head},
            )
        except GitDataError as e:
            if e.status == 409:
                raise MergeConflictError(base=base, head=head) from e
            raise
        if data is None:
            # 204: head is already contained in base
            raise GitDataError("merge", f"Nothing to merge: {head} is already in {base}")
        return parse_merge_tree(data)

    def get_ref_sha(self, repo: RepoId, ref: str) -> str:
        """Get the commit a branch points to via GET git/ref/heads/{ref}."""
        data = self._api(
            "GET",
            f"repos/{repo.owner}/{repo.name}/git/ref/heads/{ref}",
            operation="get ref",
        )
        return parse_ref_sha(self._require(data, "get ref"))

    def create_ref(self, repo: RepoId, ref: str, sha: str) -> None:
        """Create a branch via POST git/refs."""
        try:
            self._api(
                "POST",
                f"repos/{repo.owner}/{repo.name}/git/refs",
                operation="create ref",
                body={"ref": f"refs/heads/{ref}", "sha": sha},
            )
        except GitDataError as e:
            if e.status == 422 and "already exists" in str(e):
                raise RefAlreadyExistsError(ref=ref) from e
            raise

    def update_ref(self, repo: RepoId, ref: str, sha: str, *, force: bool) -> None:
        """Move a branch via PATCH git/refs/heads/{ref}."""
        try:
            self._api(
                "PATCH",
                f"repos/{repo.owner}/{repo.name}/git/refs/heads/{ref}",
                operation="update ref",
                body={"sha": sha, "force": force},
            )
        except GitDataError as e:
            if e.status == 422 and "fast forward" in str(e).lower():
                raise NotFastForwardError(ref=ref, sha=sha) from e
            raise

    def delete_ref(self, repo: RepoId, ref: str) -> None:
        """Delete a branch via DELETE git/refs/heads/{ref}."""
        self._api(
            "DELETE",
            f"repos/{repo.owner}/{repo.name}/git/refs/heads/{ref}",
            operation="delete ref",
        )
