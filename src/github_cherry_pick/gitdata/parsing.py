"""Parsing helpers for `gh api` output.

Pure functions with no subprocess calls, so they can be tested against
JSON fixtures.
"""

import json
import re
from typing import Any

from github_cherry_pick.gitdata.types import CommitDetails, GitActor

_HTTP_STATUS_RE = re.compile(r"\(HTTP (\d{3})\)")


def parse_actor(data: dict[str, Any]) -> GitActor:
    """Parse an author/committer object."""
    return GitActor(name=data["name"], email=data["email"], date=data["date"])


def parse_commit(data: dict[str, Any]) -> CommitDetails:
    """Parse the payload of GET /repos/{owner}/{repo}/git/commits/{sha}."""
    return CommitDetails(
        sha=data["sha"],
        author=parse_actor(data["author"]),
        committer=parse_actor(data["committer"]),
        message=data["message"],
        tree=data["tree"]["sha"],
        parents=tuple(parent["sha"] for parent in data["parents"]),
    )


def parse_merge_tree(data: dict[str, Any]) -> str:
    """Extract the tree hash from the payload of POST /repos/{owner}/{repo}/merges."""
    return data["commit"]["tree"]["sha"]


def parse_ref_sha(data: dict[str, Any]) -> str:
    """Extract the commit hash from a git ref payload."""
    return data["object"]["sha"]


def parse_http_status(stderr: str) -> int | None:
    """Extract the HTTP status from gh's error line (e.g. "gh: Not Found (HTTP 404)")."""
    match = _HTTP_STATUS_RE.search(stderr)
    if match is None:
        return None
    return int(match.group(1))


def parse_error_message(stdout: str, stderr: str) -> str:
    """Get the most useful error message from a failed `gh api` call.

    gh prints the JSON error body on stdout; its "message" field is preferred.
    Falls back to the stripped stderr line.
    """
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    message = stderr.strip()
    if message.startswith("gh: "):
        message = message[len("gh: ") :]
    return _HTTP_STATUS_RE.sub("", message).strip() or "unknown error"
