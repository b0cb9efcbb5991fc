"""Tests for gh api payload parsing."""

import json

from github_cherry_pick.gitdata.parsing import (
    parse_commit,
    parse_error_message,
    parse_http_status,
    parse_merge_tree,
    parse_ref_sha,
)
from github_cherry_pick.gitdata.types import GitActor
from tests.conftest import load_fixture


def test_parse_commit() -> None:
    data = json.loads(load_fixture("gitdata/commit.json"))

    commit = parse_commit(data)

    assert commit.sha == "7638417db6d59f3c431d3e1f261cc637155684cd"
    assert commit.author == GitActor(
        name="Monalisa Octocat", email="octocat@github.com", date="2014-11-07T22:01:45Z"
    )
    assert commit.committer == commit.author
    assert commit.message == "added readme, because im a good github citizen"
    assert commit.tree == "691272480426f78a0138979dd3ce63b77f706feb"
    assert commit.parents == ("1acc419d4d6a9ce985db7be48c6349a0475975b5",)


def test_parse_commit_keeps_every_parent() -> None:
    """Merge commits are parsed as-is; rejecting them is the caller's job."""
    data = json.loads(load_fixture("gitdata/merge_commit.json"))

    commit = parse_commit(data)

    assert commit.parents == (
        "7638417db6d59f3c431d3e1f261cc637155684cd",
        "762941318ee16e59dabbacb1b4049eec22f0d303",
    )
    assert commit.committer.name == "GitHub"


def test_parse_merge_tree() -> None:
    data = json.loads(load_fixture("gitdata/merge.json"))

    assert parse_merge_tree(data) == "b4eecafa9be2f2006ce1b709d6857b07069b4608"


def test_parse_ref_sha() -> None:
    data = json.loads(load_fixture("gitdata/ref.json"))

    assert parse_ref_sha(data) == "aa218f56b14c9653891f9e74264a383fa43fefbd"


def test_parse_http_status() -> None:
    assert parse_http_status("gh: Not Found (HTTP 404)\n") == 404
    assert parse_http_status("gh: Merge conflict (HTTP 409)") == 409
    assert parse_http_status("error connecting to api.github.com") is None
    assert parse_http_status("") is None


def test_parse_error_message_prefers_json_body() -> None:
    stdout = load_fixture("gitdata/error_not_fast_forward.json")

    message = parse_error_message(stdout, "gh: Update is not a fast forward (HTTP 422)\n")

    assert message == "Update is not a fast forward"


def test_parse_error_message_falls_back_to_stderr() -> None:
    message = parse_error_message("", "gh: Bad credentials (HTTP 401)\n")

    assert message == "Bad credentials"


def test_parse_error_message_ignores_non_object_json() -> None:
    message = parse_error_message("[]", "gh: Server Error (HTTP 502)")

    assert message == "Server Error"


def test_parse_error_message_without_any_output() -> None:
    assert parse_error_message("", "") == "unknown error"
