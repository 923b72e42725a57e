from unittest.mock import MagicMock

import pytest
from github import GithubException
from github.GithubObject import NotSet

from src.utils.github.client import GitHubApiError, GitHubClient
from src.utils.github.util import (
    create_github_client,
    encode_file_content,
    format_json,
    get_github_token,
)


@pytest.fixture
def github():
    """Mocked PyGithub entry point"""
    return MagicMock()


@pytest.fixture
def repo(github):
    return github.get_repo.return_value


def test_list_repos_passes_pagination(github):
    github.requester.requestJsonAndCheck.return_value = ({}, [{"name": "a"}])

    data = GitHubClient(github).list_repos_for_authenticated_user(per_page=30, page=2)

    assert data == [{"name": "a"}]
    github.requester.requestJsonAndCheck.assert_called_once_with(
        "GET", "/user/repos", parameters={"per_page": 30, "page": 2}
    )


def test_create_repo_omits_missing_description(github):
    created = github.get_user.return_value.create_repo.return_value
    created.raw_data = {"name": "demo"}

    data = GitHubClient(github).create_repo_for_authenticated_user("demo")

    assert data == {"name": "demo"}
    github.get_user.return_value.create_repo.assert_called_once_with(
        "demo", description=NotSet, private=False, auto_init=True
    )


def test_get_ref_uses_lazy_repository(github, repo):
    repo.get_git_ref.return_value.raw_data = {"object": {"sha": "abc"}}

    data = GitHubClient(github).get_ref("octocat", "hello-world", "heads/main")

    assert data == {"object": {"sha": "abc"}}
    github.get_repo.assert_called_once_with("octocat/hello-world", lazy=True)
    repo.get_git_ref.assert_called_once_with("heads/main")


def test_get_ref_partial_match_is_not_found(github, repo):
    repo.get_git_ref.return_value.raw_data = [
        {"ref": "refs/heads/feature-a", "object": {"sha": "abc"}},
        {"ref": "refs/heads/feature-b", "object": {"sha": "def"}},
    ]

    with pytest.raises(GitHubApiError) as exc_info:
        GitHubClient(github).get_ref("o", "r", "heads/feature")

    assert str(exc_info.value) == "Not Found"
    assert exc_info.value.status == 404


def test_create_ref(github, repo):
    repo.create_git_ref.return_value.raw_data = {"ref": "refs/heads/feature"}

    data = GitHubClient(github).create_ref(
        "octocat", "hello-world", "refs/heads/feature", "abc"
    )

    assert data == {"ref": "refs/heads/feature"}
    repo.create_git_ref.assert_called_once_with(ref="refs/heads/feature", sha="abc")


def test_create_file_sends_content_unchanged(github):
    github.requester.requestJsonAndCheck.return_value = ({}, {"commit": {}})

    GitHubClient(github).create_or_update_file(
        "octocat",
        "hello-world",
        "docs/my notes.md",
        "Add notes",
        "aGVsbG8=",
        "main",
    )

    github.requester.requestJsonAndCheck.assert_called_once_with(
        "PUT",
        "/repos/octocat/hello-world/contents/docs/my%20notes.md",
        input={"message": "Add notes", "content": "aGVsbG8=", "branch": "main"},
    )


def test_create_issue(github, repo):
    repo.create_issue.return_value.raw_data = {"number": 1}

    data = GitHubClient(github).create_issue("o", "r", "title", "body")

    assert data == {"number": 1}
    repo.create_issue.assert_called_once_with(title="title", body="body")


def test_create_pull_request(github, repo):
    repo.create_pull.return_value.raw_data = {"number": 2}

    data = GitHubClient(github).create_pull_request(
        "o", "r", "title", "body", "feature", "main"
    )

    assert data == {"number": 2}
    repo.create_pull.assert_called_once_with(
        base="main", head="feature", title="title", body="body"
    )


def test_github_errors_use_api_message(github, repo):
    repo.get_git_ref.side_effect = GithubException(
        404, {"message": "Not Found", "status": "404"}, None
    )

    with pytest.raises(GitHubApiError) as exc_info:
        GitHubClient(github).get_ref("o", "r", "heads/missing")

    assert str(exc_info.value) == "Not Found"
    assert exc_info.value.status == 404


def test_github_errors_without_message_fall_back_to_str(github):
    github.requester.requestJsonAndCheck.side_effect = GithubException(500, None, None)

    with pytest.raises(GitHubApiError) as exc_info:
        GitHubClient(github).list_repos_for_authenticated_user(30, 1)

    assert exc_info.value.status == 500
    assert "500" in exc_info.value.message


def test_encode_file_content():
    assert encode_file_content("hello") == "aGVsbG8="
    assert encode_file_content("") == ""


def test_format_json_is_indented():
    assert format_json({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}'


def test_get_github_token_reads_environment(monkeypatch):
    monkeypatch.setattr("src.utils.github.util.load_dotenv", lambda: False)
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")

    assert get_github_token() == "ghp_test"


@pytest.mark.parametrize("value", [None, ""])
def test_get_github_token_missing(monkeypatch, value):
    monkeypatch.setattr("src.utils.github.util.load_dotenv", lambda: False)
    if value is None:
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    else:
        monkeypatch.setenv("GITHUB_TOKEN", value)

    with pytest.raises(ValueError, match="GITHUB_TOKEN environment variable"):
        get_github_token()


def test_create_github_client_with_explicit_token():
    assert isinstance(create_github_client("ghp_test"), GitHubClient)
