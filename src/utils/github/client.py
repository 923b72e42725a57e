import logging
import urllib.parse
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from github import Auth, Github, GithubException
from github.GithubObject import NotSet

logger = logging.getLogger(__name__)


class GitHubApiError(Exception):
    """Raised when a GitHub REST call fails."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


@contextmanager
def raise_api_errors():
    """Translate PyGithub exceptions into GitHubApiError"""
    try:
        yield
    except GithubException as e:
        data = e.data
        if isinstance(data, dict) and data.get("message"):
            message = data["message"]
        else:
            message = str(e)
        logger.error(f"GitHub API returned {e.status}: {message}")
        raise GitHubApiError(message, status=e.status) from e


class GitHubClient:
    """
    Thin wrapper over PyGithub exposing the REST operations used by the tools.

    Every method returns the raw JSON payload of the GitHub response.
    """

    def __init__(self, github: Github):
        self._github = github

    @classmethod
    def from_token(cls, token: str) -> "GitHubClient":
        return cls(Github(auth=Auth.Token(token)))

    def _repo(self, owner: str, repo: str):
        # lazy=True avoids a GET /repos/{owner}/{repo} round trip
        return self._github.get_repo(f"{owner}/{repo}", lazy=True)

    def list_repos_for_authenticated_user(
        self, per_page: int, page: int
    ) -> List[Dict[str, Any]]:
        with raise_api_errors():
            _, data = self._github.requester.requestJsonAndCheck(
                "GET",
                "/user/repos",
                parameters={"per_page": per_page, "page": page},
            )
        return data

    def create_repo_for_authenticated_user(
        self,
        name: str,
        description: Optional[str] = None,
        private: bool = False,
        auto_init: bool = True,
    ) -> Dict[str, Any]:
        with raise_api_errors():
            repo = self._github.get_user().create_repo(
                name,
                description=description if description is not None else NotSet,
                private=private,
                auto_init=auto_init,
            )
            return repo.raw_data

    def get_ref(self, owner: str, repo: str, ref: str) -> Dict[str, Any]:
        with raise_api_errors():
            data = self._repo(owner, repo).get_git_ref(ref).raw_data
        # GitHub answers a partial ref name with a list of matching refs
        if not isinstance(data, dict):
            logger.error(f"No exact match for ref {ref} in {owner}/{repo}")
            raise GitHubApiError("Not Found", status=404)
        return data

    def create_ref(self, owner: str, repo: str, ref: str, sha: str) -> Dict[str, Any]:
        with raise_api_errors():
            return self._repo(owner, repo).create_git_ref(ref=ref, sha=sha).raw_data

    def create_or_update_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        content: str,
        branch: str,
    ) -> Dict[str, Any]:
        """
        PUT /repos/{owner}/{repo}/contents/{path}.

        PyGithub's Repository.create_file encodes content itself, so the
        request is issued directly to keep the already-encoded base64 intact.
        """
        url = (
            f"/repos/{owner}/{repo}/contents/"
            f"{urllib.parse.quote(path.lstrip('/'))}"
        )
        with raise_api_errors():
            _, data = self._github.requester.requestJsonAndCheck(
                "PUT",
                url,
                input={"message": message, "content": content, "branch": branch},
            )
        return data

    def create_issue(
        self, owner: str, repo: str, title: str, body: str
    ) -> Dict[str, Any]:
        with raise_api_errors():
            return self._repo(owner, repo).create_issue(title=title, body=body).raw_data

    def create_pull_request(
        self, owner: str, repo: str, title: str, body: str, head: str, base: str
    ) -> Dict[str, Any]:
        with raise_api_errors():
            pull = self._repo(owner, repo).create_pull(
                base=base, head=head, title=title, body=body
            )
            return pull.raw_data
