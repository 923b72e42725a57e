import logging

from src.servers.github.handlers.schemas import (
    ListRepositoriesArgs,
    CreateRepositoryArgs,
    CreateBranchArgs,
    CreateFileArgs,
    CreateIssueArgs,
    CreatePullRequestArgs,
)
from src.utils.github.util import encode_file_content

logger = logging.getLogger(__name__)


def handle_list_repositories(github_client, args: ListRepositoriesArgs):
    """Handle list_repositories tool"""
    return github_client.list_repos_for_authenticated_user(
        per_page=args.per_page, page=args.page
    )


def handle_create_repository(github_client, args: CreateRepositoryArgs):
    """Handle create_repository tool"""
    return github_client.create_repo_for_authenticated_user(
        name=args.name,
        description=args.description,
        private=args.private,
        auto_init=args.auto_init,
    )


def handle_create_branch(github_client, args: CreateBranchArgs):
    """
    Handle create_branch tool.

    Resolves the SHA of heads/{from} and points refs/heads/{branch} at it.
    A failed lookup propagates before the new ref is created.
    """
    base_ref = github_client.get_ref(
        owner=args.owner, repo=args.repo, ref=f"heads/{args.from_}"
    )
    sha = base_ref["object"]["sha"]
    logger.info(f"Creating branch {args.branch} from {args.from_} at {sha}")

    return github_client.create_ref(
        owner=args.owner,
        repo=args.repo,
        ref=f"refs/heads/{args.branch}",
        sha=sha,
    )


def handle_create_file(github_client, args: CreateFileArgs):
    """Handle create_file tool"""
    return github_client.create_or_update_file(
        owner=args.owner,
        repo=args.repo,
        path=args.path,
        message=args.message,
        content=encode_file_content(args.content),
        branch=args.branch,
    )


def handle_create_issue(github_client, args: CreateIssueArgs):
    """Handle create_issue tool"""
    return github_client.create_issue(
        owner=args.owner, repo=args.repo, title=args.title, body=args.body
    )


def handle_create_pull_request(github_client, args: CreatePullRequestArgs):
    """Handle create_pull_request tool"""
    return github_client.create_pull_request(
        owner=args.owner,
        repo=args.repo,
        title=args.title,
        body=args.body,
        head=args.head,
        base=args.base,
    )
