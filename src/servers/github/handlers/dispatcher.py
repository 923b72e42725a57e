import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

import mcp.types as types
from mcp.shared.exceptions import McpError
from mcp.types import ErrorData, INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND
from pydantic import ValidationError

from src.servers.github.handlers import tools
from src.servers.github.handlers.schemas import (
    ToolArguments,
    ListRepositoriesArgs,
    CreateRepositoryArgs,
    CreateBranchArgs,
    CreateFileArgs,
    CreateIssueArgs,
    CreatePullRequestArgs,
    describe_required,
)
from src.utils.github.util import format_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolBinding:
    arguments: Type[ToolArguments]
    handler: Callable[[Any, ToolArguments], Any]
    # Used in "Failed to <action>: ..." error messages
    action: str


TOOL_REGISTRY: Dict[str, ToolBinding] = {
    "list_repositories": ToolBinding(
        ListRepositoriesArgs, tools.handle_list_repositories, "list repositories"
    ),
    "create_repository": ToolBinding(
        CreateRepositoryArgs, tools.handle_create_repository, "create repository"
    ),
    "create_branch": ToolBinding(
        CreateBranchArgs, tools.handle_create_branch, "create branch"
    ),
    "create_file": ToolBinding(
        CreateFileArgs, tools.handle_create_file, "create file"
    ),
    "create_issue": ToolBinding(
        CreateIssueArgs, tools.handle_create_issue, "create issue"
    ),
    "create_pull_request": ToolBinding(
        CreatePullRequestArgs, tools.handle_create_pull_request, "create pull request"
    ),
}


def mcp_error(code: int, message: str) -> McpError:
    return McpError(ErrorData(code=code, message=message))


def invalid_params_message(binding: ToolBinding, error: ValidationError) -> str:
    summary = describe_required(binding.arguments)
    if summary:
        return f"Invalid arguments: {summary}"
    fields = sorted({str(e["loc"][0]) for e in error.errors() if e["loc"]})
    if fields:
        return f"Invalid arguments: {', '.join(fields)} has an invalid type"
    return "Invalid arguments: expected an object"


def validate_arguments(name: str, arguments: Optional[dict]) -> ToolArguments:
    """
    Validate an untyped argument bag against the named tool's model.

    Raises:
        McpError: METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS when
            validation fails.
    """
    binding = TOOL_REGISTRY.get(name)
    if binding is None:
        raise mcp_error(METHOD_NOT_FOUND, f"Unknown tool: {name}")

    if arguments is None:
        arguments = {}

    try:
        return binding.arguments.model_validate(arguments)
    except ValidationError as e:
        logger.error(f"Invalid arguments for {name}: {e}")
        raise mcp_error(INVALID_PARAMS, invalid_params_message(binding, e))


async def dispatch(
    github_client, name: str, arguments: Optional[dict]
) -> list[types.TextContent]:
    """
    Validate arguments and run the named tool against the GitHub client.

    Args:
        github_client: Remote API client used by the handlers.
        name (str): The tool name to execute.
        arguments (dict | None): Untyped arguments from the caller.

    Returns:
        list[types.TextContent]: A single item holding the pretty-printed
        JSON payload returned by GitHub.

    Raises:
        McpError: METHOD_NOT_FOUND, INVALID_PARAMS or INTERNAL_ERROR.
    """
    args = validate_arguments(name, arguments)
    binding = TOOL_REGISTRY[name]

    try:
        # PyGithub is blocking
        result = await asyncio.to_thread(binding.handler, github_client, args)
    except Exception as e:
        logger.error(f"Error calling GitHub API for {name}: {e}")
        raise mcp_error(INTERNAL_ERROR, f"Failed to {binding.action}: {e}") from e

    return [types.TextContent(type="text", text=format_json(result))]
