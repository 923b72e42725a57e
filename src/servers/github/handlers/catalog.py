import mcp.types as types


def owner_property():
    return {"type": "string", "description": "Repository owner"}


def repo_property():
    return {"type": "string", "description": "Repository name"}


TOOLS = [
    types.Tool(
        name="list_repositories",
        description="List repositories for the authenticated user",
        inputSchema={
            "type": "object",
            "properties": {
                "per_page": {
                    "type": "integer",
                    "description": "Number of repositories to return per page",
                    "default": 30,
                },
                "page": {
                    "type": "integer",
                    "description": "Page number of the results to fetch",
                    "default": 1,
                },
            },
        },
    ),
    types.Tool(
        name="create_repository",
        description="Create a new repository",
        inputSchema={
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Repository name",
                },
                "description": {
                    "type": "string",
                    "description": "Repository description",
                },
                "private": {
                    "type": "boolean",
                    "description": "Whether the repository should be private",
                    "default": False,
                },
                "auto_init": {
                    "type": "boolean",
                    "description": "Whether to create an initial commit with README",
                    "default": True,
                },
            },
            "required": ["name"],
        },
    ),
    types.Tool(
        name="create_branch",
        description="Create a new branch in a repository",
        inputSchema={
            "type": "object",
            "properties": {
                "owner": owner_property(),
                "repo": repo_property(),
                "branch": {
                    "type": "string",
                    "description": "The name of the new branch",
                },
                "from": {
                    "type": "string",
                    "description": "The name of the branch to create from",
                    "default": "main",
                },
            },
            "required": ["owner", "repo", "branch"],
        },
    ),
    types.Tool(
        name="create_file",
        description="Create a new file in a repository",
        inputSchema={
            "type": "object",
            "properties": {
                "owner": owner_property(),
                "repo": repo_property(),
                "path": {
                    "type": "string",
                    "description": "The path to the file you want to create",
                },
                "content": {
                    "type": "string",
                    "description": "The content of the file",
                },
                "message": {
                    "type": "string",
                    "description": "The commit message",
                },
                "branch": {
                    "type": "string",
                    "description": "The branch name",
                },
            },
            "required": ["owner", "repo", "path", "content", "message", "branch"],
        },
    ),
    types.Tool(
        name="create_issue",
        description="Create a new issue in a repository",
        inputSchema={
            "type": "object",
            "properties": {
                "owner": owner_property(),
                "repo": repo_property(),
                "title": {
                    "type": "string",
                    "description": "Issue title",
                },
                "body": {
                    "type": "string",
                    "description": "Issue body",
                },
            },
            "required": ["owner", "repo", "title", "body"],
        },
    ),
    types.Tool(
        name="create_pull_request",
        description="Create a new pull request",
        inputSchema={
            "type": "object",
            "properties": {
                "owner": owner_property(),
                "repo": repo_property(),
                "title": {
                    "type": "string",
                    "description": "Pull request title",
                },
                "body": {
                    "type": "string",
                    "description": "Pull request body",
                },
                "head": {
                    "type": "string",
                    "description": "The name of the branch where your changes are implemented",
                },
                "base": {
                    "type": "string",
                    "description": "The name of the branch you want your changes pulled into",
                    "default": "main",
                },
            },
            "required": ["owner", "repo", "title", "body", "head"],
        },
    ),
]
