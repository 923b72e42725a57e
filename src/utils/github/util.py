import os
import json
import base64
import logging
from typing import Any

from dotenv import load_dotenv

from src.utils.github.client import GitHubClient

logger = logging.getLogger(__name__)

GITHUB_TOKEN_ENV = "GITHUB_TOKEN"


def get_github_token() -> str:
    """
    Read the GitHub token from the environment (or a local .env file).

    Returns:
        str: The personal access token used as the bearer credential.

    Raises:
        ValueError: If the token is not configured.
    """
    load_dotenv()
    token = os.environ.get(GITHUB_TOKEN_ENV)
    if not token:
        err = f"{GITHUB_TOKEN_ENV} environment variable is required"
        logger.error(err)
        raise ValueError(err)
    return token


def create_github_client(token: str = None) -> GitHubClient:
    """Create an authenticated GitHub client, reading the token if not given"""
    return GitHubClient.from_token(token or get_github_token())


def encode_file_content(content: str) -> str:
    """Base64-encode file content as the contents API expects"""
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


def format_json(payload: Any) -> str:
    return json.dumps(payload, indent=2)
