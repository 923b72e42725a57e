from typing import List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ToolArguments(BaseModel):
    """Base for tool argument models: no type coercion, extra keys ignored"""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


class ListRepositoriesArgs(ToolArguments):
    per_page: int = 30
    page: int = 1


class CreateRepositoryArgs(ToolArguments):
    name: str
    description: Optional[str] = None
    private: bool = False
    auto_init: bool = True


class CreateBranchArgs(ToolArguments):
    owner: str
    repo: str
    branch: str
    from_: str = Field(default="main", alias="from")


class CreateFileArgs(ToolArguments):
    owner: str
    repo: str
    path: str
    content: str
    message: str
    branch: str

    @field_validator("content")
    @classmethod
    def content_must_be_utf8(cls, value: str) -> str:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"content is not valid UTF-8 text: {e.reason}")
        return value


class CreateIssueArgs(ToolArguments):
    owner: str
    repo: str
    title: str
    body: str


class CreatePullRequestArgs(ToolArguments):
    owner: str
    repo: str
    title: str
    body: str
    head: str
    base: str = "main"


def required_fields(model: Type[ToolArguments]) -> List[str]:
    """Wire names of the fields a model requires, in declaration order"""
    return [
        field.alias or name
        for name, field in model.model_fields.items()
        if field.is_required()
    ]


def describe_required(model: Type[ToolArguments]) -> Optional[str]:
    """
    Human-readable summary of required fields.

    e.g. "name is required", "owner, repo, and branch are required".
    Returns None for models with no required fields.
    """
    fields = required_fields(model)
    if not fields:
        return None
    if len(fields) == 1:
        return f"{fields[0]} is required"
    if len(fields) == 2:
        return f"{fields[0]} and {fields[1]} are required"
    return f"{', '.join(fields[:-1])}, and {fields[-1]} are required"
