"""FastMCP server construction and capability registration."""

from __future__ import annotations

from typing import Annotated

from fastmcp import FastMCP
from mcp.types import PromptMessage
from pydantic import Field

from linear_mcp.handlers import (
    TEAMS_URI,
    CreateIssueTool,
    CreateTaskTemplatePrompt,
    TeamsResource,
)
from linear_mcp.lifespan import make_lifespan
from linear_mcp.linear.client import LinearClient
from linear_mcp.settings import LinearSettings


def register_capabilities(mcp: FastMCP, client: LinearClient) -> FastMCP:
    """Register the teams resource, create-issue tool and task template prompt."""
    teams = TeamsResource(client)
    issues = CreateIssueTool(client)
    template = CreateTaskTemplatePrompt(client)

    @mcp.resource(
        TEAMS_URI,
        name="teams",
        description=(
            "All Linear teams visible to the API key, as a JSON array. If the Linear "
            "request fails the body is plain text starting with \"Error fetching teams:\"."
        ),
        mime_type="application/json",
    )
    async def read_teams() -> str:
        return await teams.read()

    @mcp.tool(name="create-issue", description="Create a new issue in a Linear team.")
    async def create_issue(
        teamId: Annotated[str, Field(description="ID of the team that owns the issue")],  # noqa: N803
        title: Annotated[str, Field(description="Issue title")],
        description: Annotated[str, Field(description="Issue description (markdown)")],
        priority: Annotated[
            float,
            Field(description="Priority: 0 = no priority, 1 = urgent, 2 = high, 3 = medium, 4 = low"),
        ],
    ) -> str:
        return await issues.invoke(teamId, title, description, priority)

    @mcp.prompt(
        name="create-task-template",
        description="Gather team members and workflow states to guide creating a Linear issue.",
    )
    async def create_task_template(
        teamId: str,  # noqa: N803
        title: str,
        description: str | None = None,
    ) -> list[PromptMessage]:
        return await template.invoke(teamId, title, description)

    return mcp


def create_server(client: LinearClient, settings: LinearSettings) -> FastMCP:
    mcp = FastMCP(
        settings.server_name,
        version=settings.server_version,
        lifespan=make_lifespan(client),
    )
    return register_capabilities(mcp, client)
