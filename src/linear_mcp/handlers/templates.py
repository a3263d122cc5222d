"""create-task-template prompt.

Gathers the team, its workflow states and the workspace users, then writes a
single instruction message an assistant can use to file a well-formed issue.
The fetches run in order and the first failure replaces the whole message
with a fallback that points at the teams resource.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from mcp.types import PromptMessage, TextContent

from linear_mcp.handlers.result import Err, HandlerResult, Ok, capture
from linear_mcp.handlers.teams import TEAMS_URI
from linear_mcp.linear.client import LinearClient
from linear_mcp.linear.models import Team, User, WorkflowState
from linear_mcp.utils.timing import timed

logger = logging.getLogger("linear_mcp")

PRIORITY_LEGEND = (
    "Priority levels:\n"
    "0 - No priority\n"
    "1 - Urgent\n"
    "2 - High\n"
    "3 - Medium\n"
    "4 - Low"
)


@dataclass(frozen=True)
class FetchStep:
    name: str
    fetch: Callable[[], Awaitable[Any]]


@dataclass(frozen=True)
class TemplateContext:
    team: Team
    states: list[WorkflowState]
    users: list[User]


def compose_message(
    context: TemplateContext, title: str, description: str | None
) -> str:
    members = "\n".join(f"- {u.label} (ID: {u.id})" for u in context.users) or "- (none)"
    states = "\n".join(f"- {s.name} (ID: {s.id})" for s in context.states) or "- (none)"
    return (
        f"Hi! I'd like to create a new task for the {context.team.name} team.\n\n"
        f"Title: {title}\n"
        f"Description: {description or 'No description provided'}\n\n"
        f"{PRIORITY_LEGEND}\n\n"
        f"Team members:\n{members}\n\n"
        f"Workflow states:\n{states}\n\n"
        "Please help me create this issue with the create-issue tool. Suggest a "
        "priority, an assignee from the team members and a starting workflow state, "
        "and refine the description if it is unclear."
    )


def compose_fallback(team_id: str, error: Err) -> str:
    return (
        f"Error fetching data for team {team_id}: {error.message}\n\n"
        f"Please check that the team ID is valid. Read the {TEAMS_URI} resource "
        "to list the available teams and their IDs."
    )


def user_message(text: str) -> PromptMessage:
    return PromptMessage(role="user", content=TextContent(type="text", text=text))


class CreateTaskTemplatePrompt:
    def __init__(self, client: LinearClient):
        self._client = client

    def steps(self, team_id: str) -> list[FetchStep]:
        return [
            FetchStep("team", lambda: self._client.get_team(team_id)),
            FetchStep("workflow_states", lambda: self._client.list_workflow_states(team_id)),
            FetchStep("users", self._client.list_users),
        ]

    async def gather(self, team_id: str) -> HandlerResult[TemplateContext]:
        fetched: dict[str, Any] = {}
        for step in self.steps(team_id):
            try:
                fetched[step.name] = await step.fetch()
            except Exception as e:
                logger.warning(
                    "create-task-template: step %r failed for team %s: %s",
                    step.name,
                    team_id,
                    e,
                )
                return capture(e)
        return Ok(
            TemplateContext(
                team=fetched["team"],
                states=fetched["workflow_states"],
                users=fetched["users"],
            )
        )

    @timed("prompt:create-task-template")
    async def build(
        self, team_id: str, title: str, description: str | None = None
    ) -> HandlerResult[str]:
        context = await self.gather(team_id)
        if isinstance(context, Err):
            return context
        return Ok(compose_message(context.value, title, description))

    async def invoke(
        self, team_id: str, title: str, description: str | None = None
    ) -> list[PromptMessage]:
        result = await self.build(team_id, title, description)
        if isinstance(result, Err):
            return [user_message(compose_fallback(team_id, result))]
        return [user_message(result.value)]
