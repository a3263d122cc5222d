"""create-issue tool."""

from __future__ import annotations

import json
import logging

from linear_mcp.handlers.result import Err, HandlerResult, Ok, capture
from linear_mcp.linear.client import LinearClient
from linear_mcp.linear.models import IssueCreateResult
from linear_mcp.utils.timing import timed

logger = logging.getLogger("linear_mcp")


class CreateIssueTool:
    def __init__(self, client: LinearClient):
        self._client = client

    @timed("tool:create-issue")
    async def create(
        self, team_id: str, title: str, description: str, priority: float
    ) -> HandlerResult[IssueCreateResult]:
        # priority is passed through as given; Linear validates the 0-4 range.
        try:
            return Ok(await self._client.create_issue(team_id, title, description, priority))
        except Exception as e:
            logger.warning("create-issue: issueCreate failed for team %s: %s", team_id, e)
            return capture(e)

    @staticmethod
    def render(result: HandlerResult[IssueCreateResult]) -> str:
        # Failures are reported in-band as JSON text, not as a protocol error.
        if isinstance(result, Err):
            return json.dumps(result.to_dict(), indent=2)
        return json.dumps(result.value.model_dump(by_alias=True), indent=2)

    async def invoke(self, team_id: str, title: str, description: str, priority: float) -> str:
        return self.render(await self.create(team_id, title, description, priority))
