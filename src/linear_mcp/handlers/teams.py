"""Teams resource: lists every team visible to the API key."""

from __future__ import annotations

import json
import logging

from linear_mcp.handlers.result import Err, HandlerResult, Ok, capture
from linear_mcp.linear.client import LinearClient
from linear_mcp.linear.models import Team
from linear_mcp.utils.timing import timed

logger = logging.getLogger("linear_mcp")

TEAMS_URI = "linear://teams"


class TeamsResource:
    def __init__(self, client: LinearClient):
        self._client = client

    @timed("resource:linear://teams")
    async def fetch(self) -> HandlerResult[list[Team]]:
        try:
            return Ok(await self._client.list_teams())
        except Exception as e:
            logger.warning("teams resource: list_teams failed: %s", e)
            return capture(e)

    @staticmethod
    def render(result: HandlerResult[list[Team]]) -> str:
        if isinstance(result, Err):
            return f"Error fetching teams: {result.message}"
        return json.dumps([team.model_dump(by_alias=True) for team in result.value], indent=2)

    async def read(self) -> str:
        """Return the team list as JSON text, or an error description. Never raises."""
        return self.render(await self.fetch())
