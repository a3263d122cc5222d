"""Async Linear GraphQL API client using httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from linear_mcp.linear import queries
from linear_mcp.linear.errors import (
    LinearAPIError,
    LinearAuthenticationError,
    LinearConnectionError,
    LinearNotFoundError,
    LinearPermissionError,
    LinearValidationError,
)
from linear_mcp.linear.models import IssueCreateResult, Team, User, WorkflowState

logger = logging.getLogger("linear_mcp")

DEFAULT_API_URL = "https://api.linear.app/graphql"

_ERROR_MAP: dict[int, type[LinearAPIError]] = {
    400: LinearValidationError,
    401: LinearAuthenticationError,
    403: LinearPermissionError,
    404: LinearNotFoundError,
}

# extensions.code / extensions.type values reported in GraphQL errors
_GRAPHQL_ERROR_MAP: dict[str, type[LinearAPIError]] = {
    "AUTHENTICATION_ERROR": LinearAuthenticationError,
    "FORBIDDEN": LinearPermissionError,
    "INVALID_INPUT": LinearValidationError,
    "GRAPHQL_VALIDATION_FAILED": LinearValidationError,
    "ENTITY_NOT_FOUND": LinearNotFoundError,
}


def _graphql_error(errors: list[dict[str, Any]], status_code: int) -> LinearAPIError:
    first = errors[0] if errors else {}
    message = "; ".join(e.get("message", "") for e in errors) or "Unknown GraphQL error"
    extensions = first.get("extensions") or {}
    for raw in (extensions.get("code"), extensions.get("type")):
        if not raw:
            continue
        key = str(raw).upper().replace(" ", "_")
        if key in _GRAPHQL_ERROR_MAP:
            return _GRAPHQL_ERROR_MAP[key](f"Linear API error: {message}")
    if "not found" in message.lower():
        return LinearNotFoundError(f"Linear API error: {message}")
    error_cls = _ERROR_MAP.get(status_code)
    if error_cls is not None:
        return error_cls(f"Linear API error: {message}")
    return LinearAPIError(f"Linear API error: {message}", status_code=status_code)


class LinearClient:
    """Async wrapper around the Linear GraphQL API."""

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        timeout: int = 30,
        page_size: int = 50,
    ):
        self._api_url = api_url
        self._page_size = page_size
        self._client = httpx.AsyncClient(
            headers={
                "Authorization": api_key,
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    async def _execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        try:
            response = await self._client.post(
                self._api_url, json={"query": query, "variables": variables or {}}
            )
        except httpx.TransportError as e:
            raise LinearConnectionError(f"Linear API request failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("errors"):
            raise _graphql_error(body["errors"], response.status_code)
        if response.status_code >= 400:
            error_cls = _ERROR_MAP.get(response.status_code, LinearAPIError)
            message = f"Linear API request failed ({response.status_code}): {response.text}"
            if error_cls is LinearAPIError:
                raise LinearAPIError(message, status_code=response.status_code)
            raise error_cls(message)
        if not isinstance(body, dict) or body.get("data") is None:
            raise LinearAPIError("Linear API returned no data", status_code=response.status_code)
        return body["data"]

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------

    async def list_teams(self) -> list[Team]:
        data = await self._execute(queries.LIST_TEAMS, {"first": self._page_size})
        return [Team.model_validate(n) for n in data["teams"]["nodes"]]

    async def get_team(self, team_id: str) -> Team:
        data = await self._execute(queries.GET_TEAM, {"id": team_id})
        node = data.get("team")
        if not node:
            raise LinearNotFoundError(f"Team '{team_id}' not found in Linear")
        return Team.model_validate(node)

    # ------------------------------------------------------------------
    # Workflow states and users
    # ------------------------------------------------------------------

    async def list_workflow_states(self, team_id: str) -> list[WorkflowState]:
        data = await self._execute(
            queries.LIST_WORKFLOW_STATES, {"teamId": team_id, "first": self._page_size}
        )
        return [WorkflowState.model_validate(n) for n in data["workflowStates"]["nodes"]]

    async def list_users(self) -> list[User]:
        data = await self._execute(queries.LIST_USERS, {"first": self._page_size})
        return [User.model_validate(n) for n in data["users"]["nodes"]]

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    async def create_issue(
        self, team_id: str, title: str, description: str, priority: float
    ) -> IssueCreateResult:
        payload = {
            "teamId": team_id,
            "title": title,
            "description": description,
            "priority": priority,
        }
        data = await self._execute(queries.CREATE_ISSUE, {"input": payload})
        result = IssueCreateResult.model_validate(data["issueCreate"])
        if not result.success:
            raise LinearAPIError("Linear issueCreate returned success=false")
        logger.info(
            "Created issue %s in team %s",
            result.issue.identifier if result.issue else "?",
            team_id,
        )
        return result
