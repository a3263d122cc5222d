"""Tests for the teams, create-issue and task template handlers using a mocked LinearClient."""

from __future__ import annotations

import json
import logging

import pytest

from linear_mcp.handlers import (
    CreateIssueTool,
    CreateTaskTemplatePrompt,
    Err,
    ErrorKind,
    Ok,
    TeamsResource,
    capture,
)
from linear_mcp.handlers.templates import PRIORITY_LEGEND
from linear_mcp.linear.errors import (
    LinearAPIError,
    LinearAuthenticationError,
    LinearConnectionError,
    LinearNotFoundError,
)


class TestCapture:
    @pytest.mark.parametrize(
        ("exc", "kind"),
        [
            (LinearAuthenticationError(), ErrorKind.AUTHENTICATION),
            (LinearNotFoundError("gone"), ErrorKind.NOT_FOUND),
            (LinearConnectionError("timeout"), ErrorKind.CONNECTION),
            (LinearAPIError("boom", status_code=500), ErrorKind.UPSTREAM),
            (ValueError("odd"), ErrorKind.UNEXPECTED),
        ],
    )
    def test_classifies(self, exc, kind):
        assert capture(exc).kind is kind

    def test_keeps_message_and_status(self):
        err = capture(LinearAPIError("boom", status_code=502))
        assert err.message == "boom"
        assert err.status_code == 502
        assert err.to_dict() == {
            "error": {"kind": "upstream", "message": "boom", "statusCode": 502}
        }


class TestTeamsResource:
    @pytest.mark.asyncio
    async def test_fetch_ok(self, mock_client):
        result = await TeamsResource(mock_client).fetch()
        assert isinstance(result, Ok)
        assert [t.id for t in result.value] == ["team_eng", "team_ops"]

    @pytest.mark.asyncio
    async def test_read_serializes_teams(self, mock_client):
        text = await TeamsResource(mock_client).read()
        teams = json.loads(text)
        assert teams[0]["id"] == "team_eng"
        assert teams[0]["name"] == "Engineering"
        assert teams[1]["name"] == "Operations"

    @pytest.mark.asyncio
    async def test_read_error_never_raises(self, mock_client):
        mock_client.list_teams.side_effect = LinearAuthenticationError("bad key")
        resource = TeamsResource(mock_client)

        result = await resource.fetch()
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.AUTHENTICATION

        text = await resource.read()
        assert "Error fetching teams" in text
        assert "bad key" in text

    @pytest.mark.asyncio
    async def test_unexpected_error_is_text(self, mock_client):
        mock_client.list_teams.side_effect = RuntimeError("socket closed")
        text = await TeamsResource(mock_client).read()
        assert text == "Error fetching teams: socket closed"


class TestCreateIssueTool:
    @pytest.mark.parametrize("priority", [0, 1, 2, 3, 4])
    @pytest.mark.asyncio
    async def test_forwards_priority_unchanged(self, mock_client, priority):
        await CreateIssueTool(mock_client).create("team_eng", "Title", "Body", priority)
        mock_client.create_issue.assert_awaited_once_with("team_eng", "Title", "Body", priority)

    @pytest.mark.asyncio
    async def test_out_of_range_priority_is_not_clamped(self, mock_client):
        await CreateIssueTool(mock_client).create("team_eng", "Title", "Body", 7)
        mock_client.create_issue.assert_awaited_once_with("team_eng", "Title", "Body", 7)

    @pytest.mark.asyncio
    async def test_fractional_priority_is_forwarded(self, mock_client):
        await CreateIssueTool(mock_client).create("team_eng", "Title", "Body", 2.5)
        mock_client.create_issue.assert_awaited_once_with("team_eng", "Title", "Body", 2.5)

    @pytest.mark.asyncio
    async def test_invoke_echoes_request_fields(self, mock_client):
        text = await CreateIssueTool(mock_client).invoke(
            "team_eng", "Fix login", "Users cannot log in", 2
        )
        payload = json.loads(text)
        issue = payload["issue"]
        assert payload["success"] is True
        assert issue["teamId"] == "team_eng"
        assert issue["title"] == "Fix login"
        assert issue["description"] == "Users cannot log in"
        assert issue["priority"] == 2
        assert issue["identifier"] == "ENG-1"

    @pytest.mark.asyncio
    async def test_failure_is_serialized_error_text(self, mock_client):
        mock_client.create_issue.side_effect = LinearAPIError("Linear API error: bad team", 400)
        tool = CreateIssueTool(mock_client)

        result = await tool.create("nope", "t", "d", 1)
        assert isinstance(result, Err)

        payload = json.loads(CreateIssueTool.render(result))
        assert payload["error"]["message"] == "Linear API error: bad team"
        assert payload["error"]["statusCode"] == 400
        assert payload["error"]["kind"] == "upstream"


class TestCreateTaskTemplatePrompt:
    @pytest.mark.asyncio
    async def test_message_contains_team_name(self, mock_client):
        messages = await CreateTaskTemplatePrompt(mock_client).invoke("team_eng", "Add SSO")
        assert len(messages) == 1
        assert messages[0].role == "user"
        text = messages[0].content.text
        first_line = text.splitlines()[0]
        assert "Engineering" in first_line

    @pytest.mark.asyncio
    async def test_message_lists_members_states_and_legend(self, mock_client):
        messages = await CreateTaskTemplatePrompt(mock_client).invoke(
            "team_eng", "Add SSO", "Support Okta"
        )
        text = messages[0].content.text
        assert "Title: Add SSO" in text
        assert "Description: Support Okta" in text
        assert PRIORITY_LEGEND in text
        assert "- Jane Doe (ID: user_jane)" in text
        assert "- release-bot (ID: user_bot)" in text
        assert "- Todo (ID: state_todo)" in text
        assert "- Done (ID: state_done)" in text

    @pytest.mark.asyncio
    async def test_missing_description_placeholder(self, mock_client):
        messages = await CreateTaskTemplatePrompt(mock_client).invoke("team_eng", "Add SSO")
        assert "Description: No description provided" in messages[0].content.text

    @pytest.mark.asyncio
    async def test_fetch_order_and_arguments(self, mock_client):
        await CreateTaskTemplatePrompt(mock_client).build("team_eng", "Add SSO")
        mock_client.get_team.assert_awaited_once_with("team_eng")
        mock_client.list_workflow_states.assert_awaited_once_with("team_eng")
        mock_client.list_users.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_team_failure_short_circuits(self, mock_client):
        mock_client.get_team.side_effect = LinearNotFoundError("Team 'bad' not found in Linear")
        prompt = CreateTaskTemplatePrompt(mock_client)

        result = await prompt.build("bad", "Add SSO")
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.NOT_FOUND
        mock_client.list_workflow_states.assert_not_awaited()
        mock_client.list_users.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_team_failure_fallback_message(self, mock_client):
        mock_client.get_team.side_effect = LinearNotFoundError("Team 'bad' not found in Linear")
        messages = await CreateTaskTemplatePrompt(mock_client).invoke("bad", "Add SSO")
        assert len(messages) == 1
        text = messages[0].content.text
        assert "bad" in text
        assert "linear://teams" in text
        assert "not found" in text
        assert "Team members" not in text
        assert "Workflow states" not in text

    @pytest.mark.asyncio
    async def test_workflow_state_failure_fallback_message(self, mock_client):
        mock_client.list_workflow_states.side_effect = LinearConnectionError("timed out")
        messages = await CreateTaskTemplatePrompt(mock_client).invoke("team_eng", "Add SSO")
        assert len(messages) == 1
        text = messages[0].content.text
        assert "team_eng" in text
        assert "linear://teams" in text
        assert "Jane Doe" not in text
        assert "Todo" not in text
        mock_client.list_users.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_user_failure_fallback_message(self, mock_client):
        mock_client.list_users.side_effect = LinearAPIError("boom")
        messages = await CreateTaskTemplatePrompt(mock_client).invoke("team_eng", "Add SSO")
        text = messages[0].content.text
        assert text.startswith("Error fetching data for team team_eng: boom")
        assert "Engineering" not in text


class TestTiming:
    @pytest.mark.asyncio
    async def test_records_capability_name(self, mock_client, caplog):
        with caplog.at_level(logging.DEBUG, logger="linear_mcp"):
            await CreateIssueTool(mock_client).create("team_eng", "Title", "Body", 1)
            await TeamsResource(mock_client).fetch()

        capabilities = [getattr(r, "capability", None) for r in caplog.records]
        assert "tool:create-issue" in capabilities
        assert "resource:linear://teams" in capabilities
        timing = next(r for r in caplog.records if getattr(r, "capability", None))
        assert timing.elapsed >= 0
