"""Shared pytest configuration."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from linear_mcp.linear.models import Issue, IssueCreateResult, Team, User, WorkflowState

_LINEAR_ENV = (
    "LINEAR_API_KEY",
    "LINEAR_API_URL",
    "LINEAR_TIMEOUT",
    "LINEAR_PAGE_SIZE",
    "LINEAR_LOG_LEVEL",
    "LINEAR_SERVER_NAME",
    "LINEAR_SERVER_VERSION",
)


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if "integration" not in (config.getoption("-m", default="") or ""):
        skip_integration = pytest.mark.skip(reason="use -m integration to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def clean_linear_env(monkeypatch):
    """Start every test without LINEAR_* variables, and undo anything load_dotenv sets."""
    for name in _LINEAR_ENV:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def team() -> Team:
    return Team(id="team_eng", name="Engineering", key="ENG", description="Core team")


@pytest.fixture
def states() -> list[WorkflowState]:
    return [
        WorkflowState(id="state_todo", name="Todo", type="unstarted", position=1.0),
        WorkflowState(id="state_done", name="Done", type="completed", position=2.0),
    ]


@pytest.fixture
def users() -> list[User]:
    return [
        User(id="user_jane", name="Jane Doe", display_name="jane"),
        User(id="user_bot", name=None, display_name="release-bot"),
    ]


@pytest.fixture
def mock_client(team, states, users) -> AsyncMock:
    client = AsyncMock()
    client.list_teams.return_value = [team, Team(id="team_ops", name="Operations", key="OPS")]
    client.get_team.return_value = team
    client.list_workflow_states.return_value = states
    client.list_users.return_value = users

    async def create_issue(team_id, title, description, priority):
        return IssueCreateResult(
            success=True,
            issue=Issue(
                id="issue_1",
                identifier="ENG-1",
                title=title,
                description=description,
                priority=priority,
                url="https://linear.app/acme/issue/ENG-1",
                team_id=team_id,
            ),
        )

    client.create_issue.side_effect = create_issue
    return client
