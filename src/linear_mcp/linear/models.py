"""Pydantic models for Linear GraphQL responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class Team(BaseModel):
    id: str = ""
    name: str = ""
    key: str | None = None
    description: str | None = None

    model_config = {"populate_by_name": True}


class WorkflowState(BaseModel):
    id: str = ""
    name: str = ""
    type: str | None = None
    position: float | None = None

    model_config = {"populate_by_name": True}


class User(BaseModel):
    id: str = ""
    name: str | None = None
    display_name: str | None = Field(alias="displayName", default=None)
    email: str | None = None
    active: bool | None = None

    model_config = {"populate_by_name": True}

    @property
    def label(self) -> str:
        """Name shown in prompts; falls back to the display name."""
        return self.name or self.display_name or ""


class Issue(BaseModel):
    id: str = ""
    identifier: str | None = None
    title: str = ""
    description: str | None = None
    priority: float | None = None
    url: str | None = None
    team_id: str | None = Field(alias="teamId", default=None)

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def _flatten_team(cls, data: Any) -> Any:
        # GraphQL returns team { id }; expose it as teamId.
        if isinstance(data, dict) and "teamId" not in data and data.get("team"):
            data = {**data, "teamId": data["team"].get("id")}
        return data


class IssueCreateResult(BaseModel):
    success: bool = False
    issue: Issue | None = None

    model_config = {"populate_by_name": True}
