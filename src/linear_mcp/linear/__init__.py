from linear_mcp.linear.client import LinearClient
from linear_mcp.linear.errors import (
    LinearAPIError,
    LinearAuthenticationError,
    LinearConnectionError,
    LinearNotFoundError,
    LinearPermissionError,
    LinearValidationError,
)
from linear_mcp.linear.models import Issue, IssueCreateResult, Team, User, WorkflowState

__all__ = [
    "LinearClient",
    "LinearAPIError",
    "LinearAuthenticationError",
    "LinearConnectionError",
    "LinearNotFoundError",
    "LinearPermissionError",
    "LinearValidationError",
    "Issue",
    "IssueCreateResult",
    "Team",
    "User",
    "WorkflowState",
]
