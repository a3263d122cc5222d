from linear_mcp.handlers.issues import CreateIssueTool
from linear_mcp.handlers.result import Err, ErrorKind, HandlerResult, Ok, capture
from linear_mcp.handlers.teams import TEAMS_URI, TeamsResource
from linear_mcp.handlers.templates import CreateTaskTemplatePrompt

__all__ = [
    "CreateIssueTool",
    "CreateTaskTemplatePrompt",
    "Err",
    "ErrorKind",
    "HandlerResult",
    "Ok",
    "TEAMS_URI",
    "TeamsResource",
    "capture",
]
