"""Linear MCP server for AI assistants."""

from linear_mcp.linear.client import LinearClient
from linear_mcp.server import create_server
from linear_mcp.settings import LinearSettings, load_settings

__all__ = ["create_server", "load_settings", "LinearSettings", "LinearClient"]
