"""Server lifespan: closes the injected LinearClient on shutdown."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from linear_mcp.linear.client import LinearClient

logger = logging.getLogger("linear_mcp")


def make_lifespan(client: LinearClient) -> Callable:
    """Build a FastMCP lifespan bound to an already constructed client."""

    @asynccontextmanager
    async def lifespan(server) -> AsyncIterator[None]:
        logger.info("Linear MCP server %s ready", server.name)
        try:
            yield
        finally:
            logger.info("Shutting down Linear MCP server")
            await client.close()

    return lifespan
