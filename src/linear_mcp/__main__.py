"""Entry point for running the Linear MCP server: python -m linear_mcp"""

import sys

from linear_mcp.linear.client import LinearClient
from linear_mcp.logging.logger import setup_logger
from linear_mcp.server import create_server
from linear_mcp.settings import ConfigurationError, load_settings


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_logger().error("Fatal error: %s", e)
        sys.exit(1)

    logger = setup_logger(level=settings.log_level)
    try:
        client = LinearClient(
            api_key=settings.api_key,
            api_url=settings.api_url,
            timeout=settings.timeout,
            page_size=settings.page_size,
        )
        mcp = create_server(client, settings)
        logger.info("Linear MCP Server running on stdio")
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
