"""Validate Linear MCP configuration and test connectivity."""

import asyncio
import sys

from linear_mcp.linear.client import LinearClient
from linear_mcp.settings import ConfigurationError, load_settings


async def run_check() -> int:
    print("Loading settings...")
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"FAIL: Could not load settings: {e}")
        print("Ensure LINEAR_API_KEY is set in the environment or the .env file.")
        return 1

    print(f"  LINEAR_API_URL: {settings.api_url}")
    print(f"  LINEAR_API_KEY: {'*' * 8}...{settings.api_key[-4:]}")

    print("\nTesting connectivity...")
    client = LinearClient(
        api_key=settings.api_key,
        api_url=settings.api_url,
        timeout=settings.timeout,
        page_size=settings.page_size,
    )

    try:
        teams = await client.list_teams()
        print(f"  OK: Found {len(teams)} accessible teams")
        for team in teams[:5]:
            print(f"    - {team.key}: {team.name} ({team.id})")
        if len(teams) > 5:
            print(f"    ... and {len(teams) - 5} more")
        return 0
    except Exception as e:
        print(f"  FAIL: {e}")
        return 1
    finally:
        await client.close()


def main() -> None:
    sys.exit(asyncio.run(run_check()))


if __name__ == "__main__":
    main()
