"""Configuration settings loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

# Checkout root, one level above src/ (the directory holding pyproject.toml).
# Only meaningful for source and editable installs; from a wheel this points
# inside the environment's lib directory and is normally absent.
DEFAULT_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


class LinearSettings(BaseSettings):
    """Linear MCP server settings.

    All settings are loaded from environment variables prefixed with LINEAR_.
    A dotenv file is read first by load_settings(); variables already present
    in the process environment take precedence over it.
    """

    model_config = {"env_prefix": "LINEAR_"}

    # Required
    api_key: str = Field(min_length=1)

    # Optional
    api_url: str = "https://api.linear.app/graphql"
    timeout: int = 30
    page_size: int = 50
    log_level: str = "INFO"
    server_name: str = "linear"
    server_version: str = "1.0.0"


def resolve_env_file() -> Path | None:
    """Locate the dotenv file to load.

    The checkout-root .env wins; otherwise the nearest .env at or above the
    current working directory is used, which covers installed wheels.
    """
    if DEFAULT_ENV_FILE.is_file():
        return DEFAULT_ENV_FILE
    found = find_dotenv(usecwd=True)
    return Path(found) if found else None


def load_settings(env_file: Path | None = None) -> LinearSettings:
    """Load the dotenv file (if any) and build LinearSettings.

    Args:
        env_file: Explicit dotenv path. Defaults to resolve_env_file().

    Raises:
        ConfigurationError: LINEAR_API_KEY is unset or empty, or another
            setting fails validation.
    """
    if env_file is None:
        env_file = resolve_env_file()
    if env_file is not None and env_file.is_file():
        load_dotenv(env_file, override=False)

    try:
        return LinearSettings()
    except ValidationError as e:
        missing = {".".join(str(p) for p in err["loc"]) for err in e.errors()}
        if "api_key" in missing:
            raise ConfigurationError(
                "LINEAR_API_KEY environment variable is required for the Linear MCP server"
            ) from e
        raise ConfigurationError(f"Invalid Linear MCP configuration: {e}") from e
