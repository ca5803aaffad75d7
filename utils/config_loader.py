"""Configuration loader that reads from .env and validates with Pydantic."""

import os
import sys
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import ValidationError

from models.config_models import Config, CredentialsConfig, UpstreamConfig


def _split_origins(raw: str) -> list[str]:
    """Parse a comma-separated CORS_ORIGINS value."""
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def load_config(env_path: Optional[Path] = None) -> Config:
    """
    Load and validate configuration from environment variables.

    Reads from the .env file in the project root (if any). Every setting is
    optional: without GITHUB_TOKEN the relay talks to GitHub anonymously.
    Variables already set in the environment take precedence over .env.

    Args:
        env_path: Alternative .env file (defaults to the project root's)

    Returns:
        Config: Validated, immutable configuration object

    Raises:
        SystemExit: If configuration is invalid
    """
    if env_path is None:
        env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    try:
        credentials = CredentialsConfig(github_token=os.getenv("GITHUB_TOKEN"))
        config = Config(
            credentials=credentials,
            upstream=UpstreamConfig(
                base_url=os.getenv("GITHUB_API_BASE", "https://api.github.com"),
                token=credentials.github_token,
            ),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

        return config

    except ValidationError as e:
        print("❌ Configuration validation failed:", file=sys.stderr)
        print("\nPlease check your .env file. Invalid fields:", file=sys.stderr)

        for error in e.errors():
            field_path = " → ".join(str(x) for x in error["loc"])
            message = error["msg"]
            print(f"  • {field_path}: {message}", file=sys.stderr)

        print("\nHint: GITHUB_TOKEN may be left empty for anonymous access.", file=sys.stderr)
        sys.exit(1)
