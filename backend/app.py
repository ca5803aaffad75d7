"""
FastAPI application for the GitHub browser relay.

Serves the /api routes the browser frontend consumes. Configuration is read
once here and handed to the GitHub client; nothing else is shared between
requests.

There is no module-level app: uvicorn builds one per process with
`uvicorn backend.app:create_app --factory`, so importing this module never
reads the environment.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.middleware import SecurityHeadersMiddleware
from backend.routes import router
from fetchers.github import GitHubClient
from models.config_models import Config
from utils.config_loader import load_config
from utils.logger import setup_logger

logger = setup_logger(__name__)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """
    Build the relay application.

    Args:
        config: Validated configuration. Loaded from the environment if omitted.

    Returns:
        FastAPI: App with CORS, security headers and the /api routes
    """
    if config is None:
        config = load_config()
    setup_logger(__name__, config.log_level)

    app = FastAPI(
        title="GitHub Browser API",
        description="Read-only relay for the GitHub REST API",
        version="1.0.0"
    )

    app.state.config = config
    app.state.github = GitHubClient(config.upstream)

    app.add_middleware(SecurityHeadersMiddleware)
    # Credentials cannot be combined with a wildcard origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials="*" not in config.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(router)

    if config.credentials.github_token:
        logger.info("FastAPI app initialized (authenticated GitHub access)")
    else:
        logger.info("FastAPI app initialized (anonymous GitHub access, lower rate limit)")

    return app
