"""Configuration models for validation using Pydantic."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CredentialsConfig(BaseModel):
    """API credentials loaded from environment variables."""

    model_config = ConfigDict(frozen=True)

    # Optional: anonymous access works, just with a lower rate limit
    github_token: Optional[str] = Field(None, description="GitHub personal access token")

    @field_validator("github_token")
    @classmethod
    def validate_github_token(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank tokens as unset and reject the .env.example placeholder."""
        if v is None or not v.strip():
            return None
        if v == "ghp_your_token_here":
            raise ValueError("GitHub token must be set to a real token or left empty")
        return v.strip()


class UpstreamConfig(BaseModel):
    """Connection settings for the GitHub REST API."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default="https://api.github.com", description="GitHub API base URL")
    accept: str = Field(default="application/vnd.github.v3+json", description="Accept header")
    user_agent: str = Field(default="GitHub-Browser-App", description="User-Agent header (required by GitHub)")
    token: Optional[str] = Field(None, description="Bearer token attached to every request")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("GitHub API base URL must start with http:// or https://")
        return v.rstrip("/")

    def headers(self) -> dict[str, str]:
        """Build the fixed header set sent with every upstream request."""
        headers = {
            "Accept": self.accept,
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers


class Config(BaseModel):
    """Application configuration."""

    model_config = ConfigDict(frozen=True)

    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)
    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper
