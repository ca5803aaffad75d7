"""Configuration models for the GitHub browser."""

from models.config_models import Config, CredentialsConfig, UpstreamConfig

__all__ = [
    "Config",
    "CredentialsConfig",
    "UpstreamConfig",
]
