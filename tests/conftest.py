"""Shared pytest fixtures and configuration."""

import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient

from fetchers.github import GitHubClient
from models.config_models import Config


@pytest.fixture
def test_env(monkeypatch):
    """
    Set up valid environment variables so config can be loaded during tests
    without requiring real credentials.
    """
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test_token_1234567890")
    monkeypatch.setenv("GITHUB_API_BASE", "https://api.github.example")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, http://localhost:5173")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    return {
        "github_token": "ghp_test_token_1234567890",
        "github_api_base": "https://api.github.example",
        "log_level": "DEBUG",
    }


@pytest.fixture
def anonymous_env(monkeypatch):
    """Environment without any GitHub credential."""
    monkeypatch.setenv("GITHUB_TOKEN", "")
    monkeypatch.delenv("GITHUB_API_BASE", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")


@pytest.fixture
def mock_github():
    """Mock GitHubClient for testing routes without network access."""
    return Mock(spec=GitHubClient)


@pytest.fixture
def client(mock_github):
    """Create FastAPI test client with the GitHub client overridden."""
    from backend.app import create_app
    from backend.routes import get_github_client

    app = create_app(Config())
    app.dependency_overrides[get_github_client] = lambda: mock_github
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
