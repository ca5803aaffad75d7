"""Upstream API clients."""

from fetchers.github import GitHubClient, UpstreamResponse

__all__ = ["GitHubClient", "UpstreamResponse"]
