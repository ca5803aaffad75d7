"""GitHub API client for the read-only browsing queries.

Every call is a single GET with the configured header set. Nothing is
retried or cached: transport failures and unparseable bodies propagate to
the caller, which decides how to report them.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from models.config_models import UpstreamConfig

logger = logging.getLogger(__name__)

SEARCH_PAGE_SIZE = 5
USER_REPOS_PAGE_SIZE = 30
COMMITS_PAGE_SIZE = 5


@dataclass(frozen=True)
class UpstreamResponse:
    """Status code and parsed JSON body of one GitHub API call."""

    status_code: int
    data: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class GitHubClient:
    """Fetch users, repositories and commits from the GitHub REST API."""

    def __init__(self, config: UpstreamConfig):
        """Initialize GitHub API client.

        Args:
            config: Immutable upstream settings (base URL, headers, optional token)
        """
        self.config = config
        self.base_url = config.base_url
        self.headers = config.headers()

    def get(self, path: str, params: Optional[dict] = None) -> UpstreamResponse:
        """Make one GitHub API request and parse the JSON body.

        Args:
            path: API path starting with "/" (e.g. "/users/octocat")
            params: Optional query parameters (URL-encoded by requests)

        Returns:
            UpstreamResponse with the upstream status code, whatever it is

        Raises:
            requests.RequestException: On connection errors, DNS failures, etc.
            ValueError: If the body is not valid JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} params={params}")

        response = requests.get(url, headers=self.headers, params=params)

        remaining = response.headers.get("X-RateLimit-Remaining")
        limit = response.headers.get("X-RateLimit-Limit")
        if remaining and limit:
            logger.debug(f"Rate limit: {remaining}/{limit} remaining")

        return UpstreamResponse(status_code=response.status_code, data=response.json())

    def search_users(self, query: str) -> UpstreamResponse:
        """Search users by login/name (first page of 5 results)."""
        return self.get("/search/users", params={"q": query, "per_page": SEARCH_PAGE_SIZE})

    def get_user(self, username: str) -> UpstreamResponse:
        return self.get(f"/users/{username}")

    def list_user_repos(self, username: str) -> UpstreamResponse:
        """List a user's repositories, most recently updated first."""
        return self.get(
            f"/users/{username}/repos",
            params={"sort": "updated", "per_page": USER_REPOS_PAGE_SIZE},
        )

    def get_repo(self, owner: str, repo: str) -> UpstreamResponse:
        return self.get(f"/repos/{owner}/{repo}")

    def list_repo_commits(self, owner: str, repo: str) -> UpstreamResponse:
        """List the latest commits on the default branch."""
        return self.get(f"/repos/{owner}/{repo}/commits", params={"per_page": COMMITS_PAGE_SIZE})

    def fetch_user_profile(
        self,
        username: str
    ) -> tuple[UpstreamResponse, Optional[UpstreamResponse]]:
        """Fetch a user and then their repositories.

        The repositories are only requested once the user lookup succeeded.

        Returns:
            Tuple of (user response, repos response or None)
        """
        user = self.get_user(username)
        if not user.ok:
            logger.warning(f"User lookup for {username} returned {user.status_code}, skipping repos")
            return user, None
        return user, self.list_user_repos(username)

    def fetch_repo_overview(
        self,
        owner: str,
        repo: str
    ) -> tuple[UpstreamResponse, Optional[UpstreamResponse]]:
        """Fetch repository details and then its latest commits.

        Returns:
            Tuple of (repo response, commits response or None)
        """
        details = self.get_repo(owner, repo)
        if not details.ok:
            logger.warning(
                f"Repo lookup for {owner}/{repo} returned {details.status_code}, skipping commits"
            )
            return details, None
        return details, self.list_repo_commits(owner, repo)
