"""
API routes for the GitHub browser relay.

Each route performs at most one GitHub API call and forwards the upstream
status code and JSON body unchanged. Failures to reach or parse the
upstream API become a 500 with an {error, message} body.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from fetchers.github import GitHubClient, UpstreamResponse
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api", tags=["github"])


def get_github_client(request: Request) -> GitHubClient:
    """Return the GitHub client created by create_app()."""
    return request.app.state.github


def _forward(upstream: UpstreamResponse, what: str) -> JSONResponse:
    """Relay an upstream response with its original status code."""
    if not upstream.ok:
        logger.warning(f"GitHub returned {upstream.status_code} for {what}")
    return JSONResponse(status_code=upstream.status_code, content=upstream.data)


def _failure(error: str, exc: Exception) -> JSONResponse:
    """Map a transport or parse failure onto a generic 500 response."""
    logger.error(f"{error}: {exc}")
    return JSONResponse(status_code=500, content={"error": error, "message": str(exc)})


@router.get("/health")
def health():
    """Liveness check. Never contacts GitHub."""
    return {"status": "ok", "message": "Server is running"}


@router.get("/search/users")
def search_users(
    q: Optional[str] = Query(None, description="Search term (login, name, email...)"),
    github: GitHubClient = Depends(get_github_client),
):
    """
    Search GitHub users.

    Returns GitHub's search payload (total_count, incomplete_results, items)
    limited to the first 5 matches. A missing or empty q is rejected with a
    400 before GitHub is called.
    """
    if not q:
        return JSONResponse(status_code=400, content={"error": "Search query is required"})

    try:
        upstream = github.search_users(q)
        logger.info(f"Searched users for '{q}'")
        return _forward(upstream, f"user search '{q}'")
    except Exception as e:
        return _failure("Failed to search users", e)


@router.get("/users/{username}")
def get_user(username: str, github: GitHubClient = Depends(get_github_client)):
    """
    Get a user's profile.

    An unknown user yields GitHub's own 404 body.
    """
    try:
        return _forward(github.get_user(username), f"user {username}")
    except Exception as e:
        return _failure("Failed to fetch user details", e)


@router.get("/users/{username}/repos")
def list_user_repos(username: str, github: GitHubClient = Depends(get_github_client)):
    """List up to 30 of a user's repositories, most recently updated first."""
    try:
        return _forward(github.list_user_repos(username), f"repos of {username}")
    except Exception as e:
        return _failure("Failed to fetch repositories", e)


@router.get("/repos/{owner}/{repo}")
def get_repo(owner: str, repo: str, github: GitHubClient = Depends(get_github_client)):
    try:
        return _forward(github.get_repo(owner, repo), f"repo {owner}/{repo}")
    except Exception as e:
        return _failure("Failed to fetch repository details", e)


@router.get("/repos/{owner}/{repo}/commits")
def list_repo_commits(owner: str, repo: str, github: GitHubClient = Depends(get_github_client)):
    """List the 5 most recent commits of a repository."""
    try:
        return _forward(github.list_repo_commits(owner, repo), f"commits of {owner}/{repo}")
    except Exception as e:
        return _failure("Failed to fetch commits", e)
