#!/usr/bin/env python3
"""
GitHub Browser - Main CLI entrypoint

Browse GitHub users and repositories from the terminal, or start the relay
server the browser frontend talks to.

Usage:
    python main.py search torvalds
    python main.py user octocat                          # profile, then repositories
    python main.py repo facebook/react                   # details, then latest commits
    python main.py repo https://github.com/facebook/react
    python main.py serve --port 5000
"""

import argparse
import sys
from typing import Tuple

from fetchers.github import GitHubClient
from utils.config_loader import load_config
from utils.logger import setup_logger

logger = setup_logger(__name__)


def parse_repository(value: str) -> Tuple[str, str]:
    """
    Parse a repository reference into (owner, repo).

    Args:
        value: Either "owner/repo" or "https://github.com/owner/repo"

    Returns:
        Tuple of (owner, repo)

    Examples:
        "facebook/react" -> ("facebook", "react")
        "https://github.com/facebook/react/" -> ("facebook", "react")
    """
    if value.startswith("http"):
        if "github.com" not in value:
            raise ValueError(f"Unsupported platform in URL: {value}")
        parts = value.rstrip("/").split("/")
        if len(parts) < 5:
            raise ValueError(f"Invalid repository URL: {value}")
        owner, repo = parts[-2], parts[-1]
    else:
        if value.count("/") != 1:
            raise ValueError("Invalid repository format. Use 'owner/repo' or full URL")
        owner, repo = value.split("/")

    if repo.endswith(".git"):
        repo = repo[:-4]
    if not owner or not repo:
        raise ValueError(f"Invalid repository reference: {value}")
    return owner, repo


def _upstream_error(what: str, response) -> bool:
    """Log a non-2xx upstream response. Returns True if there was one."""
    if response.ok:
        return False
    message = response.data.get("message") if isinstance(response.data, dict) else None
    logger.error(f"{what} failed ({response.status_code}): {message or response.data}")
    return True


def search_users(github: GitHubClient, query: str) -> bool:
    """Print the logins matching a search query."""
    response = github.search_users(query)
    if _upstream_error(f"Search for '{query}'", response):
        return False

    items = response.data.get("items", [])
    print(f"{response.data.get('total_count', len(items))} users match '{query}'")
    for item in items:
        print(f"  {item.get('login')}  {item.get('html_url', '')}")
    return True


def show_user(github: GitHubClient, username: str) -> bool:
    """Print a user's profile followed by their repositories."""
    user, repos = github.fetch_user_profile(username)
    if _upstream_error(f"User lookup for {username}", user):
        return False

    profile = user.data
    print(f"{profile.get('login')} ({profile.get('name') or 'no name'})")
    if profile.get("bio"):
        print(f"  {profile['bio']}")
    print(
        f"  Followers: {profile.get('followers', 0)}  "
        f"Following: {profile.get('following', 0)}  "
        f"Public repos: {profile.get('public_repos', 0)}"
    )

    if _upstream_error(f"Repository listing for {username}", repos):
        return False

    print("")
    print("Repositories:")
    for repo in repos.data:
        description = repo.get("description") or ""
        print(f"  {repo.get('name')}  ★{repo.get('stargazers_count', 0)}  {description}")
    return True


def show_repo(github: GitHubClient, owner: str, repo: str) -> bool:
    """Print repository details followed by its latest commits."""
    details, commits = github.fetch_repo_overview(owner, repo)
    if _upstream_error(f"Repository lookup for {owner}/{repo}", details):
        return False

    info = details.data
    print(info.get("full_name", f"{owner}/{repo}"))
    if info.get("description"):
        print(f"  {info['description']}")
    print(
        f"  Language: {info.get('language') or 'n/a'}  "
        f"Stars: {info.get('stargazers_count', 0)}  "
        f"Forks: {info.get('forks_count', 0)}  "
        f"Created: {info.get('created_at', 'n/a')}"
    )

    if _upstream_error(f"Commit listing for {owner}/{repo}", commits):
        return False

    print("")
    print("Latest commits:")
    for entry in commits.data:
        commit = entry.get("commit", {})
        message = (commit.get("message") or "").splitlines()[0] if commit.get("message") else ""
        author = (commit.get("author") or {}).get("name", "unknown")
        print(f"  {entry.get('sha', '')[:7]}  {message}  ({author})")
    return True


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="GitHub Browser - browse users and repositories through the GitHub API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find users
  python main.py search octo

  # Profile and repositories
  python main.py user octocat

  # Repository details and latest commits
  python main.py repo facebook/react

  # Start the relay API for the browser frontend
  python main.py serve --port 5000
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Search GitHub users")
    search_parser.add_argument("query", help="Search term (login, name, email...)")

    user_parser = subparsers.add_parser("user", help="Show a user's profile and repositories")
    user_parser.add_argument("username", help="GitHub login (e.g., 'octocat')")

    repo_parser = subparsers.add_parser("repo", help="Show repository details and latest commits")
    repo_parser.add_argument(
        "repository",
        help="Repository in format 'owner/repo' or full GitHub URL"
    )

    serve_parser = subparsers.add_parser("serve", help="Start the relay API server")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=5000,
        help="Port to run the API server on (default: 5000)"
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)"
    )
    serve_parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Do not restart the server when source files change"
    )

    args = parser.parse_args()

    # Show help if no command provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "serve":
        from backend.server import run
        run(host=args.host, port=args.port, reload=not args.no_reload)
        sys.exit(0)

    config = load_config()
    setup_logger(__name__, config.log_level)
    github = GitHubClient(config.upstream)

    try:
        if args.command == "search":
            if not args.query:
                logger.error("Search query is required")
                sys.exit(1)
            success = search_users(github, args.query)
        elif args.command == "user":
            success = show_user(github, args.username)
        else:
            owner, repo = parse_repository(args.repository)
            success = show_repo(github, owner, repo)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error(f"GitHub request failed: {e}")
        sys.exit(1)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
