"""Tests for the command line browser."""

import sys
from unittest.mock import Mock, patch
import pytest
import requests

from fetchers.github import GitHubClient, UpstreamResponse
from main import main, parse_repository, search_users, show_repo, show_user
from models.config_models import Config


class TestParseRepository:
    """Tests for parse_repository."""

    def test_short_format(self):
        assert parse_repository("facebook/react") == ("facebook", "react")

    def test_url_format(self):
        assert parse_repository("https://github.com/facebook/react/") == ("facebook", "react")

    def test_strips_git_suffix(self):
        assert parse_repository("https://github.com/facebook/react.git") == ("facebook", "react")

    def test_rejects_other_platforms(self):
        with pytest.raises(ValueError, match="Unsupported platform"):
            parse_repository("https://gitlab.com/gitlab-org/gitlab")

    def test_rejects_missing_slash(self):
        with pytest.raises(ValueError, match="Invalid repository format"):
            parse_repository("react")

    def test_rejects_empty_segment(self):
        with pytest.raises(ValueError):
            parse_repository("facebook/")


@pytest.fixture
def github():
    return Mock(spec=GitHubClient)


class TestSearchUsers:

    def test_prints_logins(self, github, capsys):
        github.search_users.return_value = UpstreamResponse(200, {
            "total_count": 2,
            "items": [{"login": "octocat"}, {"login": "octo-org"}],
        })

        assert search_users(github, "octo") is True
        out = capsys.readouterr().out
        assert "2 users match 'octo'" in out
        assert "octocat" in out

    def test_upstream_error(self, github):
        github.search_users.return_value = UpstreamResponse(403, {"message": "API rate limit exceeded"})

        assert search_users(github, "octo") is False


class TestShowUser:

    def test_profile_and_repos(self, github, capsys):
        github.fetch_user_profile.return_value = (
            UpstreamResponse(200, {"login": "octocat", "name": "The Octocat", "followers": 10}),
            UpstreamResponse(200, [{"name": "Hello-World", "description": "My first repo"}]),
        )

        assert show_user(github, "octocat") is True
        out = capsys.readouterr().out
        assert "octocat (The Octocat)" in out
        assert "Hello-World" in out

    def test_unknown_user(self, github, capsys):
        github.fetch_user_profile.return_value = (UpstreamResponse(404, {"message": "Not Found"}), None)

        assert show_user(github, "nobody") is False
        assert "Repositories" not in capsys.readouterr().out


class TestShowRepo:

    def test_details_and_commits(self, github, capsys):
        github.fetch_repo_overview.return_value = (
            UpstreamResponse(200, {
                "full_name": "facebook/react",
                "description": "UI library",
                "created_at": "2013-05-24T16:15:54Z",
            }),
            UpstreamResponse(200, [
                {"sha": "abcdef1234567", "commit": {"message": "Fix bug\n\nDetails", "author": {"name": "dev"}}},
            ]),
        )

        assert show_repo(github, "facebook", "react") is True
        out = capsys.readouterr().out
        assert "facebook/react" in out
        assert "abcdef1  Fix bug  (dev)" in out
        assert "Details" not in out

    def test_commits_error(self, github):
        github.fetch_repo_overview.return_value = (
            UpstreamResponse(200, {"full_name": "someone/empty"}),
            UpstreamResponse(409, {"message": "Git Repository is empty."}),
        )

        assert show_repo(github, "someone", "empty") is False


class TestMainExitCodes:
    """Tests for main() exit codes."""

    def run_main(self, argv, github):
        with patch.object(sys, "argv", ["main.py", *argv]), \
             patch("main.load_config", return_value=Config()), \
             patch("main.GitHubClient", return_value=github):
            with pytest.raises(SystemExit) as exc_info:
                main()
        return exc_info.value.code

    def test_search_success_exits_zero(self, github):
        github.search_users.return_value = UpstreamResponse(200, {"total_count": 0, "items": []})

        assert self.run_main(["search", "octo"], github) == 0
        github.search_users.assert_called_once_with("octo")

    def test_unknown_user_exits_one(self, github):
        github.fetch_user_profile.return_value = (UpstreamResponse(404, {"message": "Not Found"}), None)

        assert self.run_main(["user", "nobody"], github) == 1

    def test_repo_success_exits_zero(self, github):
        github.fetch_repo_overview.return_value = (
            UpstreamResponse(200, {"full_name": "facebook/react"}),
            UpstreamResponse(200, []),
        )

        assert self.run_main(["repo", "https://github.com/facebook/react"], github) == 0
        github.fetch_repo_overview.assert_called_once_with("facebook", "react")

    def test_bad_repository_argument_exits_one(self, github):
        assert self.run_main(["repo", "badformat"], github) == 1
        github.fetch_repo_overview.assert_not_called()

    def test_transport_error_exits_one(self, github):
        github.search_users.side_effect = requests.ConnectionError("connection refused")

        assert self.run_main(["search", "octo"], github) == 1

    def test_empty_query_exits_one(self, github):
        assert self.run_main(["search", ""], github) == 1
        github.search_users.assert_not_called()

    def test_no_command_exits_one(self, github, capsys):
        assert self.run_main([], github) == 1
        assert "Available commands" in capsys.readouterr().out


class TestServeCommand:
    """Tests for the serve subcommand."""

    def test_serve_reloads_by_default(self):
        with patch.object(sys, "argv", ["main.py", "serve"]), \
             patch("backend.server.run") as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0
        mock_run.assert_called_once_with(host="127.0.0.1", port=5000, reload=True)

    def test_serve_no_reload(self):
        with patch.object(sys, "argv", ["main.py", "serve", "--port", "8080", "--no-reload"]), \
             patch("backend.server.run") as mock_run:
            with pytest.raises(SystemExit):
                main()

        mock_run.assert_called_once_with(host="127.0.0.1", port=8080, reload=False)
