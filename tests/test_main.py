"""Tests for the CLI commands in main.py."""

import json
import sys
from unittest.mock import Mock, patch

import pytest
import requests

import main
from models.config_models import Config, CredentialsConfig, FetchConfig
from models.data_models import UserProfile


def make_config(data_path, token="ghp_test_token"):
    return Config(
        credentials=CredentialsConfig(github_token=token),
        fetch=FetchConfig(target_username="octocat"),
        data_path=data_path,
    )


def make_fetcher(items=None, total_count=None):
    items = items if items is not None else [
        {
            "number": 1,
            "title": "Fix bug",
            "state": "closed",
            "html_url": "https://github.com/facebook/react/pull/1",
            "repository_url": "https://api.github.com/repos/facebook/react",
            "created_at": "2025-01-15T10:30:00Z",
            "pull_request": {"merged_at": "2025-01-16T10:30:00Z"},
        },
        {
            "number": 2,
            "title": "Abandoned",
            "state": "closed",
            "html_url": "https://github.com/facebook/react/pull/2",
            "repository_url": "https://api.github.com/repos/facebook/react",
            "created_at": "2025-01-15T10:30:00Z",
            "pull_request": {"merged_at": None},
        },
    ]
    fetcher = Mock()
    fetcher.fetch_user.return_value = UserProfile(
        login="octocat", name="The Octocat", avatar_url="https://example.com/a.png"
    )
    fetcher.search_pull_requests.return_value = {
        "total_count": total_count if total_count is not None else len(items),
        "items": items,
    }
    return fetcher


class TestInitializeFetcher:
    """Tests for initialize_fetcher."""

    def test_requires_token(self, tmp_path):
        with pytest.raises(ValueError) as exc_info:
            main.initialize_fetcher(make_config(tmp_path / "prs.json", token=None))
        assert "GITHUB_TOKEN" in str(exc_info.value)

    def test_creates_fetcher(self, tmp_path):
        fetcher = main.initialize_fetcher(make_config(tmp_path / "prs.json"))
        assert fetcher.token == "ghp_test_token"


class TestFetchPRs:
    """Tests for fetch_prs."""

    def test_writes_document(self, tmp_path):
        path = tmp_path / "data" / "prs.json"

        document = main.fetch_prs(make_config(path), fetcher=make_fetcher())

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["user"] == "octocat"
        assert data["user_name"] == "The Octocat"
        assert [pr["number"] for pr in data["prs"]] == [1]
        assert data["prs"][0]["state"] == "merged"
        assert document.total_count == 2

    def test_rerun_is_identical_except_fetched_at(self, tmp_path):
        path = tmp_path / "prs.json"
        config = make_config(path)

        main.fetch_prs(config, fetcher=make_fetcher())
        first = json.loads(path.read_text(encoding="utf-8"))
        main.fetch_prs(config, fetcher=make_fetcher())
        second = json.loads(path.read_text(encoding="utf-8"))

        first.pop("fetched_at")
        second.pop("fetched_at")
        assert first == second

    def test_failure_keeps_previous_document(self, tmp_path):
        path = tmp_path / "prs.json"
        config = make_config(path)
        main.fetch_prs(config, fetcher=make_fetcher())
        before = path.read_bytes()

        fetcher = make_fetcher()
        fetcher.search_pull_requests.side_effect = requests.HTTPError("403 Forbidden")
        with pytest.raises(requests.HTTPError):
            main.fetch_prs(config, fetcher=fetcher)

        assert path.read_bytes() == before

    def test_output_path_override(self, tmp_path):
        output = tmp_path / "elsewhere.json"

        main.fetch_prs(make_config(tmp_path / "prs.json"), fetcher=make_fetcher(), output_path=output)

        assert output.exists()
        assert not (tmp_path / "prs.json").exists()


class TestBuildPage:
    """Tests for build_page."""

    def test_writes_html(self, tmp_path, document_file):
        output = tmp_path / "dist" / "index.html"

        main.build_page(make_config(document_file), output_path=output)

        html = output.read_text(encoding="utf-8")
        assert "The Octocat is Contributing..." in html

    def test_missing_data_writes_placeholder(self, tmp_path):
        output = tmp_path / "dist" / "index.html"

        main.build_page(make_config(tmp_path / "missing.json"), output_path=output)

        assert "No pull request data found" in output.read_text(encoding="utf-8")


class TestMainExitCodes:
    """Tests for process exit codes of the fetch command."""

    def run_main(self, monkeypatch, *argv):
        monkeypatch.setattr(sys, "argv", ["main.py", *argv])
        with pytest.raises(SystemExit) as exc_info:
            main.main()
        return exc_info.value.code

    def test_fetch_success_exits_zero(self, test_env, monkeypatch):
        with patch("main.initialize_fetcher", return_value=make_fetcher()):
            code = self.run_main(monkeypatch, "fetch")

        assert code == 0
        assert test_env["data_path"].exists()

    def test_fetch_failure_exits_nonzero(self, test_env, monkeypatch):
        fetcher = make_fetcher()
        fetcher.fetch_user.side_effect = requests.HTTPError("401 Unauthorized")

        with patch("main.initialize_fetcher", return_value=fetcher):
            code = self.run_main(monkeypatch, "fetch")

        assert code == 1
        assert not test_env["data_path"].exists()

    def test_fetch_without_token_exits_nonzero(self, test_env, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "")

        assert self.run_main(monkeypatch, "fetch") == 1

    def test_build_command(self, test_env, monkeypatch, tmp_path):
        output = tmp_path / "site" / "index.html"

        code = self.run_main(monkeypatch, "build", "--style", "cards", "--output", str(output))

        assert code == 0
        assert "No pull request data found" in output.read_text(encoding="utf-8")

    def test_build_with_placeholder_token(self, test_env, monkeypatch, tmp_path):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_your_token_here")
        output = tmp_path / "site" / "index.html"

        code = self.run_main(monkeypatch, "build", "--output", str(output))

        assert code == 0
        assert output.exists()

    def test_fetch_with_placeholder_token_exits_nonzero(self, test_env, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_your_token_here")

        assert self.run_main(monkeypatch, "fetch") == 1
        assert not test_env["data_path"].exists()

    def test_no_command_exits_nonzero(self, monkeypatch):
        assert self.run_main(monkeypatch) == 1
