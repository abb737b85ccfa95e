"""Shared pytest fixtures and configuration."""

import json
import pytest


@pytest.fixture
def test_env(monkeypatch, tmp_path):
    """
    Set up valid test environment variables.

    Lets config be loaded during tests without requiring real credentials
    or a .env file.
    """
    data_path = tmp_path / "data" / "prs.json"
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test_token_1234567890")
    monkeypatch.setenv("TARGET_USERNAME", "octocat")
    monkeypatch.setenv("GITHUB_ACTOR", "actions-user")
    monkeypatch.setenv("INCLUDE_OWN_PRS", "false")
    monkeypatch.setenv("PRS_DATA_PATH", str(data_path))
    monkeypatch.setenv("RENDER_STYLE", "list")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    return {
        "github_token": "ghp_test_token_1234567890",
        "target_username": "octocat",
        "data_path": data_path,
        "log_level": "DEBUG",
    }


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the config loader reads."""
    for name in (
        "GITHUB_TOKEN",
        "TARGET_USERNAME",
        "GITHUB_ACTOR",
        "INCLUDE_OWN_PRS",
        "PRS_DATA_PATH",
        "RENDER_STYLE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env from leaking into tests
    monkeypatch.setattr("utils.config_loader.load_dotenv", lambda **kwargs: None)


@pytest.fixture
def sample_document_data():
    """A prs.json payload as written by the fetch step."""
    return {
        "schema_version": 1,
        "user": "octocat",
        "user_name": "The Octocat",
        "avatar": "https://avatars.githubusercontent.com/u/583231",
        "fetched_at": "2025-01-20T12:00:00Z",
        "total_count": 120,
        "prs": [
            {
                "repo": "facebook/react",
                "title": "Fix hydration warning",
                "url": "https://github.com/facebook/react/pull/1",
                "created_at": "2025-01-19T12:00:00Z",
                "state": "merged",
                "number": 1,
            },
            {
                "repo": "python/cpython",
                "title": "Improve <docs> & examples",
                "url": "https://github.com/python/cpython/pull/2",
                "created_at": "2025-01-18T12:00:00Z",
                "state": "open",
                "number": 2,
            },
            {
                "repo": "pallets/flask",
                "title": "Drop old shim",
                "url": "https://github.com/pallets/flask/pull/3",
                "created_at": "2024-12-01T12:00:00Z",
                "state": "closed",
                "number": 3,
            },
        ],
    }


@pytest.fixture
def document_file(tmp_path, sample_document_data):
    """Write the sample document to a temporary prs.json."""
    path = tmp_path / "data" / "prs.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(sample_document_data), encoding="utf-8")
    return path
