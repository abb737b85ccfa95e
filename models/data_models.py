"""Data models for the pull request portfolio document."""

from datetime import datetime, timezone
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

SCHEMA_VERSION = 1

PRState = Literal["open", "closed", "merged"]


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as returned by GitHub ("...Z").

    Timestamps without an offset are taken as UTC.
    """
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class UserProfile(BaseModel):
    """Profile data for the account whose PRs are shown."""
    login: str
    name: str  # Display name, falls back to login
    avatar_url: str


class PullRequestRecord(BaseModel):
    """One normalized pull request from the search results.

    Field aliases match the keys written to data/prs.json so documents
    produced by earlier versions of the fetch script still load.
    """
    model_config = ConfigDict(populate_by_name=True)

    repository: str = Field(alias="repo")  # e.g., "facebook/react"
    title: str
    url: str
    created_at: str  # ISO-8601, verbatim from the API
    state: PRState
    number: int

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, v: str) -> str:
        """Reject timestamps the page cannot format; keep the original text."""
        parse_timestamp(v)
        return v

    @property
    def owner(self) -> str:
        """Repository owner (first half of "owner/name")."""
        return self.repository.split("/")[0]


class ContributionDocument(BaseModel):
    """The persisted fetch result, read by the renderer.

    This is the only interface between fetching and rendering. It is
    replaced wholesale by every fetch.
    """
    model_config = ConfigDict(populate_by_name=True)

    schema_version: int = SCHEMA_VERSION
    user: str
    display_name: str = Field(alias="user_name")
    avatar_url: str = Field(alias="avatar")
    fetched_at: str
    total_count: int
    records: list[PullRequestRecord] = Field(default_factory=list, alias="prs", max_length=100)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: int) -> int:
        """Reject documents written with an unknown schema."""
        if v != SCHEMA_VERSION:
            raise ValueError(
                f"Unsupported schema version {v} (expected {SCHEMA_VERSION})"
            )
        return v


class ContributionStats(BaseModel):
    """Aggregate counts shown in the page header."""
    total: int
    merged: int
    open: int
    closed: int
