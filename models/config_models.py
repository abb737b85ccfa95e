"""Configuration models for validation using Pydantic."""

from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

DEFAULT_USERNAME = "natsuki"
DEFAULT_DATA_PATH = Path("data/prs.json")


def resolve_target_username(
    target_username: Optional[str] = None,
    github_actor: Optional[str] = None
) -> str:
    """Pick the account to fetch PRs for.

    Explicit override first, then the ambient GitHub Actions actor,
    then the built-in default. Empty strings count as unset.
    """
    return target_username or github_actor or DEFAULT_USERNAME


class CredentialsConfig(BaseModel):
    """API credentials loaded from environment variables."""

    github_token: Optional[str] = Field(None, description="GitHub token used for the search API")

    @field_validator("github_token")
    @classmethod
    def validate_github_token(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty values and the .env.example placeholder as unset."""
        if not v or v == "ghp_your_token_here":
            return None
        return v


class FetchConfig(BaseModel):
    """Settings for the fetch step."""

    target_username: Optional[str] = Field(None, description="Explicit account to fetch (TARGET_USERNAME)")
    github_actor: Optional[str] = Field(None, description="Ambient actor identity (GITHUB_ACTOR)")
    include_own_prs: bool = Field(
        default=False,
        description="Include PRs opened against the user's own repositories"
    )
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    @property
    def username(self) -> str:
        """The resolved target account handle."""
        return resolve_target_username(self.target_username, self.github_actor)


class RenderConfig(BaseModel):
    """Settings shared by the page server and the static build."""

    style: Literal["list", "cards"] = Field(default="list", description="Page layout")


class Config(BaseModel):
    """Application configuration."""

    credentials: CredentialsConfig
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    data_path: Path = Field(default=DEFAULT_DATA_PATH, description="Location of prs.json")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper
