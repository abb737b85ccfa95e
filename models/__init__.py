"""Data models for the PR portfolio."""

from models.config_models import Config, CredentialsConfig, FetchConfig, RenderConfig
from models.data_models import (
    ContributionDocument,
    ContributionStats,
    PullRequestRecord,
    UserProfile,
)

__all__ = [
    "Config",
    "CredentialsConfig",
    "FetchConfig",
    "RenderConfig",
    "ContributionDocument",
    "ContributionStats",
    "PullRequestRecord",
    "UserProfile",
]
