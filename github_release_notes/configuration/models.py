"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class GitHubAuthenticationType(str, Enum):
    """Enum for GitHub authentication types."""

    PAT = "pat"
    APP = "app"


@dataclass
class GitHubConfig:
    """Reconciled GitHub connection settings for a CLI invocation."""

    repo: str
    github_api_url: str
    github_auth_type: GitHubAuthenticationType
    github_pat_token: str | None = None
    github_app_id: int | None = None
    github_app_private_key_path: Path | None = None
    github_app_installation_id: int | None = None
