"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_release_notes.utils.constants import DEFAULT_OUTPUT_DIRECTORY, DEFAULT_PROJECT_NAME, DEFAULT_REPOSITORY


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # Release notes settings
    PROJECT_NAME: str = DEFAULT_PROJECT_NAME
    OUTPUT_DIRECTORY: Path = Path(DEFAULT_OUTPUT_DIRECTORY)

    # GitHub API settings
    GITHUB_API_URL: str = "https://api.github.com"
    REPO: str = DEFAULT_REPOSITORY

    # GitHub PAT settings
    GITHUB_PAT_TOKEN: str | None = None

    # GitHub App settings
    GITHUB_APP_ID: int | None = None
    GITHUB_APP_PRIVATE_KEY_PATH: Path | None = None
    GITHUB_APP_INSTALLATION_ID: int | None = None


settings = Settings()
