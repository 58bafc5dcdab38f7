"""Reconcile GitHub configuration from CLI options and environment variables."""

from pathlib import Path

from github_release_notes.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from github_release_notes.configuration.models import GitHubAuthenticationType, GitHubConfig


def validate_github_authentication_configuration(
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration.

    Args:
        github_pat_token (str | None): The GitHub PAT token.
        github_app_id (int | None): The GitHub App ID.
        github_app_private_key_path (Path | None): The path to the GitHub App private key.
        github_app_installation_id (int | None): The GitHub App installation ID.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If neither or both of PAT and App configurations
            are defined, or if the App configuration is incomplete.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication used.
    """
    app_settings = {
        "GitHub App ID (command line option --github-app-id, environment variable GITHUB_APP_ID)": github_app_id,
        "GitHub App private key path (command line option --github-app-private-key-path, environment variable GITHUB_APP_PRIVATE_KEY_PATH)": (
            github_app_private_key_path
        ),
        "GitHub App installation ID (command line option --github-app-installation-id, environment variable GITHUB_APP_INSTALLATION_ID)": (
            github_app_installation_id
        ),
    }
    any_app_setting = any(app_settings.values())

    if github_pat_token and any_app_setting:
        raise GitHubAuthenticationConfigurationUndefinedError("Both PAT and GitHub App configurations are defined. Please use one or the other.")

    if github_pat_token:
        return GitHubAuthenticationType.PAT

    if all(app_settings.values()):
        return GitHubAuthenticationType.APP

    if any_app_setting:
        missing = [name for name, value in app_settings.items() if not value]
        raise GitHubAuthenticationConfigurationUndefinedError("Incomplete GitHub App configuration - missing settings include " + ", ".join(missing))

    raise GitHubAuthenticationConfigurationUndefinedError(
        "No GitHub authentication configuration provided. Please provide either a PAT or a GitHub App configuration."
    )


def reconcile_github_configuration(
    repo: str,
    github_api_url: str,
    github_pat_token: str | None = None,
    github_app_id: int | None = None,
    github_app_private_key_path: Path | None = None,
    github_app_installation_id: int | None = None,
) -> GitHubConfig:
    """Validate the authentication settings and bundle them with the repository to read from."""
    github_auth_type = validate_github_authentication_configuration(
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
    )
    return GitHubConfig(
        repo=repo,
        github_api_url=github_api_url,
        github_auth_type=github_auth_type,
        github_pat_token=github_pat_token if github_auth_type == GitHubAuthenticationType.PAT else None,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
    )
