"""Sets up the authenticated PyGithub client used to read release data."""

from pathlib import Path

import structlog
from github import Auth, Github

from github_release_notes.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from github_release_notes.configuration.models import GitHubAuthenticationType

logger = structlog.get_logger(__name__)


def get_github_app_client(
    github_app_id: int,
    github_app_private_key_path: Path,
    github_app_installation_id: int,
    github_api_url: str,
) -> Github:
    """Returns a GitHub client authenticated as the given GitHub App installation."""
    try:
        private_key = Path(github_app_private_key_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise GitHubAuthenticationConfigurationUndefinedError(
            f"Unable to read GitHub App private key at {github_app_private_key_path}: {exc}"
        ) from exc
    auth = Auth.AppAuth(github_app_id, private_key).get_installation_auth(github_app_installation_id)
    return Github(auth=auth, base_url=github_api_url)


def get_github_pat_client(github_pat_token: str, github_api_url: str) -> Github:
    """Returns a GitHub client authenticated with a personal access token."""
    return Github(auth=Auth.Token(github_pat_token), base_url=github_api_url)


def get_github_client(
    github_auth_type: GitHubAuthenticationType,
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
    github_api_url: str,
) -> Github:
    """Returns an authenticated GitHub client for the chosen authentication type.

    Supports a custom base URL for GitHub Enterprise Server (GHES).
    """
    logger.debug("Building GitHub client", auth_type=github_auth_type.value, github_api_url=github_api_url)
    if github_auth_type == GitHubAuthenticationType.APP:
        if not (github_app_id and github_app_private_key_path and github_app_installation_id):
            raise GitHubAuthenticationConfigurationUndefinedError(
                "GitHub App authentication requires an app ID, a private key path and an installation ID."
            )
        return get_github_app_client(github_app_id, github_app_private_key_path, github_app_installation_id, github_api_url)
    if not github_pat_token:
        raise GitHubAuthenticationConfigurationUndefinedError("GitHub PAT authentication requires a token.")
    return get_github_pat_client(github_pat_token, github_api_url)
