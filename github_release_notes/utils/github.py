"""Contains utility functions for GitHub interactions."""

from github_release_notes.utils.constants import GITHUB_WEB_URL


def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if repo is None:
        raise ValueError("A repository is required in the configuration.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def repository_web_url(repo: str) -> str:
    """Return the browser URL of a repository given in 'owner/repo' format."""
    return f"{GITHUB_WEB_URL}/{repo.strip('/')}"
