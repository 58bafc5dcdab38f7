"""GitHub client adapter for the PyGithub library."""

from pathlib import Path
from typing import Literal, Self

import structlog
from github import Github
from github.Commit import Commit
from github.Issue import Issue
from github.PullRequest import PullRequest
from github.Repository import Repository

from github_release_notes.configuration.models import GitHubConfig
from github_release_notes.utils.github import split_repository_in_configuration

from .abc import GitHubClientBase
from .client import get_github_client

logger = structlog.get_logger(__name__)


class GitHubAdapter(GitHubClientBase):
    """GitHub client adapter for the PyGithub library."""

    def __init__(self, client: Github, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name
        self._repository: Repository | None = None

    @classmethod
    def create(cls, config: GitHubConfig) -> Self:
        """Create a new GitHub client adapter from reconciled configuration.

        Raises:
            ValueError: If the repository is not in 'owner/repo' format
        """
        owner, repo_name = split_repository_in_configuration(repo=config.repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=config.github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = get_github_client(
            github_auth_type=config.github_auth_type,
            github_pat_token=config.github_pat_token,
            github_app_id=config.github_app_id,
            github_app_private_key_path=Path(config.github_app_private_key_path) if config.github_app_private_key_path else None,
            github_app_installation_id=config.github_app_installation_id,
            github_api_url=config.github_api_url,
        )
        return cls(client, owner, repo_name)

    # Repository
    def get_repository(self) -> Repository:
        """Get the repository for the current client, fetching it once."""
        if self._repository is None:
            self._repository = self.client.get_repo(f"{self.owner}/{self.repo_name}")
        return self._repository

    # Issues
    def list_issues(self, state: Literal["open", "closed", "all"] = "all", labels: list[str] | None = None) -> list[Issue]:
        """List all issues for a repository, leaving out pull requests."""
        filters = {"labels": labels} if labels else {}
        issues = self.get_repository().get_issues(state=state, **filters)
        return [issue for issue in issues if issue.pull_request is None]

    # Pull Requests
    def get_pull_request(self, pull_request_number: int) -> PullRequest:
        """Get a pull request from the repository."""
        return self.get_repository().get_pull(pull_request_number)

    # Commits
    def compare_commits(self, base: str, head: str) -> list[Commit]:
        """List the commits reachable from head but not from base, oldest first."""
        comparison = self.get_repository().compare(base, head)
        commits = list(comparison.commits)
        logger.debug("Compared commits", base=base, head=head, commit_count=len(commits))
        return commits
