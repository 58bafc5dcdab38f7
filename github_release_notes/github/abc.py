"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any, Literal


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Repository
    @abstractmethod
    def get_repository(self) -> Any:
        """Get a repository."""
        pass

    # Issues
    @abstractmethod
    def list_issues(self, state: Literal["open", "closed", "all"] = "all", labels: list[str] | None = None) -> list[Any]:
        """List issues (not pull requests) for a repository."""
        pass

    # Pull Requests
    @abstractmethod
    def get_pull_request(self, pull_request_number: int) -> Any:
        """Get a pull request for a repository."""
        pass

    # Commits
    @abstractmethod
    def compare_commits(self, base: str, head: str) -> list[Any]:
        """List the commits reachable from head but not from base."""
        pass
