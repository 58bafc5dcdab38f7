"""Extract pull request and known issue data from GitHub."""

from functools import wraps
from typing import Any, Callable, Iterable, TypeVar

import structlog
from github import GithubException, UnknownObjectException
from requests.exceptions import RequestException

from ..github.abc import GitHubClientBase
from ..utils.constants import MERGED_PR_PATTERN, PREFIX_KNOWN_ISSUE
from .exceptions import NetworkError, NotFoundError
from .models import Author, KnownIssue, Label, PullRequestInformation
from .version import major_release

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_github_errors(func: F) -> F:
    """Decorator turning PyGithub and transport failures into NotFoundError or NetworkError."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except UnknownObjectException as exc:
            logger.error("GitHub resource not found", function=func.__name__, status_code=exc.status, data=exc.data)
            raise NotFoundError(f"{func.__name__}({', '.join(map(repr, args[1:]))})") from exc
        except GithubException as exc:
            logger.error("GitHub request failed", function=func.__name__, status_code=exc.status, data=exc.data)
            raise NetworkError(f"GitHub request failed in {func.__name__} with status {exc.status}: {exc}") from exc
        except RequestException as exc:
            logger.error("GitHub request failed", function=func.__name__, error=str(exc))
            raise NetworkError(f"GitHub request failed in {func.__name__}: {exc}") from exc

    return wrapper  # type: ignore


def extract_pull_request_number(commit_message: str) -> int | None:
    """Return the PR number referenced by the summary line of a merge or squash commit."""
    summary = commit_message.splitlines()[0] if commit_message else ""
    match = MERGED_PR_PATTERN.search(summary)
    if match is None:
        return None
    return int(match.group(1) or match.group(2))


def extract_pull_request_numbers(commit_messages: Iterable[str]) -> list[int]:
    """Return the unique PR numbers referenced by commit messages, in order of appearance."""
    seen: set[int] = set()
    numbers: list[int] = []
    for message in commit_messages:
        number = extract_pull_request_number(message)
        if number is not None and number not in seen:
            seen.add(number)
            numbers.append(number)
    return numbers


class DataExtractor:
    """Extracts pull request and known issue data from GitHub."""

    def __init__(self, adapter: GitHubClientBase) -> None:
        """Initialize with a GitHub client."""
        self.adapter = adapter

    @handle_github_errors
    def list_pull_request_numbers(self, from_ref: str, to_ref: str) -> list[int]:
        """List the PRs merged between two git references."""
        commits = self.adapter.compare_commits(from_ref, to_ref)
        numbers = extract_pull_request_numbers(commit.commit.message for commit in commits)
        logger.info("Found merged pull requests", from_ref=from_ref, to_ref=to_ref, commit_count=len(commits), pull_request_count=len(numbers))
        return numbers

    @handle_github_errors
    def fetch_pull_requests(self, numbers: Iterable[int]) -> list[PullRequestInformation]:
        """Fetch the title, labels and author of each pull request."""
        pull_requests: list[PullRequestInformation] = []
        for number in numbers:
            logger.debug("Fetching pull request", pr_number=number)
            pr = self.adapter.get_pull_request(number)
            pull_requests.append(
                PullRequestInformation(
                    number=pr.number,
                    title=pr.title,
                    labels=tuple(Label(name=label.name) for label in pr.labels),
                    author=Author(login=pr.user.login) if pr.user else None,
                )
            )
        return pull_requests

    def load_pull_requests(self, from_ref: str, to_ref: str) -> list[PullRequestInformation]:
        """Fetch every PR merged between two git references."""
        numbers = self.list_pull_request_numbers(from_ref, to_ref)
        return self.fetch_pull_requests(numbers)

    @handle_github_errors
    def load_known_issues(self, release: str) -> list[KnownIssue]:
        """Fetch the open issues labelled as known for the major version of a release."""
        label = f"{PREFIX_KNOWN_ISSUE}{major_release(release)}"
        issues = self.adapter.list_issues(state="open", labels=[label])
        known_issues = [KnownIssue(number=issue.number, title=issue.title) for issue in issues]
        logger.info("Loaded known issues", release=release, label=label, count=len(known_issues))
        return known_issues
