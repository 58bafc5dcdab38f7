"""Unit tests for extracting pull request and known issue data from GitHub."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from github import GithubException, UnknownObjectException
from requests.exceptions import ConnectionError as RequestsConnectionError

from github_release_notes.github.abc import GitHubClientBase
from github_release_notes.release_notes.exceptions import NetworkError, NotFoundError
from github_release_notes.release_notes.extractor import (
    DataExtractor,
    extract_pull_request_number,
    extract_pull_request_numbers,
)
from github_release_notes.release_notes.models import Author, KnownIssue, Label, PullRequestInformation


def make_commit(message: str) -> SimpleNamespace:
    """Build an object shaped like a PyGithub commit."""
    return SimpleNamespace(commit=SimpleNamespace(message=message))


def make_github_pr(number: int, title: str, labels: list[str], login: str | None = "octocat") -> SimpleNamespace:
    """Build an object shaped like a PyGithub pull request."""
    return SimpleNamespace(
        number=number,
        title=title,
        labels=[SimpleNamespace(name=name) for name in labels],
        user=SimpleNamespace(login=login) if login else None,
    )


@pytest.fixture
def adapter() -> MagicMock:
    """A mocked GitHub client."""
    return MagicMock(spec=GitHubClientBase)


@pytest.mark.parametrize(
    "message,expected",
    [
        pytest.param("Merge pull request #123 from user/branch\n\nFix things", 123, id="merge commit"),
        pytest.param("Fix flaky test (#456)", 456, id="squash commit"),
        pytest.param("Fix flaky test (#456)\n\nSigned-off-by: someone", 456, id="squash commit with body"),
        pytest.param("Bump version", None, id="no reference"),
        pytest.param("Bump version\n\nSee (#789)", None, id="reference outside summary line"),
        pytest.param("Refer to #12 in the middle", None, id="bare reference"),
        pytest.param("", None, id="empty message"),
    ],
)
def test_extract_pull_request_number(message: str, expected: int | None) -> None:
    """Test extracting PR numbers from commit messages."""
    assert extract_pull_request_number(message) == expected


def test_extract_pull_request_numbers_deduplicates_in_order() -> None:
    """Test that PR numbers are unique and keep their order of appearance."""
    messages = ["Fix A (#3)", "Merge pull request #1 from a/b", "Cherry-pick of Fix A (#3)", "chore: tidy", "Fix B (#2)"]

    assert extract_pull_request_numbers(messages) == [3, 1, 2]


def test_list_pull_request_numbers(adapter: MagicMock) -> None:
    """Test listing PR numbers between two references."""
    adapter.compare_commits.return_value = [make_commit("Fix A (#10)"), make_commit("no pr"), make_commit("Merge pull request #11 from x/y")]

    numbers = DataExtractor(adapter).list_pull_request_numbers("v11.0.0", "release-12.0")

    assert numbers == [10, 11]
    adapter.compare_commits.assert_called_once_with("v11.0.0", "release-12.0")


def test_fetch_pull_requests(adapter: MagicMock) -> None:
    """Test converting GitHub pull requests to PullRequestInformation."""
    adapter.get_pull_request.side_effect = [
        make_github_pr(10, "Fix A", ["Type: Bug", "Component: VTGate"]),
        make_github_pr(11, "Add B", [], login=None),
    ]

    prs = DataExtractor(adapter).fetch_pull_requests([10, 11])

    assert prs == [
        PullRequestInformation(
            number=10,
            title="Fix A",
            labels=[Label(name="Type: Bug"), Label(name="Component: VTGate")],
            author=Author(login="octocat"),
        ),
        PullRequestInformation(number=11, title="Add B"),
    ]


def test_load_pull_requests(adapter: MagicMock) -> None:
    """Test fetching every pull request merged between two references."""
    adapter.compare_commits.return_value = [make_commit("Fix A (#10)")]
    adapter.get_pull_request.return_value = make_github_pr(10, "Fix A", ["Type: Bug"])

    prs = DataExtractor(adapter).load_pull_requests("v11.0.0", "v12.0.0")

    assert [pr.number for pr in prs] == [10]
    adapter.get_pull_request.assert_called_once_with(10)


def test_load_known_issues(adapter: MagicMock) -> None:
    """Test that known issues are listed by the major release label."""
    adapter.list_issues.return_value = [SimpleNamespace(number=1, title="Issue 1"), SimpleNamespace(number=5, title="Issue 5")]

    issues = DataExtractor(adapter).load_known_issues("v1.2.3")

    assert issues == [KnownIssue(number=1, title="Issue 1"), KnownIssue(number=5, title="Issue 5")]
    adapter.list_issues.assert_called_once_with(state="open", labels=["Known issue: v1"])


def test_load_known_issues_not_found(adapter: MagicMock) -> None:
    """Test that a 404 from GitHub raises NotFoundError."""
    adapter.list_issues.side_effect = UnknownObjectException(404, {"message": "Not Found"}, {})

    with pytest.raises(NotFoundError) as exc_info:
        DataExtractor(adapter).load_known_issues("v12.0.0")

    assert isinstance(exc_info.value, NetworkError)
    assert "load_known_issues('v12.0.0')" in str(exc_info.value)


def test_fetch_pull_requests_github_error(adapter: MagicMock) -> None:
    """Test that other GitHub errors raise NetworkError."""
    adapter.get_pull_request.side_effect = GithubException(500, {"message": "Server Error"}, {})

    with pytest.raises(NetworkError) as exc_info:
        DataExtractor(adapter).fetch_pull_requests([1])

    assert not isinstance(exc_info.value, NotFoundError)
    assert "status 500" in str(exc_info.value)


def test_list_pull_request_numbers_connection_error(adapter: MagicMock) -> None:
    """Test that transport errors raise NetworkError."""
    adapter.compare_commits.side_effect = RequestsConnectionError("connection refused")

    with pytest.raises(NetworkError, match="connection refused"):
        DataExtractor(adapter).list_pull_request_numbers("v11.0.0", "v12.0.0")
