"""Contains unit tests for the utils.github module."""

import pytest

from github_release_notes.utils.github import repository_web_url, split_repository_in_configuration


def test_split_repository_valid() -> None:
    """Test splitting a valid owner/repo string."""
    owner, repo = split_repository_in_configuration("vitessio/vitess")
    assert owner == "vitessio"
    assert repo == "vitess"


def test_split_repository_missing() -> None:
    """Test that ValueError is raised if repo is None."""
    with pytest.raises(ValueError, match="A repository is required in the configuration."):
        split_repository_in_configuration(None)


@pytest.mark.parametrize(
    "malformed_repo",
    [
        pytest.param("", id="empty string"),
        pytest.param("/", id="only a slash"),
        pytest.param("vitessio-vitess", id="no slash"),
        pytest.param("owner/repo/extra", id="too many parts"),
    ],
)
def test_split_repository_various_malformed(malformed_repo: str) -> None:
    """Test that ValueError is raised if repo is malformed (various cases)."""
    with pytest.raises(ValueError):
        split_repository_in_configuration(malformed_repo)


@pytest.mark.parametrize(
    "repo_input,expected_owner,expected_repo",
    [
        pytest.param("vitessio/vitess", "vitessio", "vitess", id="no slashes"),
        pytest.param("/vitessio/vitess", "vitessio", "vitess", id="leading slash"),
        pytest.param("vitessio/vitess/", "vitessio", "vitess", id="trailing slash"),
    ],
)
def test_split_repository_strips_slashes(repo_input: str, expected_owner: str, expected_repo: str) -> None:
    """Test that leading/trailing slashes are stripped and owner/repo are parsed correctly."""
    owner, repo = split_repository_in_configuration(repo_input)
    assert owner == expected_owner
    assert repo == expected_repo


def test_repository_web_url() -> None:
    """Test that the browser URL of a repository is built from its owner/repo name."""
    assert repository_web_url("vitessio/vitess") == "https://github.com/vitessio/vitess"
    assert repository_web_url("/vitessio/vitess/") == "https://github.com/vitessio/vitess"
