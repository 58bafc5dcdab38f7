"""Unit tests for loading the release summary and computing change metrics."""

from pathlib import Path

import pytest

from github_release_notes.release_notes.exceptions import InputError
from github_release_notes.release_notes.metrics import compute_change_metrics, list_contributors
from github_release_notes.release_notes.models import Author, PullRequestInformation
from github_release_notes.release_notes.summary import read_release_summary


def test_read_release_summary_verbatim(tmp_path: Path) -> None:
    """Test that the summary file content is returned unchanged."""
    content = "- New Gen4 feature\n- Self hosted runners\n- Bunch of features\n"
    summary_file = tmp_path / "summary.md"
    summary_file.write_text(content, encoding="utf-8")

    assert read_release_summary(summary_file) == content


def test_read_release_summary_keeps_line_endings(tmp_path: Path) -> None:
    """Test that CRLF line endings in the summary file are not translated."""
    summary_file = tmp_path / "summary.md"
    summary_file.write_bytes(b"line one\r\nline two\r\n")

    assert read_release_summary(summary_file) == "line one\r\nline two\r\n"


def test_read_release_summary_invalid_utf8(tmp_path: Path) -> None:
    """Test that a summary file that is not UTF-8 raises InputError."""
    summary_file = tmp_path / "summary.md"
    summary_file.write_bytes(b"\xff\xfe broken")

    with pytest.raises(InputError, match="Unable to read"):
        read_release_summary(summary_file)


def test_read_release_summary_without_path() -> None:
    """Test that no summary path yields an empty announcement."""
    assert read_release_summary(None) == ""
    assert read_release_summary("") == ""


def test_read_release_summary_missing_file(tmp_path: Path) -> None:
    """Test that a missing summary file raises InputError."""
    with pytest.raises(InputError, match="not found"):
        read_release_summary(tmp_path / "missing.md")


def test_read_release_summary_directory(tmp_path: Path) -> None:
    """Test that a summary path pointing to a directory raises InputError."""
    with pytest.raises(InputError):
        read_release_summary(tmp_path)


def make_pr(number: int, login: str | None) -> PullRequestInformation:
    """Build a pull request opened by the given login."""
    return PullRequestInformation(number=number, title=f"pr {number}", author=Author(login=login) if login else None)


def test_list_contributors_sorted_unique_without_bots() -> None:
    """Test that contributors are unique, sorted and exclude bot accounts."""
    prs = [
        make_pr(1, "zeta"),
        make_pr(2, "Alpha"),
        make_pr(3, "dependabot[bot]"),
        make_pr(4, "zeta"),
        make_pr(5, None),
    ]

    assert list_contributors(prs) == ["Alpha", "zeta"]


def test_compute_change_metrics() -> None:
    """Test the change metrics text."""
    prs = [make_pr(1, "bob"), make_pr(2, "alice")]

    assert compute_change_metrics(prs) == (
        "The release includes 2 merged Pull Requests.\n\nThanks to all our contributors: @alice, @bob\n"
    )


def test_compute_change_metrics_without_authors() -> None:
    """Test that the thanks line is left out when no author is known."""
    assert compute_change_metrics([make_pr(1, None)]) == "The release includes 1 merged Pull Requests.\n"
