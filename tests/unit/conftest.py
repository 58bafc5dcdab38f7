"""Fixtures for unit tests."""

from typing import Generator

import pytest
import structlog

from github_release_notes.release_notes.models import KnownIssue, Label, PullRequestInformation


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def feature_pull_request() -> PullRequestInformation:
    """A feature pull request for ComponentA."""
    return PullRequestInformation(
        number=1,
        title="PR 1",
        labels=[Label(name="Type: Feature"), Label(name="Component: ComponentA")],
    )


@pytest.fixture
def bug_pull_request() -> PullRequestInformation:
    """A bug fix pull request for ComponentB."""
    return PullRequestInformation(
        number=2,
        title="PR 2",
        labels=[Label(name="Type: Bug"), Label(name="Component: ComponentB")],
    )


@pytest.fixture
def known_issues() -> list[KnownIssue]:
    """Two known issues in a deliberately non-sorted order."""
    return [KnownIssue(number=2, title="Issue 2"), KnownIssue(number=1, title="Issue 1")]
