"""Summarize the pull requests and contributors of a release."""

from typing import Sequence

from .models import PullRequestInformation

BOT_SUFFIX = "[bot]"


def list_contributors(pull_requests: Sequence[PullRequestInformation]) -> list[str]:
    """Return the sorted, unique logins of the human authors of the given pull requests."""
    logins = {pr.author.login for pr in pull_requests if pr.author is not None and not pr.author.login.endswith(BOT_SUFFIX)}
    return sorted(logins, key=str.lower)


def compute_change_metrics(pull_requests: Sequence[PullRequestInformation]) -> str:
    """Describe how many pull requests a release contains and thank their authors."""
    metrics = f"The release includes {len(pull_requests)} merged Pull Requests.\n"
    contributors = list_contributors(pull_requests)
    if contributors:
        metrics += "\nThanks to all our contributors: " + ", ".join(f"@{login}" for login in contributors) + "\n"
    return metrics
