"""Data models for release notes generation."""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict

from ..utils.constants import (
    CHANGELOG_FILE_NAME,
    DEFAULT_BRANCH,
    DEFAULT_OUTPUT_DIRECTORY,
    DEFAULT_PROJECT_NAME,
    DEFAULT_REPOSITORY,
    RELEASE_NOTES_FILE_NAME,
)
from ..utils.github import repository_web_url


class ReleaseNotesStatus(str, Enum):
    """Status of release notes generation."""

    SUCCESS = "success"
    ERROR = "error"
    DRY_RUN = "dry_run"


class Label(BaseModel):
    """A label attached to a pull request."""

    model_config = ConfigDict(frozen=True)

    name: str


class Author(BaseModel):
    """The GitHub account that opened a pull request."""

    model_config = ConfigDict(frozen=True)

    login: str


class PullRequestInformation(BaseModel):
    """The pull request fields needed to render release notes."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    labels: tuple[Label, ...] = ()
    author: Author | None = None


class KnownIssue(BaseModel):
    """An open issue documented alongside a release."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str


PullRequestsByComponent: TypeAlias = dict[str, list[PullRequestInformation]]
PullRequestsByType: TypeAlias = dict[str, PullRequestsByComponent]


class ReleaseNote(BaseModel):
    """Everything rendered into the release notes and changelog of one release."""

    model_config = ConfigDict(frozen=True)

    version: str = ""
    version_underscore: str = ""
    announcement: str = ""
    known_issues: str = ""
    changelog: str = ""
    change_metrics: str = ""
    sub_dir_path: str = ""
    project_name: str = DEFAULT_PROJECT_NAME
    repository: str = DEFAULT_REPOSITORY

    @property
    def changelog_url(self) -> str:
        """Browser URL of the changelog file once merged on the default branch."""
        return f"{repository_web_url(self.repository)}/blob/{DEFAULT_BRANCH}/{self.sub_dir_path}/{CHANGELOG_FILE_NAME}"


@dataclass
class ReleaseNotesFileConfig:
    """Configuration for release notes file handling."""

    output_directory: str = DEFAULT_OUTPUT_DIRECTORY
    release_notes_file_name: str = RELEASE_NOTES_FILE_NAME
    changelog_file_name: str = CHANGELOG_FILE_NAME


class ReleaseNotesResult(BaseModel):
    """Result of release notes generation."""

    status: ReleaseNotesStatus
    version: str | None = None
    release_notes_path: str | None = None
    changelog_path: str | None = None
    error: str | None = None
    generated_content: str | None = None
    generated_changelog: str | None = None
