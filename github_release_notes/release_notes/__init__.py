"""Release notes generation module."""

from .exceptions import FormatError, InputError, NetworkError, NotFoundError, ReleaseNotesError
from .extractor import DataExtractor
from .generator import ReleaseNotesGenerator
from .grouping import group_pull_requests
from .markdown import MarkdownWriter
from .models import (
    Author,
    KnownIssue,
    Label,
    PullRequestInformation,
    ReleaseNote,
    ReleaseNotesFileConfig,
    ReleaseNotesResult,
    ReleaseNotesStatus,
)

__all__ = [
    "ReleaseNotesError",
    "InputError",
    "NetworkError",
    "NotFoundError",
    "FormatError",
    "Label",
    "Author",
    "PullRequestInformation",
    "KnownIssue",
    "ReleaseNote",
    "ReleaseNotesStatus",
    "ReleaseNotesFileConfig",
    "ReleaseNotesResult",
    "group_pull_requests",
    "DataExtractor",
    "MarkdownWriter",
    "ReleaseNotesGenerator",
]
