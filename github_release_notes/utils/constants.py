"""Shared constants used across the application."""

# This file is intended to hold shared constants.

import re

# Project Constants
# -----------------

DEFAULT_PROJECT_NAME = "Vitess"
"""Project name used in the release notes and changelog titles."""

DEFAULT_REPOSITORY = "vitessio/vitess"
"""Repository (owner/repo) the pull request and changelog links point to."""

GITHUB_WEB_URL = "https://github.com"
"""Base URL for links rendered into the Markdown output."""

# Label Constants
# ---------------

PREFIX_TYPE = "Type: "
"""Prefix of labels that classify the functional type of a pull request."""

PREFIX_COMPONENT = "Component: "
"""Prefix of labels that classify the component affected by a pull request."""

PREFIX_KNOWN_ISSUE = "Known issue: "
"""Prefix of labels that tag an open issue as known for a major release (e.g. 'Known issue: v12')."""

DEFAULT_GROUP = "Other"
"""Bucket used when a pull request has no type or component label."""

TYPE_DISPLAY_NAMES = {
    "Bug": "Bug fixes",
}
"""Headings shown for type labels whose display name differs from the label."""

# Regex Patterns
# --------------

MERGED_PR_PATTERN = re.compile(r"^Merge pull request #(\d+)|\(#(\d+)\)\s*$", re.MULTILINE)
"""Pattern to match PR numbers in merge and squash commit summary lines."""

RELEASE_VERSION_PATTERN = re.compile(r"^v(\d+)\.(\d+)\.(\d+)(?:-rc\.?(\d+))?$")
"""Pattern a release version must match (e.g. v12.0.0 or v12.0.0-rc1)."""

# Default File Settings
# ---------------------

DEFAULT_OUTPUT_DIRECTORY = "."
"""Directory under which the changelog sub-directory is created."""

RELEASE_NOTES_FILE_NAME = "release_notes.md"
"""File name of the rendered release notes."""

CHANGELOG_FILE_NAME = "changelog.md"
"""File name of the rendered changelog."""

CHANGELOG_SUB_DIRECTORY = "changelog"
"""Top-level directory holding the per-release notes (changelog/<major>.0/<version>)."""

DEFAULT_BRANCH = "main"
"""Branch the changelog link in the release notes points to."""
