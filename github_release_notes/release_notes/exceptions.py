"""Contains exceptions raised while generating release notes."""


class ReleaseNotesError(Exception):
    """Base class for all release notes generation errors."""

    pass


class InputError(ReleaseNotesError):
    """Raised when a local input (summary file, version string) is missing or malformed."""

    pass


class NetworkError(ReleaseNotesError):
    """Raised when fetching data from the GitHub API fails."""

    pass


class NotFoundError(NetworkError):
    """Raised when the GitHub API reports that a requested resource does not exist."""

    def __init__(self, resource: str) -> None:
        """Initializes the exception with a description of the missing resource."""
        super().__init__(f"GitHub resource not found: {resource}")
        self.resource = resource


class FormatError(ReleaseNotesError):
    """Raised when a Markdown template cannot be rendered."""

    pass
