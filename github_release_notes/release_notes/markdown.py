"""Markdown rendering for release notes and changelogs."""

from typing import Iterable, Sequence, TextIO

import jinja2
import structlog

from ..utils.constants import DEFAULT_REPOSITORY
from ..utils.github import repository_web_url
from ..utils.templates import (
    construct_jinja2_environment,
    construct_jinja2_template_from_string,
    render_template_with_context,
)
from .exceptions import FormatError
from .grouping import group_pull_requests
from .models import KnownIssue, PullRequestInformation, PullRequestsByType, ReleaseNote

logger = structlog.get_logger(__name__)

RELEASE_NOTES_TEMPLATE = """# Release of {{ project_name }} {{ version }}
{% if announcement %}
{{ announcement }}
{% endif %}
{% if announcement and (known_issues or changelog) %}
------------
{% endif %}
{% if known_issues %}
## Known Issues
{{ known_issues }}
{% endif %}
{% if changelog %}
The entire changelog for this release can be found [here]({{ changelog_url }}).
{{ change_metrics }}
{% endif %}
"""

CHANGELOG_TEMPLATE = """# Changelog of {{ project_name }} {{ version }}
{{ changelog }}
"""

PULL_REQUESTS_TEMPLATE = """{% for type_name, prs_by_component in prs_by_type %}
### {{ type_name }}
{% for component_name, pull_requests in prs_by_component %}
#### {{ component_name }}
{% for pull_request in pull_requests %}
 * {{ pull_request.title }} [#{{ pull_request.number }}]({{ repository_url }}/pull/{{ pull_request.number }})
{% endfor %}
{% endfor %}
{% endfor %}
"""

# Each line keeps a trailing space after the issue number.
KNOWN_ISSUES_TEMPLATE = "{% for issue in known_issues %}\n * {{ issue.title }} #{{ issue.number }} \n{% endfor %}\n"


class MarkdownWriter:
    """Renders grouped pull requests, known issues and release notes as Markdown."""

    def __init__(self, repository: str = DEFAULT_REPOSITORY) -> None:
        """Initialize with the repository the pull request links point to."""
        self.repository = repository
        environment = construct_jinja2_environment()
        self.release_notes_template = construct_jinja2_template_from_string(RELEASE_NOTES_TEMPLATE, environment)
        self.changelog_template = construct_jinja2_template_from_string(CHANGELOG_TEMPLATE, environment)
        self.pull_requests_template = construct_jinja2_template_from_string(PULL_REQUESTS_TEMPLATE, environment)
        self.known_issues_template = construct_jinja2_template_from_string(KNOWN_ISSUES_TEMPLATE, environment)

    def _render(self, template: jinja2.Template, what: str, **context: object) -> str:
        try:
            return render_template_with_context(template, **context)
        except jinja2.TemplateError as exc:
            raise FormatError(f"Failed to render {what}: {exc}") from exc

    def render_pull_requests(self, prs_by_type: PullRequestsByType) -> str:
        """Render grouped pull requests with type and component headings sorted alphabetically."""
        sorted_groups = [
            (type_name, sorted(prs_by_component.items()))
            for type_name, prs_by_component in sorted(prs_by_type.items())
        ]
        return self._render(
            self.pull_requests_template,
            "pull requests",
            prs_by_type=sorted_groups,
            repository_url=repository_web_url(self.repository),
        )

    def render_known_issues(self, known_issues: Sequence[KnownIssue]) -> str:
        """Render one bullet per known issue, keeping the given order."""
        return self._render(self.known_issues_template, "known issues", known_issues=known_issues)

    def group_and_render_pull_requests(self, pull_requests: Iterable[PullRequestInformation]) -> str:
        """Group pull requests by type and component, then render them."""
        return self.render_pull_requests(group_pull_requests(pull_requests))

    def render_release_notes(self, release_note: ReleaseNote) -> str:
        """Render the release notes document."""
        return self._render(
            self.release_notes_template,
            "release notes",
            project_name=release_note.project_name,
            version=release_note.version,
            announcement=release_note.announcement,
            known_issues=release_note.known_issues,
            changelog=release_note.changelog,
            change_metrics=release_note.change_metrics,
            changelog_url=release_note.changelog_url,
        )

    def render_changelog(self, release_note: ReleaseNote) -> str:
        """Render the changelog document."""
        return self._render(
            self.changelog_template,
            "changelog",
            project_name=release_note.project_name,
            version=release_note.version,
            changelog=release_note.changelog,
        )

    def write_release_note(self, release_note: ReleaseNote, release_notes_sink: TextIO, changelog_sink: TextIO) -> None:
        """Write the release notes, and the changelog when there is one, to the given sinks."""
        release_notes_sink.write(self.render_release_notes(release_note))
        if release_note.changelog:
            changelog_sink.write(self.render_changelog(release_note))
        logger.info("Wrote release notes", version=release_note.version, has_changelog=bool(release_note.changelog))
