"""Main release notes generation orchestration."""

import io
from pathlib import Path

import structlog

from ..utils.constants import DEFAULT_PROJECT_NAME
from .exceptions import ReleaseNotesError
from .extractor import DataExtractor
from .markdown import MarkdownWriter
from .metrics import compute_change_metrics
from .models import (
    ReleaseNote,
    ReleaseNotesFileConfig,
    ReleaseNotesResult,
    ReleaseNotesStatus,
)
from .summary import read_release_summary
from .version import release_sub_directory, version_underscore

logger = structlog.get_logger(__name__)


class ReleaseNotesGenerator:
    """Orchestrates release notes generation.

    Collects the pull requests merged between two git references and the
    known issues of the release, renders them with a MarkdownWriter and
    writes the release notes and changelog below the release's
    sub-directory (e.g. changelog/12.0/12.0.0).
    """

    def __init__(
        self,
        extractor: DataExtractor,
        writer: MarkdownWriter,
        file_config: ReleaseNotesFileConfig,
        project_name: str = DEFAULT_PROJECT_NAME,
    ) -> None:
        """Initialize with a data extractor, a Markdown writer and the output file layout."""
        self.extractor = extractor
        self.writer = writer
        self.file_config = file_config
        self.project_name = project_name

    def build_release_note(self, version: str, from_ref: str, to_ref: str, summary_path: Path | str | None = None) -> ReleaseNote:
        """Collect every input of a release and assemble its ReleaseNote."""
        sub_dir_path = release_sub_directory(version)
        announcement = read_release_summary(summary_path)

        known_issues = self.extractor.load_known_issues(version)
        pull_requests = self.extractor.load_pull_requests(from_ref, to_ref)
        logger.info("Collected release inputs", version=version, pull_requests=len(pull_requests), known_issues=len(known_issues))

        changelog = self.writer.group_and_render_pull_requests(pull_requests)
        return ReleaseNote(
            version=version,
            version_underscore=version_underscore(version),
            announcement=announcement,
            known_issues=self.writer.render_known_issues(known_issues),
            changelog=changelog,
            change_metrics=compute_change_metrics(pull_requests) if pull_requests else "",
            sub_dir_path=sub_dir_path,
            project_name=self.project_name,
            repository=self.writer.repository,
        )

    def render_documents(self, release_note: ReleaseNote) -> tuple[str, str]:
        """Render the release notes and the changelog, which is empty when there are no pull requests."""
        release_notes_buffer = io.StringIO()
        changelog_buffer = io.StringIO()
        self.writer.write_release_note(release_note, release_notes_buffer, changelog_buffer)
        return release_notes_buffer.getvalue(), changelog_buffer.getvalue()

    def write_files(self, release_note: ReleaseNote) -> tuple[Path, Path | None]:
        """Write the release notes, and the changelog when there is one, to disk."""
        release_notes, changelog = self.render_documents(release_note)

        directory = Path(self.file_config.output_directory) / release_note.sub_dir_path
        directory.mkdir(parents=True, exist_ok=True)

        release_notes_path = directory / self.file_config.release_notes_file_name
        release_notes_path.write_text(release_notes, encoding="utf-8", newline="")
        logger.info("Wrote release notes file", path=str(release_notes_path))

        changelog_path: Path | None = None
        if changelog:
            changelog_path = directory / self.file_config.changelog_file_name
            changelog_path.write_text(changelog, encoding="utf-8", newline="")
            logger.info("Wrote changelog file", path=str(changelog_path))
        return release_notes_path, changelog_path

    def generate(
        self,
        version: str,
        from_ref: str,
        to_ref: str,
        summary_path: Path | str | None = None,
        dry_run: bool = False,
    ) -> ReleaseNotesResult:
        """Generate the release notes of a release.

        Args:
            version: Release version, e.g. v12.0.0
            from_ref: Git reference of the previous release
            to_ref: Git reference of the release being documented
            summary_path: Optional Markdown file used verbatim as the announcement
            dry_run: If True, render both documents without writing any file

        Returns:
            Result of the generation process
        """
        try:
            release_note = self.build_release_note(version, from_ref, to_ref, summary_path)

            if dry_run:
                logger.info("Dry run mode - not writing files", version=version)
                release_notes, changelog = self.render_documents(release_note)
                return ReleaseNotesResult(
                    status=ReleaseNotesStatus.DRY_RUN,
                    version=version,
                    generated_content=release_notes,
                    generated_changelog=changelog or None,
                )

            release_notes_path, changelog_path = self.write_files(release_note)
            return ReleaseNotesResult(
                status=ReleaseNotesStatus.SUCCESS,
                version=version,
                release_notes_path=str(release_notes_path),
                changelog_path=str(changelog_path) if changelog_path else None,
            )

        except (ReleaseNotesError, OSError) as e:
            logger.error("Failed to generate release notes", version=version, error=str(e))
            logger.debug("Release notes generation traceback", exc_info=True)
            return ReleaseNotesResult(
                status=ReleaseNotesStatus.ERROR,
                version=version,
                error=str(e),
            )
