"""Defines the Command Line Interface (CLI) using Typer."""

from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from github_release_notes.configuration.env import settings
from github_release_notes.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from github_release_notes.configuration.models import GitHubConfig
from github_release_notes.configuration.reconcile import reconcile_github_configuration
from github_release_notes.github.adapter import GitHubAdapter
from github_release_notes.release_notes.exceptions import ReleaseNotesError
from github_release_notes.release_notes.extractor import DataExtractor
from github_release_notes.release_notes.generator import ReleaseNotesGenerator
from github_release_notes.release_notes.markdown import MarkdownWriter
from github_release_notes.release_notes.models import ReleaseNotesFileConfig, ReleaseNotesStatus
from github_release_notes.release_notes.version import parse_release_version
from github_release_notes.utils.log import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Generate release notes and changelogs from merged pull requests.")


def repo_callback(
    ctx: typer.Context,
    repo: Annotated[str, Option(envvar="REPO", help="Repository name (owner/repo).")] = settings.REPO,
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = settings.GITHUB_API_URL,
    github_pat_token: Annotated[str | None, Option(envvar="GITHUB_PAT_TOKEN", help="GitHub Personal Access Token.")] = settings.GITHUB_PAT_TOKEN,
    github_app_id: Annotated[int | None, Option(envvar="GITHUB_APP_ID", help="GitHub App ID.")] = settings.GITHUB_APP_ID,
    github_app_private_key_path: Annotated[
        Path | None, Option(envvar="GITHUB_APP_PRIVATE_KEY_PATH", help="Path to GitHub App private key.")
    ] = settings.GITHUB_APP_PRIVATE_KEY_PATH,
    github_app_installation_id: Annotated[
        int | None, Option(envvar="GITHUB_APP_INSTALLATION_ID", help="GitHub App Installation ID.")
    ] = settings.GITHUB_APP_INSTALLATION_ID,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = settings.DEBUG,
) -> None:
    """Set the repository and GitHub credentials for the current context."""
    configure_logging(debug=debug)
    ctx.ensure_object(dict)
    ctx.obj["repo"] = repo
    ctx.obj["github_api_url"] = github_api_url
    ctx.obj["github_pat_token"] = github_pat_token
    ctx.obj["github_app_id"] = github_app_id
    ctx.obj["github_app_private_key_path"] = github_app_private_key_path
    ctx.obj["github_app_installation_id"] = github_app_installation_id


typer_app.callback()(repo_callback)


def get_github_config(ctx: typer.Context) -> GitHubConfig:
    """Reconcile the GitHub settings stored on the context, exiting on invalid authentication settings."""
    try:
        return reconcile_github_configuration(
            repo=ctx.obj["repo"],
            github_api_url=ctx.obj["github_api_url"],
            github_pat_token=ctx.obj["github_pat_token"],
            github_app_id=ctx.obj["github_app_id"],
            github_app_private_key_path=ctx.obj["github_app_private_key_path"],
            github_app_installation_id=ctx.obj["github_app_installation_id"],
        )
    except GitHubAuthenticationConfigurationUndefinedError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def build_extractor(github_config: GitHubConfig) -> DataExtractor:
    """Create a data extractor reading from the configured repository."""
    try:
        adapter = GitHubAdapter.create(github_config)
    except (ValueError, GitHubAuthenticationConfigurationUndefinedError) as exc:
        typer.echo(f"Unable to create GitHub client: {exc}", err=True)
        raise typer.Exit(1) from exc
    return DataExtractor(adapter)


@typer_app.command(name="generate")
def generate_cli(
    ctx: typer.Context,
    version: Annotated[str, Option("--version", envvar="RELEASE_VERSION", help="Version being released, e.g. v12.0.0.")],
    from_ref: Annotated[str, Option("--from", help="Git reference of the previous release (tag, branch or SHA).")],
    to_ref: Annotated[str, Option("--to", help="Git reference of the release being documented.")],
    summary: Annotated[Path | None, Option("--summary", help="Markdown file used verbatim as the release announcement.")] = None,
    output_directory: Annotated[
        Path, Option("--output-dir", envvar="OUTPUT_DIRECTORY", help="Directory the changelog/<major>.0/<version> tree is written under.")
    ] = settings.OUTPUT_DIRECTORY,
    project_name: Annotated[str, Option(envvar="PROJECT_NAME", help="Project name used in the document titles.")] = settings.PROJECT_NAME,
    dry_run: Annotated[bool, Option("--dry-run", help="Print the release notes instead of writing files.")] = False,
) -> None:
    """Generate the release notes and changelog of a release."""
    github_config = get_github_config(ctx)

    try:
        parse_release_version(version)
    except ReleaseNotesError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    typer.echo(f"Generating release notes for {project_name} {version} ({from_ref}...{to_ref}) from {github_config.repo}")

    generator = ReleaseNotesGenerator(
        extractor=build_extractor(github_config),
        writer=MarkdownWriter(repository=github_config.repo),
        file_config=ReleaseNotesFileConfig(output_directory=str(output_directory)),
        project_name=project_name,
    )
    result = generator.generate(version=version, from_ref=from_ref, to_ref=to_ref, summary_path=summary, dry_run=dry_run)

    if result.status == ReleaseNotesStatus.ERROR:
        typer.echo(f"Failed to generate release notes: {result.error}", err=True)
        raise typer.Exit(1)

    if result.status == ReleaseNotesStatus.DRY_RUN:
        typer.echo(result.generated_content or "")
        if result.generated_changelog:
            typer.echo(result.generated_changelog)
        return

    typer.echo(f"Release notes written to {result.release_notes_path}")
    if result.changelog_path:
        typer.echo(f"Changelog written to {result.changelog_path}")
    else:
        typer.echo("No pull requests found - no changelog written")


@typer_app.command(name="known-issues")
def known_issues_cli(
    ctx: typer.Context,
    release: Annotated[str, Option("--version", envvar="RELEASE_VERSION", help="Release whose known issues are listed, e.g. v12.0.0.")],
) -> None:
    """Print the known issues of a release as Markdown bullets."""
    github_config = get_github_config(ctx)
    extractor = build_extractor(github_config)
    try:
        known_issues = extractor.load_known_issues(release)
        rendered = MarkdownWriter(repository=github_config.repo).render_known_issues(known_issues)
    except ReleaseNotesError as exc:
        typer.echo(f"Failed to load known issues: {exc}", err=True)
        raise typer.Exit(1) from exc

    if not known_issues:
        typer.echo(f"No known issues for {release}")
        return
    typer.echo(rendered, nl=False)


if __name__ == "__main__":
    typer_app()
