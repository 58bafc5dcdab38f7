"""Release version parsing for release notes."""

import structlog
from packaging import version

from ..utils.constants import CHANGELOG_SUB_DIRECTORY, RELEASE_VERSION_PATTERN
from .exceptions import InputError

logger = structlog.get_logger(__name__)


def parse_release_version(release_version: str) -> version.Version:
    """Parse a release version such as 'v12.0.0' or 'v12.0.0-rc1'.

    Raises:
        InputError: If the version does not look like a release version.
    """
    if not RELEASE_VERSION_PATTERN.match(release_version):
        raise InputError(f"Invalid release version '{release_version}', expected the format vX.Y.Z or vX.Y.Z-rcN")
    try:
        parsed = version.parse(release_version)
    except version.InvalidVersion as exc:
        raise InputError(f"Invalid release version '{release_version}': {exc}") from exc
    logger.debug("Parsed release version", release_version=release_version, parsed=str(parsed))
    return parsed


def version_underscore(release_version: str) -> str:
    """Return the release number with underscores (e.g. 'v12.0.0' -> '12_0_0')."""
    parsed = parse_release_version(release_version)
    return "_".join(str(part) for part in parsed.release)


def release_sub_directory(release_version: str) -> str:
    """Return the directory the notes of a release live in (e.g. 'changelog/12.0/12.0.0')."""
    parsed = parse_release_version(release_version)
    return f"{CHANGELOG_SUB_DIRECTORY}/{parsed.major}.0/{parsed.major}.{parsed.minor}.{parsed.micro}"


def major_release(release_identifier: str) -> str:
    """Return the part of a release identifier before the first dot (e.g. 'v12.0.0' -> 'v12')."""
    return release_identifier.split(".", 1)[0]
