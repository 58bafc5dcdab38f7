"""Load the hand-written release summary used as the announcement."""

from pathlib import Path

import structlog

from .exceptions import InputError

logger = structlog.get_logger(__name__)


def read_release_summary(summary_path: Path | str | None) -> str:
    """Return the content of the summary file verbatim, or an empty string when no file is given.

    Raises:
        InputError: If the file cannot be read or is not valid UTF-8.
    """
    if not summary_path:
        return ""
    path = Path(summary_path)
    try:
        content = path.read_bytes().decode("utf-8")
    except FileNotFoundError as exc:
        raise InputError(f"Release summary file not found: {path.absolute()}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Unable to read release summary file {path.absolute()}: {exc}") from exc
    logger.debug("Loaded release summary", path=str(path), length=len(content))
    return content
