"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_PROJECT_NAME,
    DEFAULT_REPOSITORY,
    PREFIX_COMPONENT,
    PREFIX_KNOWN_ISSUE,
    PREFIX_TYPE,
)
from .log import configure_logging

__all__ = [
    "DEFAULT_PROJECT_NAME",
    "DEFAULT_REPOSITORY",
    "PREFIX_TYPE",
    "PREFIX_COMPONENT",
    "PREFIX_KNOWN_ISSUE",
    "configure_logging",
]
