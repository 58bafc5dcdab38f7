"""Group pull requests by their type and component labels."""

from typing import Iterable

import structlog

from ..utils.constants import DEFAULT_GROUP, PREFIX_COMPONENT, PREFIX_TYPE, TYPE_DISPLAY_NAMES
from .models import PullRequestInformation, PullRequestsByType

logger = structlog.get_logger(__name__)


def classify_pull_request(pull_request: PullRequestInformation) -> tuple[str, str]:
    """Return the (type, component) bucket of a pull request.

    The first label with the type prefix and the first label with the
    component prefix win. Missing labels fall back to "Other".
    """
    type_name: str | None = None
    component_name: str | None = None
    for label in pull_request.labels:
        if type_name is None and label.name.startswith(PREFIX_TYPE):
            type_name = label.name[len(PREFIX_TYPE) :].strip()
        elif component_name is None and label.name.startswith(PREFIX_COMPONENT):
            component_name = label.name[len(PREFIX_COMPONENT) :].strip()

    if not type_name:
        type_name = DEFAULT_GROUP
    type_name = TYPE_DISPLAY_NAMES.get(type_name, type_name)
    if not component_name:
        component_name = DEFAULT_GROUP
    return type_name, component_name


def group_pull_requests(pull_requests: Iterable[PullRequestInformation]) -> PullRequestsByType:
    """Partition pull requests into a type -> component -> pull requests mapping."""
    prs_by_type: PullRequestsByType = {}
    for pull_request in pull_requests:
        type_name, component_name = classify_pull_request(pull_request)
        prs_by_type.setdefault(type_name, {}).setdefault(component_name, []).append(pull_request)

    logger.debug(
        "Grouped pull requests",
        types=sorted(prs_by_type),
        pull_request_count=sum(len(prs) for components in prs_by_type.values() for prs in components.values()),
    )
    return prs_by_type
