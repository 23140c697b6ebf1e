"""Dispatch GitHub webhook events to the repository status updater."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.infrastructure.github import CHECK_NAME, RepositoryStatusUpdater

logger = logging.getLogger(__name__)

EVENT_CHECK_RUN = "check_run"
EVENT_STATUS = "status"


class MissingCommitError(ValueError):
    """Raised when a recognised event does not name the commit it is about."""


def _require_sha(value: Any, event: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MissingCommitError(f"'{event}' event does not include a commit sha")
    return value.strip()


def handle_github_event(
    event: str,
    payload: Mapping[str, Any],
    updater: RepositoryStatusUpdater,
) -> bool:
    """Forward the commit of a ``check_run`` or ``status`` event to ``updater``.

    Returns ``True`` when the updater was called. Activity on our own check
    run is only forwarded when a user asked GitHub to re-run it.
    """

    if event == EVENT_CHECK_RUN:
        check_run = payload.get("check_run") or {}
        if not isinstance(check_run, Mapping):
            check_run = {}
        if check_run.get("name") == CHECK_NAME and payload.get("action") != "rerequested":
            logger.debug("Ignoring activity on our own check run")
            return False
        sha = _require_sha(check_run.get("head_sha"), event)
    elif event == EVENT_STATUS:
        sha = _require_sha(payload.get("sha"), event)
    else:
        logger.debug("Ignoring GitHub event '%s'", event)
        return False

    logger.info("GitHub '%s' event for commit %s; refreshing check", event, sha)
    updater.create_or_update_check(sha)
    return True


__all__ = [
    "EVENT_CHECK_RUN",
    "EVENT_STATUS",
    "MissingCommitError",
    "handle_github_event",
]
