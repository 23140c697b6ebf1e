"""Handling of events delivered by GitHub webhooks."""

from .webhook import EVENT_CHECK_RUN, EVENT_STATUS, MissingCommitError, handle_github_event

__all__ = ["EVENT_CHECK_RUN", "EVENT_STATUS", "MissingCommitError", "handle_github_event"]
