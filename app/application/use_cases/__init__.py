"""Aggregate application use cases."""

from .github import handle_github_event
from .notifications import deliver_notification, log_notification, save_notification

__all__ = [
    "deliver_notification",
    "handle_github_event",
    "log_notification",
    "save_notification",
]
