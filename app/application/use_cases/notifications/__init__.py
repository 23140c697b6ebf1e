"""Public helpers for recording notification emails."""

from .build_emails import deliver_notification, log_notification, save_notification

__all__ = [
    "deliver_notification",
    "log_notification",
    "save_notification",
]
