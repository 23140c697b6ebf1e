"""Domain entity representing a composed notification email."""

from __future__ import annotations

from dataclasses import dataclass, field

from .build_email import BuildEmailCollection


@dataclass
class EmailMessage:
    """Notification email ready to be delivered to a single recipient."""

    recipient: str
    subject: str
    body: str
    build_emails: BuildEmailCollection = field(default_factory=BuildEmailCollection)


__all__ = ["EmailMessage"]
