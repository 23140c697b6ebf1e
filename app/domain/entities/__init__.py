"""Domain entities exposed by the application."""

from .build_email import BuildEmail, BuildEmailCollection
from .email_message import EmailMessage
from .user import User

__all__ = [
    "BuildEmail",
    "BuildEmailCollection",
    "EmailMessage",
    "User",
]
