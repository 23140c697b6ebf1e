"""ORM models used by the application infrastructure."""

from .build_email import BuildEmailModel
from .user import UserModel

__all__ = [
    "BuildEmailModel",
    "UserModel",
]
