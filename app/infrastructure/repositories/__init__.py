"""Repository implementations for infrastructure layer."""

from .build_email_repository import BuildEmailRepository
from .user_repository import UserRepository

__all__ = [
    "BuildEmailRepository",
    "UserRepository",
]
