"""Domain entity representing a dashboard user."""

from dataclasses import dataclass


@dataclass
class User:
    """Core attributes describing a user who can receive notifications."""

    id: int | None
    email: str
    first_name: str = ""
    last_name: str = ""
    institution: str = ""
    is_admin: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
