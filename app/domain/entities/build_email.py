"""Domain entities recording notification emails sent for builds."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from app.utils import ensure_app_naive_datetime, now_in_app_naive_datetime


@dataclass
class BuildEmail:
    """Record of a notification email sent to a user about a build."""

    user_id: int | None = None
    build_id: int | None = None
    category: int | None = None
    email: str | None = None
    time: datetime | None = None
    sent: bool = False

    REQUIRED_FIELDS = ("build_id", "user_id", "category")

    def missing_fields(self) -> list[str]:
        """Return the names of the required fields that are not set."""

        return [name for name in self.REQUIRED_FIELDS if not getattr(self, name)]

    def stamp(self, time: datetime | None = None) -> "BuildEmail":
        """Set the send time to ``time`` or to the current local time."""

        if time is None:
            self.time = now_in_app_naive_datetime()
        else:
            self.time = ensure_app_naive_datetime(time)
        return self


class BuildEmailCollection:
    """Build emails of a single submission grouped by category."""

    def __init__(self) -> None:
        self._emails: dict[int | None, list[BuildEmail]] = {}

    def add(self, email: BuildEmail) -> "BuildEmailCollection":
        self._emails.setdefault(email.category, []).append(email)
        return self

    def get(self, category: int | None) -> list[BuildEmail]:
        return list(self._emails.get(category, []))

    def categories(self) -> list[int | None]:
        return list(self._emails)

    def all(self) -> list[BuildEmail]:
        return [email for emails in self._emails.values() for email in emails]

    def __iter__(self) -> Iterator[list[BuildEmail]]:
        return iter(list(self._emails.values()))

    def __len__(self) -> int:
        return sum(len(emails) for emails in self._emails.values())


__all__ = ["BuildEmail", "BuildEmailCollection"]
