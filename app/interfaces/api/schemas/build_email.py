"""Pydantic models describing build email records."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BuildEmailRead(BaseModel):
    """Representation of a notification email recorded for a build."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int | None = None
    build_id: int | None = None
    category: int | None = None
    email: str | None = None
    time: datetime | None = None
    sent: bool = False


__all__ = ["BuildEmailRead"]
