"""Helpers for stamping records in the configured timezone."""

from __future__ import annotations

from datetime import datetime, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "UTC"


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone named by ``APP_TIMEZONE``.

    Unknown names fall back to UTC.
    """

    tz_name = (get_settings().app_timezone or "").strip() or _DEFAULT_TIMEZONE
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo(_DEFAULT_TIMEZONE)


def now_in_app_timezone() -> datetime:
    """Return the current time localized to the configured timezone."""

    return datetime.now(tz=get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` in the app timezone, without ``tzinfo``, to the second.

    Naive values are assumed to already be local to the app timezone.
    """

    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(get_app_timezone()).replace(tzinfo=None)
    return value.replace(microsecond=0)


def now_in_app_naive_datetime() -> datetime:
    """Return the current local time as stored in ``DATETIME`` columns."""

    localized = ensure_app_naive_datetime(now_in_app_timezone())
    if localized is None:
        msg = "Failed to compute the application naive datetime"
        raise RuntimeError(msg)
    return localized
