"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_naive_datetime,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
)

__all__ = [
    "ensure_app_naive_datetime",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
]
