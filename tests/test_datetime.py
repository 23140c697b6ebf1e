"""Tests for the timestamp helpers used when recording build emails."""

from datetime import datetime, timedelta, timezone

import pytest

from app.utils import datetime as datetime_utils


def test_naive_datetime_is_converted_and_truncated() -> None:
    value = datetime(2024, 5, 1, 12, 30, 15, 999, tzinfo=timezone(timedelta(hours=2)))

    assert datetime_utils.ensure_app_naive_datetime(value) == datetime(2024, 5, 1, 10, 30, 15)


def test_now_raises_when_the_time_cannot_be_localized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(datetime_utils, "ensure_app_naive_datetime", lambda value: None)

    with pytest.raises(RuntimeError, match="naive datetime"):
        datetime_utils.now_in_app_naive_datetime()
