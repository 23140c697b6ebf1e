"""Tests for the GitHub webhook endpoint."""

from __future__ import annotations

import json

import pytest

WEBHOOK_URL = "/api/v1/GitHub/webhook"
SHA = "0c3a7b1f9e6d4c2b8a0f1e3d5c7b9a1f2e4d6c8b"


def _deliver(client, event: str | None, payload) -> object:
    headers = {"X-GitHub-Event": event} if event is not None else {}
    return client.post(WEBHOOK_URL, json=payload, headers=headers)


def test_status_event_refreshes_the_commit_check(client, updater) -> None:
    response = _deliver(client, "status", {"sha": SHA, "state": "success"})

    assert response.status_code == 200
    assert response.json() == {"event": "status", "dispatched": True}
    assert updater.calls == [SHA]


def test_own_check_run_activity_is_ignored(client, updater) -> None:
    payload = {"action": "completed", "check_run": {"name": "CDash", "head_sha": SHA}}

    response = _deliver(client, "check_run", payload)

    assert response.status_code == 200
    assert response.json()["dispatched"] is False
    assert updater.calls == []


def test_rerequested_own_check_run_is_forwarded(client, updater) -> None:
    payload = {"action": "rerequested", "check_run": {"name": "CDash", "head_sha": SHA}}

    response = _deliver(client, "check_run", payload)

    assert response.json()["dispatched"] is True
    assert updater.calls == [SHA]


@pytest.mark.parametrize("action", ["created", "completed", "rerequested"])
def test_check_runs_of_other_apps_are_forwarded(client, updater, action) -> None:
    payload = {"action": action, "check_run": {"name": "Travis CI", "head_sha": SHA}}

    _deliver(client, "check_run", payload)

    assert updater.calls == [SHA]


@pytest.mark.parametrize("event", ["push", "pull_request", "", None])
def test_other_events_are_ignored(client, updater, event) -> None:
    response = _deliver(client, event, {"sha": SHA})

    assert response.status_code == 200
    assert response.json() == {"event": event or "", "dispatched": False}
    assert updater.calls == []


def test_form_encoded_delivery_is_accepted(client, updater) -> None:
    response = client.post(
        WEBHOOK_URL,
        data={"payload": json.dumps({"sha": SHA})},
        headers={"X-GitHub-Event": "status"},
    )

    assert response.status_code == 200
    assert updater.calls == [SHA]


def test_status_without_sha_is_rejected(client, updater) -> None:
    response = _deliver(client, "status", {"state": "pending"})

    assert response.status_code == 400
    assert updater.calls == []


def test_invalid_json_is_rejected(client, updater) -> None:
    response = client.post(
        WEBHOOK_URL,
        content=b"{not json",
        headers={"X-GitHub-Event": "status", "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert updater.calls == []


def test_unhandled_event_ignores_unparseable_body(client, updater) -> None:
    response = client.post(
        WEBHOOK_URL,
        content=b"not json",
        headers={"X-GitHub-Event": "ping", "Content-Type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json() == {"event": "ping", "dispatched": False}
    assert updater.calls == []
