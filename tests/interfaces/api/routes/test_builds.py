"""Tests for the build email read endpoints."""

from __future__ import annotations

from app.domain.entities import BuildEmail, User
from app.infrastructure.repositories import BuildEmailRepository, UserRepository


def test_list_and_lookup_build_emails(client, db_session) -> None:
    user = UserRepository(db_session).create(User(id=None, email="jane@example.com"))
    BuildEmailRepository(db_session).save(BuildEmail(user_id=user.id, build_id=3, category=8))

    listing = client.get("/builds/3/emails")
    assert listing.status_code == 200
    [entry] = listing.json()
    assert entry["email"] == "jane@example.com"
    assert entry["category"] == 8
    assert entry["sent"] is True

    found = client.get(f"/builds/3/emails/{user.id}", params={"category": 8})
    assert found.json()["sent"] is True

    missing = client.get(f"/builds/3/emails/{user.id}", params={"category": 1})
    assert missing.status_code == 200
    assert missing.json()["sent"] is False


def test_lookup_requires_category(client) -> None:
    assert client.get("/builds/3/emails/1").status_code == 422
