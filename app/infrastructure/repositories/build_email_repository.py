"""Persistence helpers for build email records."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import BuildEmail, BuildEmailCollection
from app.infrastructure.models import BuildEmailModel, UserModel

logger = logging.getLogger(__name__)


class BuildEmailRepository:
    """Record and look up the notification emails sent for builds.

    Records are append-only. Database failures are logged and reported to the
    caller as ``False`` or as an empty result, never raised.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def save(self, build_email: BuildEmail) -> bool:
        """Insert ``build_email`` when all of its required fields are set."""

        missing = build_email.missing_fields()
        if missing:
            logger.warning(
                "Missing: %s; cannot save BuildEmail for %s.",
                ", ".join(missing),
                build_email.email,
            )
            return False

        build_email.stamp()
        model = BuildEmailModel(
            userid=build_email.user_id,
            buildid=build_email.build_id,
            category=build_email.category,
            time=build_email.time,
        )
        try:
            self.session.add(model)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(
                "Failed to save BuildEmail for user %s on build %s: %s",
                build_email.user_id,
                build_email.build_id,
                exc,
            )
            return False
        return True

    def get_for_user(self, user_id: int, build_id: int, category: int) -> BuildEmail:
        """Return the record of an email already sent to ``user_id``.

        The returned entity has ``sent`` set to ``False`` when no such email
        was recorded.
        """

        try:
            model = (
                self.session.query(BuildEmailModel)
                .filter(BuildEmailModel.userid == user_id)
                .filter(BuildEmailModel.buildid == build_id)
                .filter(BuildEmailModel.category == category)
                .order_by(BuildEmailModel.id)
                .first()
            )
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Failed to look up BuildEmail for user %s: %s", user_id, exc)
            model = None

        if model is None:
            return BuildEmail()
        return BuildEmail(
            user_id=user_id,
            build_id=build_id,
            category=category,
            time=model.time,
            sent=True,
        )

    def list_sent_for_build(self, build_id: int) -> BuildEmailCollection:
        """Return every email sent for ``build_id`` with its recipient address."""

        collection = BuildEmailCollection()
        try:
            rows = (
                self.session.query(BuildEmailModel, UserModel.email)
                .join(UserModel, UserModel.id == BuildEmailModel.userid)
                .filter(BuildEmailModel.buildid == build_id)
                .order_by(BuildEmailModel.id)
                .all()
            )
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Failed to list BuildEmails for build %s: %s", build_id, exc)
            return collection

        for model, email in rows:
            collection.add(
                BuildEmail(
                    user_id=model.userid,
                    build_id=build_id,
                    category=model.category,
                    email=email,
                    time=model.time,
                    sent=True,
                )
            )
        return collection


__all__ = ["BuildEmailRepository"]
