"""Record and log the notification emails sent for builds."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import EmailMessage
from app.infrastructure.email import send_email
from app.infrastructure.repositories import BuildEmailRepository

logger = logging.getLogger(__name__)


def save_notification(session: Session, message: EmailMessage) -> int:
    """Save every build email covered by ``message``.

    Returns the number of records written; incomplete records are skipped.
    """

    repository = BuildEmailRepository(session)
    saved = 0
    for emails in message.build_emails:
        for email in emails:
            if repository.save(email):
                saved += 1
    return saved


def log_notification(message: EmailMessage, sent: bool) -> None:
    """Log the delivery status of ``message``.

    In debug mode the whole message is logged so tests can inspect it.
    """

    if get_settings().debug:
        logger.debug("TESTING: EMAIL %s", message.recipient)
        logger.debug("TESTING: EMAILTITLE %s", message.subject)
        logger.debug("TESTING: EMAILBODY %s", message.body)
        return

    status = "SENT" if sent else "NOT SENT"
    logger.info(
        "[%s] %s titled, '%s' to %s",
        status,
        type(message).__name__,
        message.subject,
        message.recipient,
    )


def deliver_notification(session: Session, message: EmailMessage) -> bool:
    """Send ``message`` and record its build emails when delivery succeeds."""

    sent = send_email(message.subject, message.body, message.recipient)
    log_notification(message, sent)
    if sent:
        for emails in message.build_emails:
            for email in emails:
                email.email = email.email or message.recipient
        save_notification(session, message)
    return sent


__all__ = ["deliver_notification", "log_notification", "save_notification"]
