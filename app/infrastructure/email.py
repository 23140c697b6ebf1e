"""Delivery of notification emails through SendGrid."""

from __future__ import annotations

import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.config import get_settings

logger = logging.getLogger(__name__)


def describe_sendgrid_error(body: Any) -> str | None:
    """Return the error messages carried by a SendGrid response body."""

    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            return body
    if not isinstance(body, dict):
        return None

    messages = [
        str(item["message"])
        for item in body.get("errors") or []
        if isinstance(item, dict) and item.get("message")
    ]
    return "; ".join(messages) or None


def _log_failure(status_code: Any, body: Any) -> None:
    details = describe_sendgrid_error(body)
    if details:
        logger.error("SendGrid request failed with status %s: %s", status_code, details)
    else:
        logger.error("SendGrid request failed with status %s", status_code)


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials.

    Returns ``False`` without raising when email is not configured or the
    SendGrid API rejects the message.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        response = SendGridAPIClient(settings.sendgrid_api_key).send(message)
    except Exception as exc:
        _log_failure(getattr(exc, "status_code", None), getattr(exc, "body", None))
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_failure(status_code, getattr(response, "body", None))
        return False
    return True


__all__ = ["describe_sendgrid_error", "send_email"]
