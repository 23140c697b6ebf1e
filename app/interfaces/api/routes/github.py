"""Endpoint receiving GitHub webhook deliveries."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from starlette.concurrency import run_in_threadpool

from app.application.use_cases.github import (
    EVENT_CHECK_RUN,
    EVENT_STATUS,
    MissingCommitError,
    handle_github_event,
)
from app.infrastructure.github import RepositoryStatusUpdater
from app.interfaces.api.dependencies import get_repository_status_updater
from app.interfaces.api.schemas import WebhookResponse

router = APIRouter(prefix="/api/v1/GitHub", tags=["github"])
logger = logging.getLogger(__name__)

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


async def _read_payload(request: Request) -> dict[str, Any]:
    """Decode a webhook body sent either as JSON or as GitHub's form encoding."""

    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(_FORM_CONTENT_TYPE):
            form = await request.form()
            raw = form.get("payload") or "{}"
            payload = json.loads(raw if isinstance(raw, str) else "{}")
        else:
            body = await request.body()
            payload = json.loads(body) if body.strip() else {}
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Webhook payload is not valid JSON",
        ) from exc

    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Webhook payload must be a JSON object",
        )
    return payload


@router.post("/webhook", response_model=WebhookResponse)
async def github_webhook(
    request: Request,
    x_github_event: str = Header(default=""),
    updater: RepositoryStatusUpdater = Depends(get_repository_status_updater),
) -> WebhookResponse:
    """Refresh the commit check when GitHub reports check run or status activity."""

    if x_github_event not in (EVENT_CHECK_RUN, EVENT_STATUS):
        logger.debug("Ignoring GitHub event '%s'", x_github_event)
        return WebhookResponse(event=x_github_event, dispatched=False)

    payload = await _read_payload(request)
    try:
        dispatched = await run_in_threadpool(
            handle_github_event, x_github_event, payload, updater
        )
    except MissingCommitError as exc:
        logger.warning("Rejected GitHub '%s' delivery: %s", x_github_event, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return WebhookResponse(event=x_github_event, dispatched=dispatched)
