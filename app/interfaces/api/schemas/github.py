"""Pydantic models for the GitHub webhook endpoint."""

from pydantic import BaseModel, Field


class WebhookResponse(BaseModel):
    """Outcome of a webhook delivery."""

    event: str = Field(..., description="Value of the X-GitHub-Event header")
    dispatched: bool = Field(..., description="Whether the commit check was refreshed")


__all__ = ["WebhookResponse"]
