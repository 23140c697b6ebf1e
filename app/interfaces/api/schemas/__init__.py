from .build_email import BuildEmailRead
from .github import WebhookResponse

__all__ = [
    "BuildEmailRead",
    "WebhookResponse",
]
