"""WhatsApp webhook models, payload parsing and the verification handshake."""

from .base_models import (
    ContactProfile,
    WebhookContact,
    WebhookError,
    WebhookErrorData,
    WebhookMetadata,
)
from .message_models import InboundMessageType, WebhookMessage
from .status_models import MessageStatus, WebhookStatus
from .verification import WebhookVerificationRequest, verify_webhook
from .webhook_container import (
    WebhookChange,
    WebhookEntry,
    WebhookPayload,
    WebhookValue,
)

__all__ = [
    "ContactProfile",
    "InboundMessageType",
    "MessageStatus",
    "WebhookChange",
    "WebhookContact",
    "WebhookEntry",
    "WebhookError",
    "WebhookErrorData",
    "WebhookMessage",
    "WebhookMetadata",
    "WebhookPayload",
    "WebhookStatus",
    "WebhookValue",
    "WebhookVerificationRequest",
    "verify_webhook",
]
