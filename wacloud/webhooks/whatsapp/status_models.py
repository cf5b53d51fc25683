"""
Message status models for WhatsApp webhooks.

Status updates report delivery progress (sent, delivered, read, failed) of
messages sent by the business, together with conversation and pricing data.
"""

from enum import Enum

from pydantic import Field

from wacloud.webhooks.whatsapp.base_models import WebhookError, WebhookModel


class MessageStatus(str, Enum):
    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    FAILED = "failed"
    DELETED = "deleted"


class ConversationOrigin(WebhookModel):
    type: str = Field(
        ...,
        description=(
            "Conversation category: authentication, marketing, utility, "
            "service or referral_conversion"
        ),
    )


class StatusConversation(WebhookModel):
    id: str
    origin: ConversationOrigin | None = None
    expiration_timestamp: str | None = None


class StatusPricing(WebhookModel):
    billable: bool | None = None
    pricing_model: str = Field("CBP", description="Conversation-based pricing")
    category: str


class WebhookStatus(WebhookModel):
    """Status update for a message sent by the business."""

    id: str = Field(..., description="ID of the message the status is for")
    status: str
    timestamp: str
    recipient_id: str
    biz_opaque_callback_data: str | None = None
    conversation: StatusConversation | None = None
    pricing: StatusPricing | None = None
    errors: list[WebhookError] | None = None

    @property
    def is_failed(self) -> bool:
        return self.status == MessageStatus.FAILED.value
