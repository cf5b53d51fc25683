"""
Message envelope and response models for WhatsApp messaging.

The request envelope wraps one content object keyed by its message type:
``{"messaging_product": "whatsapp", "to": ..., "type": "text", "text": {...}}``.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .message_models import (
    ContactObject,
    InteractiveObject,
    LocationObject,
    MediaObject,
    ReactionObject,
    TemplateObject,
    TextObject,
)


class MessageType(str, Enum):
    """Outbound message types."""

    TEMPLATE = "template"
    TEXT = "text"
    VIDEO = "video"
    IMAGE = "image"
    AUDIO = "audio"
    DOCUMENT = "document"
    CONTACTS = "contacts"
    INTERACTIVE = "interactive"
    LOCATION = "location"
    REACTION = "reaction"
    STICKER = "sticker"


# Content model accepted for each message type
CONTENT_MODELS: dict[MessageType, type[BaseModel]] = {
    MessageType.TEMPLATE: TemplateObject,
    MessageType.TEXT: TextObject,
    MessageType.VIDEO: MediaObject,
    MessageType.IMAGE: MediaObject,
    MessageType.AUDIO: MediaObject,
    MessageType.DOCUMENT: MediaObject,
    MessageType.CONTACTS: ContactObject,
    MessageType.INTERACTIVE: InteractiveObject,
    MessageType.LOCATION: LocationObject,
    MessageType.REACTION: ReactionObject,
    MessageType.STICKER: MediaObject,
}


class MessageContext(BaseModel):
    message_id: str = Field(..., min_length=1, description="Message being replied to")


class MessageRequest(BaseModel):
    """
    Outbound message envelope.

    ``content`` must match ``type``: ``MediaObject`` for media types, a
    non-empty list of ``ContactObject`` for contacts, and the matching object
    otherwise. ``to_payload()`` produces the wire body.
    """

    model_config = ConfigDict(extra="forbid")

    to: str = Field(..., min_length=1, description="Recipient WhatsApp ID or phone")
    type: MessageType
    content: Any
    messaging_product: Literal["whatsapp"] = "whatsapp"
    recipient_type: Literal["individual"] = "individual"
    context: MessageContext | None = None
    biz_opaque_callback_data: str | None = Field(None, max_length=512)

    @model_validator(mode="after")
    def validate_content(self):
        expected = CONTENT_MODELS[self.type]

        if self.type is MessageType.CONTACTS:
            if not isinstance(self.content, list) or not self.content:
                raise ValueError("Contacts messages require a non-empty list of contacts")
            items = self.content
        else:
            items = [self.content]

        # Plain dicts are accepted and validated into the expected model
        validated = []
        for item in items:
            if isinstance(item, dict):
                item = expected.model_validate(item)
            if not isinstance(item, expected):
                raise ValueError(
                    f"Message type '{self.type.value}' requires {expected.__name__}, "
                    f"got {type(item).__name__}"
                )
            validated.append(item)

        self.content = validated if self.type is MessageType.CONTACTS else validated[0]
        return self

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the Graph API request body."""
        if isinstance(self.content, list):
            content = [
                item.model_dump(mode="json", exclude_none=True) for item in self.content
            ]
        else:
            content = self.content.model_dump(mode="json", exclude_none=True)

        payload: dict[str, Any] = {
            "messaging_product": self.messaging_product,
            "recipient_type": self.recipient_type,
            "to": self.to,
            "type": self.type.value,
            self.type.value: content,
        }
        if self.context:
            payload["context"] = self.context.model_dump()
        if self.biz_opaque_callback_data is not None:
            payload["biz_opaque_callback_data"] = self.biz_opaque_callback_data
        return payload


class ReadReceipt(BaseModel):
    """Marks an inbound message as read."""

    message_id: str = Field(..., min_length=1)
    messaging_product: Literal["whatsapp"] = "whatsapp"
    status: Literal["read"] = "read"


class ResponseContact(BaseModel):
    input: str
    wa_id: str


class ResponseMessage(BaseModel):
    id: str
    message_status: Literal["accepted", "held_for_quality_assessment"] | None = None


class MessageResponse(BaseModel):
    """Successful send response."""

    model_config = ConfigDict(extra="allow")

    messaging_product: Literal["whatsapp"] = "whatsapp"
    contacts: list[ResponseContact] = Field(default_factory=list)
    messages: list[ResponseMessage] = Field(default_factory=list)

    @property
    def message_id(self) -> str | None:
        """ID of the sent message, when the API returned one."""
        return self.messages[0].id if self.messages else None


class SuccessResponse(BaseModel):
    """``{"success": true}`` response of read receipts and template writes."""

    model_config = ConfigDict(extra="allow")

    success: bool
