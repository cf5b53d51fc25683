"""
Base models for WhatsApp Business Platform webhooks.

Common Pydantic models shared by message, status and template webhooks:
metadata, contact information and error objects. Unknown keys are kept
(``extra="allow"``) so payloads with newer Graph API fields still parse.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WebhookModel(BaseModel):
    """Base for inbound webhook models."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class WebhookMetadata(WebhookModel):
    """
    Business phone number metadata.

    Identifies the business phone number that received or sent the message.
    """

    display_phone_number: str = Field(
        ..., description="Business display phone number (formatted for display)"
    )
    phone_number_id: str = Field(
        ..., description="Business phone number ID (use it to send replies)"
    )


class ContactProfile(WebhookModel):
    name: str = Field(..., description="WhatsApp user's display name")


class WebhookContact(WebhookModel):
    """Sender of an incoming message."""

    wa_id: str = Field(..., description="WhatsApp ID of the customer")
    profile: ContactProfile | None = None


class WebhookErrorData(WebhookModel):
    details: str


class WebhookError(WebhookModel):
    """
    System, app, account or message level error.

    ``message`` is the human-readable reason sent by the Graph API.
    """

    code: int
    title: str
    message: str | None = None
    error_data: WebhookErrorData | None = None
    href: str | None = Field(None, description="Link to the error code reference")

    @property
    def details(self) -> str | None:
        return self.error_data.details if self.error_data else None

    def describe(self) -> dict[str, Any]:
        """Compact summary for logs."""
        return {"code": self.code, "title": self.title, "details": self.details}
