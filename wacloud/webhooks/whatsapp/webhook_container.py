"""
Main webhook container models for WhatsApp Business Platform.

Top-level ``object -> entry[] -> changes[] -> value`` structure wrapping
incoming messages, message statuses and template review updates.
"""

import json
from collections.abc import Iterator
from typing import Any, Literal

from pydantic import Field, ValidationError

from wacloud.core.exceptions import WebhookPayloadError
from wacloud.webhooks.whatsapp.base_models import (
    WebhookContact,
    WebhookError,
    WebhookMetadata,
    WebhookModel,
)
from wacloud.webhooks.whatsapp.message_models import WebhookMessage
from wacloud.webhooks.whatsapp.status_models import WebhookStatus

WebhookField = Literal[
    "messages",
    "message_template_status_update",
    "message_template_components_update",
]


class TemplateButtonUpdate(WebhookModel):
    message_template_button_type: str
    message_template_button_text: str | None = None
    message_template_button_url: str | None = None
    message_template_button_phone_number: str | None = None


class WebhookValue(WebhookModel):
    """
    The value object of a change.

    Which fields are present depends on the change field: ``messages``
    changes carry messages, statuses or errors; template changes carry the
    ``message_template_*`` fields plus ``event`` and ``reason``.
    """

    messaging_product: Literal["whatsapp"] | None = None
    metadata: WebhookMetadata | None = None
    contacts: list[WebhookContact] | None = None
    messages: list[WebhookMessage] | None = None
    statuses: list[WebhookStatus] | None = None
    errors: list[WebhookError] | None = None

    # Template status and components updates
    message_template_id: int | str | None = None
    message_template_name: str | None = None
    message_template_language: str | None = None
    message_template_title: str | None = None
    message_template_element: str | None = None
    message_template_footer: str | None = None
    message_template_buttons: list[TemplateButtonUpdate] | None = None
    event: str | None = Field(
        None, description="Template review outcome, e.g. APPROVED or REJECTED"
    )
    reason: str | None = None


class WebhookChange(WebhookModel):
    field: WebhookField
    value: WebhookValue

    @property
    def is_template_update(self) -> bool:
        return self.field != "messages"


class WebhookEntry(WebhookModel):
    id: str = Field(..., description="WhatsApp Business Account ID")
    changes: list[WebhookChange] = Field(default_factory=list)


class WebhookPayload(WebhookModel):
    """Complete webhook notification body."""

    object: str = Field(..., description="'whatsapp_business_account'")
    entry: list[WebhookEntry] = Field(default_factory=list)

    @classmethod
    def parse(cls, raw: bytes | str | dict[str, Any]) -> "WebhookPayload":
        """
        Parse a webhook body.

        Args:
            raw: Request body as bytes, JSON text or an already decoded dict

        Raises:
            WebhookPayloadError: If the body is not JSON or does not match
                the payload structure
        """
        if isinstance(raw, (bytes, str)):
            try:
                raw = json.loads(raw)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise WebhookPayloadError(f"Webhook body is not valid JSON: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise WebhookPayloadError(
                f"Invalid webhook payload: {e.error_count()} error(s)"
            ) from e

    def _values(self, field: str | None = None) -> Iterator[WebhookValue]:
        for entry in self.entry:
            for change in entry.changes:
                if field is None or change.field == field:
                    yield change.value

    def iter_messages(self) -> Iterator[tuple[WebhookMetadata | None, WebhookMessage]]:
        """Yield ``(metadata, message)`` for every incoming message."""
        for value in self._values("messages"):
            for message in value.messages or []:
                yield value.metadata, message

    def iter_statuses(self) -> Iterator[tuple[WebhookMetadata | None, WebhookStatus]]:
        """Yield ``(metadata, status)`` for every message status update."""
        for value in self._values("messages"):
            for status in value.statuses or []:
                yield value.metadata, status

    def iter_errors(self) -> Iterator[WebhookError]:
        """Yield value-level errors (system, app or account errors)."""
        for value in self._values():
            yield from value.errors or []

    def iter_template_updates(self) -> Iterator[tuple[str, WebhookValue]]:
        """Yield ``(field, value)`` for template status and components updates."""
        for entry in self.entry:
            for change in entry.changes:
                if change.is_template_update:
                    yield change.field, change.value

    def get_contacts(self) -> list[WebhookContact]:
        """All sender contacts across entries."""
        contacts: list[WebhookContact] = []
        for value in self._values("messages"):
            contacts.extend(value.contacts or [])
        return contacts
