"""
Outbound message content models for the WhatsApp Cloud API.

Provides Pydantic v2 models for every object that can be keyed by type in a
message request: text, media, contacts, interactive, location, reaction and
template. Serialize with ``model_dump(mode="json", exclude_none=True)``.

Reference: https://developers.facebook.com/docs/whatsapp/cloud-api/reference/messages
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class WhatsAppModel(BaseModel):
    """Base for outbound payload objects."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


# ================================================================
# Text, location, reaction
# ================================================================


class TextObject(WhatsAppModel):
    """Text message content."""

    body: str = Field(
        ..., min_length=1, max_length=4096, description="Text of the message"
    )
    preview_url: bool | None = Field(
        None, description="Render a preview for the first URL in the body"
    )


class LocationObject(WhatsAppModel):
    """Location message content."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    name: str | None = None
    address: str | None = None


class ReactionObject(WhatsAppModel):
    """Reaction to a previously received message. An empty emoji removes it."""

    message_id: str = Field(..., min_length=1)
    emoji: str = Field(..., description="Emoji character, or empty string to remove")


# ================================================================
# Media
# ================================================================


class MediaObject(WhatsAppModel):
    """
    Media content (audio, document, image, sticker, video).

    Exactly one of ``id`` (uploaded media) or ``link`` (public URL) is set.
    """

    id: str | None = Field(None, description="Media ID returned by the upload call")
    link: str | None = Field(None, description="HTTP(S) URL of the media asset")
    caption: str | None = Field(
        None, max_length=1024, description="Caption for document, image or video"
    )
    filename: str | None = Field(None, description="Filename for documents")
    provider: str | None = None

    @model_validator(mode="after")
    def validate_source(self):
        if bool(self.id) == bool(self.link):
            raise ValueError("Exactly one of 'id' or 'link' must be provided")
        return self


# ================================================================
# Contacts
# ================================================================


class ContactAddress(WhatsAppModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: str | None = Field(None, description="Standard values are HOME and WORK")


class ContactEmail(WhatsAppModel):
    email: str
    type: str | None = None


class ContactName(WhatsAppModel):
    formatted_name: str = Field(..., min_length=1)
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactOrg(WhatsAppModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class ContactPhone(WhatsAppModel):
    phone: str | None = None
    type: str | None = Field(
        None, description="Standard values are CELL, MAIN, IPHONE, HOME and WORK"
    )
    wa_id: str | None = None


class ContactUrl(WhatsAppModel):
    url: str
    type: str | None = None


class ContactObject(WhatsAppModel):
    """A contact card. Only ``name`` is required."""

    name: ContactName
    addresses: list[ContactAddress] | None = None
    birthday: str | None = Field(None, description="YYYY-MM-DD")
    emails: list[ContactEmail] | None = None
    org: ContactOrg | None = None
    phones: list[ContactPhone] | None = None
    urls: list[ContactUrl] | None = None


# ================================================================
# Interactive
# ================================================================


class InteractiveType(str, Enum):
    """Interactive message kinds."""

    BUTTON = "button"
    CATALOG_MESSAGE = "catalog_message"
    LIST = "list"
    PRODUCT = "product"
    PRODUCT_LIST = "product_list"
    FLOW = "flow"


class ReplyButtonPayload(WhatsAppModel):
    id: str = Field(..., min_length=1, max_length=256)
    title: str = Field(..., min_length=1, max_length=20)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        if v != v.strip():
            raise ValueError("Button id cannot have leading or trailing spaces")
        return v


class ReplyButton(WhatsAppModel):
    """Reply button; the id comes back in the webhook when tapped."""

    type: Literal["reply"] = "reply"
    reply: ReplyButtonPayload


class SectionRow(WhatsAppModel):
    id: str = Field(..., max_length=200)
    title: str = Field(..., max_length=24)
    description: str | None = Field(None, max_length=72)


class SectionProduct(WhatsAppModel):
    product_retailer_id: str


class SectionObject(WhatsAppModel):
    """List section (rows) or multi-product section (product_items)."""

    title: str | None = Field(None, max_length=24)
    rows: list[SectionRow] | None = None
    product_items: list[SectionProduct] | None = None


class FlowActionPayload(WhatsAppModel):
    screen: str
    data: dict[str, Any] | None = None

    @field_validator("data")
    @classmethod
    def validate_data(cls, v):
        if v is not None and not v:
            raise ValueError("Flow data must be a non-empty object")
        return v


class ActionObject(WhatsAppModel):
    """Action of an interactive message; which fields apply depends on the type."""

    button: str | None = Field(None, max_length=20, description="List button text")
    buttons: list[ReplyButton] | None = Field(None, max_length=3)
    catalog_id: str | None = None
    product_retailer_id: str | None = None
    sections: list[SectionObject] | None = Field(None, min_length=1, max_length=10)
    mode: Literal["draft", "published"] | None = None
    flow_message_version: Literal["3"] | None = None
    flow_token: str | None = None
    flow_id: str | None = None
    flow_cta: str | None = Field(None, max_length=20)
    flow_action: Literal["navigate", "data_exchange"] | None = None
    flow_action_payload: FlowActionPayload | None = None


class HeaderObject(WhatsAppModel):
    type: Literal["text", "video", "image", "document"]
    text: str | None = Field(None, max_length=60)
    document: MediaObject | None = None
    image: MediaObject | None = None
    video: MediaObject | None = None

    @model_validator(mode="after")
    def validate_content(self):
        if getattr(self, self.type) is None:
            raise ValueError(f"Header of type '{self.type}' requires '{self.type}'")
        return self


class InteractiveText(WhatsAppModel):
    text: str


class InteractiveObject(WhatsAppModel):
    """Interactive message content."""

    type: InteractiveType
    action: ActionObject
    body: InteractiveText | None = None
    footer: InteractiveText | None = None
    header: HeaderObject | None = None

    @model_validator(mode="after")
    def validate_action(self):
        if self.type is InteractiveType.BUTTON and not self.action.buttons:
            raise ValueError("Button messages require action.buttons")
        if self.type is InteractiveType.LIST and not (
            self.action.button and self.action.sections
        ):
            raise ValueError("List messages require action.button and action.sections")
        if self.type is not InteractiveType.PRODUCT and self.body is None:
            raise ValueError(f"Interactive '{self.type.value}' messages require a body")
        return self


# ================================================================
# Template (send)
# ================================================================


class CurrencyObject(WhatsAppModel):
    fallback_value: str
    code: str = Field(..., min_length=3, max_length=3, description="ISO 4217 code")
    amount_1000: int = Field(..., description="Amount multiplied by 1000")


class DateTimeObject(WhatsAppModel):
    fallback_value: str


class ParameterObject(WhatsAppModel):
    """Header or body parameter of a template component."""

    type: Literal["currency", "date_time", "document", "image", "text", "video"]
    text: str | None = None
    currency: CurrencyObject | None = None
    date_time: DateTimeObject | None = None
    image: MediaObject | None = None
    document: MediaObject | None = None
    video: MediaObject | None = None

    @model_validator(mode="after")
    def validate_value(self):
        if getattr(self, self.type) is None:
            raise ValueError(f"Parameter of type '{self.type}' requires '{self.type}'")
        return self


class ButtonParameterObject(WhatsAppModel):
    """Parameter of a template button component."""

    type: Literal["payload", "text"]
    payload: str | None = None
    text: str | None = None


class ComponentObject(WhatsAppModel):
    """Template component with the parameters to substitute."""

    type: Literal["header", "body", "button"]
    sub_type: Literal["quick_reply", "url", "catalog"] | None = None
    parameters: list[ParameterObject | ButtonParameterObject] | None = None
    index: str | None = Field(None, pattern=r"^[0-9]$")

    @model_validator(mode="after")
    def validate_button(self):
        if self.type == "button" and (self.sub_type is None or self.index is None):
            raise ValueError("Button components require 'sub_type' and 'index'")
        return self


class LanguageObject(WhatsAppModel):
    code: str = Field(..., min_length=2)
    policy: Literal["deterministic"] = "deterministic"


class TemplateObject(WhatsAppModel):
    """Template message content."""

    name: str = Field(..., min_length=1)
    language: LanguageObject
    components: list[ComponentObject] | None = None
    namespace: str | None = None
