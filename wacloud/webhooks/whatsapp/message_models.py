"""
Incoming message models for WhatsApp webhooks.

A ``WebhookMessage`` carries the common fields (``from``, ``id``,
``timestamp``, ``type``) plus the sub-object named by ``type``.
"""

from enum import Enum

from pydantic import Field

from wacloud.webhooks.whatsapp.base_models import WebhookError, WebhookModel


class InboundMessageType(str, Enum):
    """Message types delivered in ``messages`` webhooks."""

    AUDIO = "audio"
    BUTTON = "button"
    CONTACTS = "contacts"
    DOCUMENT = "document"
    IMAGE = "image"
    INTERACTIVE = "interactive"
    LOCATION = "location"
    ORDER = "order"
    REACTION = "reaction"
    STICKER = "sticker"
    SYSTEM = "system"
    TEXT = "text"
    UNKNOWN = "unknown"
    UNSUPPORTED = "unsupported"
    VIDEO = "video"


class InboundMedia(WebhookModel):
    """Media reference; download it through the media ID."""

    id: str
    mime_type: str | None = None
    sha256: str | None = None
    caption: str | None = None
    filename: str | None = None
    animated: bool | None = Field(None, description="Stickers only")
    voice: bool | None = Field(None, description="Audio only; true for voice notes")


class InboundText(WebhookModel):
    body: str


class InboundButton(WebhookModel):
    """Quick reply button of a template message."""

    payload: str | None = None
    text: str


class ReferredProduct(WebhookModel):
    catalog_id: str
    product_retailer_id: str


class InboundContext(WebhookModel):
    """Reply, forward or product enquiry context."""

    from_: str | None = Field(None, alias="from")
    id: str | None = None
    forwarded: bool | None = None
    frequently_forwarded: bool | None = None
    referred_product: ReferredProduct | None = None


class InboundIdentity(WebhookModel):
    acknowledged: bool | None = None
    created_timestamp: str | None = None
    hash: str | None = None


class ButtonReply(WebhookModel):
    id: str
    title: str


class ListReply(WebhookModel):
    id: str
    title: str
    description: str | None = None


class InboundInteractive(WebhookModel):
    """Reply to an interactive message (button or list)."""

    type: str = Field(..., description="button_reply, list_reply or nfm_reply")
    button_reply: ButtonReply | None = None
    list_reply: ListReply | None = None

    @property
    def reply_id(self) -> str | None:
        """ID of the selected button or list row."""
        reply = self.button_reply or self.list_reply
        return reply.id if reply else None


class OrderItem(WebhookModel):
    product_retailer_id: str
    quantity: int
    item_price: float
    currency: str


class InboundOrder(WebhookModel):
    catalog_id: str
    text: str | None = None
    product_items: list[OrderItem] = Field(default_factory=list)


class InboundReferral(WebhookModel):
    """Click-to-WhatsApp ad or post the customer came from."""

    source_url: str | None = None
    source_type: str | None = None
    source_id: str | None = None
    headline: str | None = None
    body: str | None = None
    media_type: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    thumbnail_url: str | None = None
    ctwa_clid: str | None = None


class InboundSystem(WebhookModel):
    """Customer changed their number or profile."""

    body: str | None = None
    identity: str | None = None
    new_wa_id: str | None = Field(None, description="Webhook versions v11.0 and earlier")
    wa_id: str | None = Field(None, description="Webhook versions v12.0 and later")
    type: str | None = Field(
        None, description="customer_changed_number or customer_identity_changed"
    )
    customer: str | None = None


class InboundLocation(WebhookModel):
    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None
    url: str | None = None


class InboundReaction(WebhookModel):
    message_id: str
    emoji: str | None = Field(None, description="Absent when a reaction is removed")


class WebhookMessage(WebhookModel):
    """A message received from a customer."""

    from_: str = Field(..., alias="from", description="Customer WhatsApp ID")
    id: str
    timestamp: str
    type: str

    audio: InboundMedia | None = None
    button: InboundButton | None = None
    context: InboundContext | None = None
    document: InboundMedia | None = None
    errors: list[WebhookError] | None = None
    identity: InboundIdentity | None = None
    image: InboundMedia | None = None
    interactive: InboundInteractive | None = None
    location: InboundLocation | None = None
    order: InboundOrder | None = None
    reaction: InboundReaction | None = None
    referral: InboundReferral | None = None
    sticker: InboundMedia | None = None
    system: InboundSystem | None = None
    text: InboundText | None = None
    video: InboundMedia | None = None

    @property
    def message_type(self) -> InboundMessageType:
        """Typed message type; unrecognized values map to UNKNOWN."""
        try:
            return InboundMessageType(self.type)
        except ValueError:
            return InboundMessageType.UNKNOWN

    @property
    def is_reply(self) -> bool:
        return bool(self.context and self.context.id)

    @property
    def media(self) -> InboundMedia | None:
        """Media object for audio, document, image, sticker and video messages."""
        for kind in ("audio", "document", "image", "sticker", "video"):
            if self.type == kind:
                return getattr(self, kind)
        return None
