"""
wacloud - typed async client for the WhatsApp Business Cloud API.

Top-level exports cover the common entry points; models live under
``wacloud.messaging.whatsapp.models`` and ``wacloud.webhooks.whatsapp``.
"""

from .core.config.settings import settings
from .core.exceptions import (
    InvalidPhoneNumberError,
    PriceNotFoundError,
    PricingTableError,
    TokenMismatchError,
    WacloudError,
    WebhookPayloadError,
    WhatsAppApiError,
)
from .pricing import ConversationCategory, PriceResolver, PricingTable, resolve_price
from .sdk import WhatsAppSdk
from .webhooks import WebhookPayload, WebhookVerificationRequest, verify_webhook

# Dynamic version from pyproject.toml
__version__ = settings.version

__all__ = [
    "WhatsAppSdk",
    "ConversationCategory",
    "PriceResolver",
    "PricingTable",
    "resolve_price",
    "WebhookPayload",
    "WebhookVerificationRequest",
    "verify_webhook",
    "WacloudError",
    "InvalidPhoneNumberError",
    "PriceNotFoundError",
    "PricingTableError",
    "TokenMismatchError",
    "WebhookPayloadError",
    "WhatsAppApiError",
]
