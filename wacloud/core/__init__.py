"""Core configuration, logging and exceptions for wacloud."""

from .exceptions import (
    InvalidPhoneNumberError,
    PriceNotFoundError,
    PricingTableError,
    TokenMismatchError,
    WacloudError,
    WebhookPayloadError,
    WhatsAppApiError,
)

__all__ = [
    "InvalidPhoneNumberError",
    "PriceNotFoundError",
    "PricingTableError",
    "TokenMismatchError",
    "WacloudError",
    "WebhookPayloadError",
    "WhatsAppApiError",
]
