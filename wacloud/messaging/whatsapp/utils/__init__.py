"""WhatsApp utility functions and helpers."""

from wacloud.messaging.whatsapp.utils.error_helpers import (
    is_authentication_error,
    log_whatsapp_error,
)

__all__ = [
    "is_authentication_error",
    "log_whatsapp_error",
]
