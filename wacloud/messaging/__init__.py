"""
wacloud messaging components.

Usage:
    from wacloud.messaging import WhatsAppClient, WhatsAppMessenger
    from wacloud.messaging import WhatsAppTemplateHandler
"""

from .whatsapp.client import WhatsAppClient, WhatsAppUrlBuilder
from .whatsapp.handlers import WhatsAppTemplateHandler
from .whatsapp.messenger import WhatsAppMessenger

__all__ = [
    "WhatsAppClient",
    "WhatsAppUrlBuilder",
    "WhatsAppMessenger",
    "WhatsAppTemplateHandler",
]
