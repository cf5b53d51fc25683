"""WhatsApp messenger package."""

from .whatsapp_messenger import WhatsAppMessenger

__all__ = ["WhatsAppMessenger"]
