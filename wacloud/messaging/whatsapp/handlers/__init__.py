"""WhatsApp handlers package."""

from .whatsapp_template_handler import WhatsAppTemplateHandler

__all__ = ["WhatsAppTemplateHandler"]
