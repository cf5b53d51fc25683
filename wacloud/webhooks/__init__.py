"""Inbound webhook handling."""

from .whatsapp import WebhookPayload, WebhookVerificationRequest, verify_webhook

__all__ = ["WebhookPayload", "WebhookVerificationRequest", "verify_webhook"]
