"""WhatsApp Cloud API messaging: client, messenger, template handler and models."""
