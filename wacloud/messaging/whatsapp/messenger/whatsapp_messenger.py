"""
WhatsApp messenger: builds message envelopes and sends them.

Every send goes through ``send``, which validates the content against the
message type before any request is made:
- Basic messaging: send_text, send_reaction, mark_as_read
- Media messaging: send_image, send_video, send_audio, send_document, send_sticker
- Structured messaging: send_template, send_interactive, send_contacts, send_location
"""

from typing import Any

from wacloud.core.logging.context import set_request_context
from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.basic_models import (
    MessageContext,
    MessageRequest,
    MessageResponse,
    MessageType,
    ReadReceipt,
    SuccessResponse,
)
from wacloud.messaging.whatsapp.models.message_models import (
    ContactObject,
    InteractiveObject,
    LocationObject,
    MediaObject,
    ReactionObject,
    TemplateObject,
    TextObject,
)
from wacloud.messaging.whatsapp.utils.error_helpers import log_whatsapp_error


class WhatsAppMessenger:
    """
    Sends messages through a ``WhatsAppClient``.

    Failures are logged once here and re-raised: ``WhatsAppApiError`` for
    Graph API errors, ``ValueError`` for content that does not match its type.
    """

    def __init__(self, client: WhatsAppClient):
        """Initialize messenger.

        Args:
            client: Configured WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def phone_number_id(self) -> str:
        """Business phone number ID messages are sent from."""
        return self.client.phone_number_id

    async def send(
        self,
        to: str,
        message_type: MessageType | str,
        content: Any,
        *,
        reply_to_message_id: str | None = None,
        biz_opaque_callback_data: str | None = None,
    ) -> MessageResponse:
        """Build a message envelope and send it.

        Args:
            to: Recipient WhatsApp ID or phone number
            message_type: Message type; decides which key carries ``content``
            content: Content object for the type (a list of ContactObject
                for contacts); plain dicts are validated into the model
            reply_to_message_id: Optional message ID to reply to
            biz_opaque_callback_data: Opaque tracking data (max 512 characters)
                echoed back in status webhooks

        Returns:
            MessageResponse with the recipient's WhatsApp ID and message ID

        Raises:
            ValueError: If the content does not match the message type
            WhatsAppApiError: If the Graph API rejects the message
        """
        request = MessageRequest(
            to=to,
            type=MessageType(message_type),
            content=content,
            context=(
                MessageContext(message_id=reply_to_message_id)
                if reply_to_message_id
                else None
            ),
            biz_opaque_callback_data=biz_opaque_callback_data,
        )
        payload = request.to_payload()

        set_request_context(phone_number_id=self.phone_number_id, recipient=to)
        self.logger.debug(f"Sending {request.type.value} message to {to}")

        try:
            response = await self.client.post_request(payload)
        except Exception as e:
            log_whatsapp_error(
                e,
                operation=f"send {request.type.value} message",
                target=to,
                phone_number_id=self.phone_number_id,
                logger=self.logger,
            )
            raise

        result = MessageResponse.model_validate(response)
        self.logger.info(
            f"{request.type.value.capitalize()} message sent to {to}, id: {result.message_id}"
        )
        return result

    # Basic messaging

    async def send_text(
        self,
        to: str,
        body: str,
        preview_url: bool | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResponse:
        """Send a text message (1-4096 characters)."""
        return await self.send(
            to,
            MessageType.TEXT,
            TextObject(body=body, preview_url=preview_url),
            reply_to_message_id=reply_to_message_id,
        )

    async def send_reaction(
        self, to: str, message_id: str, emoji: str
    ) -> MessageResponse:
        """React to a message; an empty ``emoji`` removes the reaction."""
        return await self.send(
            to,
            MessageType.REACTION,
            ReactionObject(message_id=message_id, emoji=emoji),
        )

    async def mark_as_read(self, message_id: str) -> SuccessResponse:
        """Mark an inbound message as read.

        Args:
            message_id: WhatsApp message ID to mark as read

        Returns:
            SuccessResponse from the Graph API
        """
        payload = ReadReceipt(message_id=message_id).model_dump()

        self.logger.debug(f"Marking message {message_id} as read")
        try:
            response = await self.client.post_request(payload)
        except Exception as e:
            log_whatsapp_error(
                e,
                operation="mark as read",
                target=message_id,
                phone_number_id=self.phone_number_id,
                logger=self.logger,
            )
            raise

        self.logger.info(f"Message {message_id} marked as read")
        return SuccessResponse.model_validate(response)

    # Media messaging

    async def send_image(
        self,
        to: str,
        media: MediaObject,
        reply_to_message_id: str | None = None,
    ) -> MessageResponse:
        """Send an image (JPEG or PNG, up to 5MB)."""
        return await self.send(
            to, MessageType.IMAGE, media, reply_to_message_id=reply_to_message_id
        )

    async def send_video(
        self,
        to: str,
        media: MediaObject,
        reply_to_message_id: str | None = None,
    ) -> MessageResponse:
        """Send a video (MP4 or 3GP, up to 16MB)."""
        return await self.send(
            to, MessageType.VIDEO, media, reply_to_message_id=reply_to_message_id
        )

    async def send_audio(
        self,
        to: str,
        media: MediaObject,
        reply_to_message_id: str | None = None,
    ) -> MessageResponse:
        return await self.send(
            to, MessageType.AUDIO, media, reply_to_message_id=reply_to_message_id
        )

    async def send_document(
        self,
        to: str,
        media: MediaObject,
        reply_to_message_id: str | None = None,
    ) -> MessageResponse:
        return await self.send(
            to, MessageType.DOCUMENT, media, reply_to_message_id=reply_to_message_id
        )

    async def send_sticker(
        self,
        to: str,
        media: MediaObject,
        reply_to_message_id: str | None = None,
    ) -> MessageResponse:
        return await self.send(
            to, MessageType.STICKER, media, reply_to_message_id=reply_to_message_id
        )

    # Structured messaging

    async def send_template(
        self,
        to: str,
        template: TemplateObject,
        biz_opaque_callback_data: str | None = None,
    ) -> MessageResponse:
        """Send an approved template message."""
        return await self.send(
            to,
            MessageType.TEMPLATE,
            template,
            biz_opaque_callback_data=biz_opaque_callback_data,
        )

    async def send_interactive(
        self,
        to: str,
        interactive: InteractiveObject,
        reply_to_message_id: str | None = None,
    ) -> MessageResponse:
        """Send a button, list, product, catalog or flow message."""
        return await self.send(
            to,
            MessageType.INTERACTIVE,
            interactive,
            reply_to_message_id=reply_to_message_id,
        )

    async def send_contacts(
        self,
        to: str,
        contacts: list[ContactObject],
        reply_to_message_id: str | None = None,
    ) -> MessageResponse:
        """Send one or more contact cards."""
        return await self.send(
            to,
            MessageType.CONTACTS,
            contacts,
            reply_to_message_id=reply_to_message_id,
        )

    async def send_location(
        self,
        to: str,
        location: LocationObject,
        reply_to_message_id: str | None = None,
    ) -> MessageResponse:
        return await self.send(
            to,
            MessageType.LOCATION,
            location,
            reply_to_message_id=reply_to_message_id,
        )
