"""
WhatsApp Cloud API SDK facade.

Composes the HTTP client, messenger, template handler and price resolver
behind a single entry point:

    async with aiohttp.ClientSession() as session:
        sdk = WhatsAppSdk(session, access_token, phone_number_id, business_id)
        await sdk.messenger.send_text("14155551234", "Hello!")
        templates = await sdk.templates.list_templates()
        price = sdk.get_message_price("+14155551234", "marketing")
"""

from decimal import Decimal
from typing import TYPE_CHECKING

from wacloud.core.config.settings import settings
from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.handlers.whatsapp_template_handler import (
    WhatsAppTemplateHandler,
)
from wacloud.messaging.whatsapp.messenger.whatsapp_messenger import WhatsAppMessenger
from wacloud.pricing.models import ConversationCategory, PricingTable
from wacloud.pricing.resolver import PriceResolver, load_bundled_pricing_table
from wacloud.webhooks.whatsapp.verification import (
    WebhookVerificationRequest,
    verify_webhook,
)

if TYPE_CHECKING:
    import aiohttp


class WhatsAppSdk:
    """
    Entry point bound to one business phone number.

    Attributes:
        client: Low-level HTTP client
        messenger: Message sending operations
        templates: Message template management
        pricing: Price resolver over the configured pricing table
    """

    def __init__(
        self,
        session: "aiohttp.ClientSession",
        access_token: str,
        phone_number_id: str,
        business_id: str | None = None,
        *,
        verify_token: str | None = None,
        pricing_table: PricingTable | None = None,
        api_version: str = settings.api_version,
        base_url: str = settings.base_url,
    ):
        """
        Initialize the SDK.

        Args:
            session: aiohttp session owned by the caller
            access_token: Graph API access token
            phone_number_id: WhatsApp Business phone number ID
            business_id: WhatsApp Business Account ID, required for templates
            verify_token: Verify token for the webhook handshake
            pricing_table: Rate card; the bundled table is used when omitted
            api_version: Graph API version
            base_url: Graph API base URL
        """
        self.logger = get_logger(__name__)

        self.client = WhatsAppClient(
            session=session,
            access_token=access_token,
            phone_number_id=phone_number_id,
            business_id=business_id,
            api_version=api_version,
            base_url=base_url,
        )
        self.messenger = WhatsAppMessenger(self.client)
        self.templates = WhatsAppTemplateHandler(self.client)
        self.pricing = PriceResolver(
            pricing_table if pricing_table is not None else load_bundled_pricing_table()
        )
        self.verify_token = verify_token

    @classmethod
    def from_settings(cls, session: "aiohttp.ClientSession") -> "WhatsAppSdk":
        """
        Build an SDK from environment settings.

        Raises:
            ValueError: If WP_ACCESS_TOKEN or WP_PHONE_ID is missing
            PricingTableError: If PRICING_TABLE_PATH points to an invalid table
        """
        settings.require_credentials()

        pricing_table = None
        if settings.pricing_table_path:
            pricing_table = PricingTable.from_json_file(settings.pricing_table_path)

        return cls(
            session,
            settings.wp_access_token,
            settings.wp_phone_id,
            settings.wp_bid,
            verify_token=settings.whatsapp_webhook_verify_token,
            pricing_table=pricing_table,
            api_version=settings.api_version,
            base_url=settings.base_url,
        )

    @property
    def phone_number_id(self) -> str:
        return self.client.phone_number_id

    def verify_webhook(self, payload: WebhookVerificationRequest) -> int:
        """
        Run the verification handshake against the configured verify token.

        Raises:
            ValueError: If no verify token is configured
            TokenMismatchError: If the tokens differ
        """
        if not self.verify_token:
            raise ValueError("verify_token is not configured")
        return verify_webhook(payload, self.verify_token)

    def get_message_price(
        self,
        to: str,
        category: ConversationCategory | str,
        default_region: str | None = None,
    ) -> Decimal:
        """
        Price of a conversation with ``to`` in the given category.

        Raises:
            InvalidPhoneNumberError: If ``to`` cannot be parsed
            PriceNotFoundError: If the table has no row for the calling code
        """
        return self.pricing.resolve(to, category, default_region=default_region)
