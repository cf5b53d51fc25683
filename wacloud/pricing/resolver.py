"""
Message price resolution.

Maps a destination phone number plus a conversation category to the USD
price in a ``PricingTable``. See https://developers.facebook.com/docs/whatsapp/pricing
"""

from decimal import Decimal
from functools import lru_cache
from importlib import resources

import phonenumbers
from phonenumbers.phonenumberutil import NumberParseException

from wacloud.core.exceptions import InvalidPhoneNumberError, PriceNotFoundError
from wacloud.core.logging.logger import get_logger
from wacloud.pricing.models import ConversationCategory, PricingTable

BUNDLED_TABLE = "pricing.json"

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_bundled_pricing_table() -> PricingTable:
    """Load the rate card shipped with the package (once per process)."""
    source = resources.files("wacloud.pricing").joinpath("data").joinpath(BUNDLED_TABLE)
    with resources.as_file(source) as path:
        table = PricingTable.from_json_file(path)
    logger.debug(
        f"Loaded bundled pricing table {table.version} ({len(table)} calling codes)"
    )
    return table


def extract_calling_code(destination: str, default_region: str | None = None) -> int:
    """
    Parse a phone number and return its country calling code.

    Args:
        destination: Phone number, E.164 (``+14155551234``) or national when
            ``default_region`` is given
        default_region: ISO 3166-1 alpha-2 region used for national numbers

    Raises:
        InvalidPhoneNumberError: If the number cannot be parsed or has no
            calling code
    """
    if not isinstance(destination, str) or not destination.strip():
        raise InvalidPhoneNumberError(destination, "empty or not a string")

    try:
        parsed = phonenumbers.parse(destination, default_region)
    except NumberParseException as e:
        raise InvalidPhoneNumberError(destination, str(e)) from e

    if not parsed.country_code:
        raise InvalidPhoneNumberError(destination, "no country calling code")
    return parsed.country_code


class PriceResolver:
    """Resolve message prices against an injected pricing table."""

    def __init__(self, table: PricingTable):
        self.table = table

    def resolve(
        self,
        destination: str,
        category: ConversationCategory | str,
        default_region: str | None = None,
    ) -> Decimal:
        """
        Get the price of a conversation with the given phone number.

        Args:
            destination: Phone number of the recipient
            category: Conversation category (entry point)
            default_region: Region for national-format numbers

        Returns:
            Price in the table's currency (USD for the bundled table)

        Raises:
            InvalidPhoneNumberError: If ``destination`` cannot be parsed
            PriceNotFoundError: If the table has no row for the calling code
            ValueError: If ``category`` is not a known category
        """
        category = ConversationCategory(category)

        # Free entry point conversations skip number validation entirely
        if category.is_free:
            return Decimal("0")

        calling_code = extract_calling_code(destination, default_region)
        try:
            prices = self.table[calling_code]
        except KeyError:
            raise PriceNotFoundError(calling_code) from None

        return prices.price_for(category)


def resolve_price(
    destination: str,
    category: ConversationCategory | str,
    *,
    table: PricingTable | None = None,
    default_region: str | None = None,
) -> Decimal:
    """Resolve a price with ``table`` or, when omitted, the bundled rate card."""
    resolver = PriceResolver(table if table is not None else load_bundled_pricing_table())
    return resolver.resolve(destination, category, default_region=default_region)
