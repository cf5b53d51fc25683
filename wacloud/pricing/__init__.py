"""
Conversation pricing for WhatsApp Business messages.

Usage:
    from wacloud.pricing import resolve_price

    resolve_price("+14155551234", "marketing")  # Decimal("0.0250")
"""

from .models import CategoryPrices, ConversationCategory, PricingTable
from .resolver import (
    PriceResolver,
    extract_calling_code,
    load_bundled_pricing_table,
    resolve_price,
)

__all__ = [
    "CategoryPrices",
    "ConversationCategory",
    "PriceResolver",
    "PricingTable",
    "extract_calling_code",
    "load_bundled_pricing_table",
    "resolve_price",
]
