"""
Tests for price resolution against bundled and injected pricing tables.
"""

from decimal import Decimal

import pytest

from wacloud.core.exceptions import InvalidPhoneNumberError, PriceNotFoundError
from wacloud.pricing import (
    ConversationCategory,
    PriceResolver,
    extract_calling_code,
    load_bundled_pricing_table,
    resolve_price,
)


class TestExtractCallingCode:
    @pytest.mark.parametrize(
        "number,expected",
        [
            ("+14155551234", 1),
            ("+442071838750", 44),
            ("+919876543210", 91),
            ("+5511987654321", 55),
            ("+971501234567", 971),
        ],
    )
    def test_e164_numbers(self, number, expected):
        assert extract_calling_code(number) == expected

    def test_national_number_with_region(self):
        assert extract_calling_code("(415) 555-1234", "US") == 1
        assert extract_calling_code("020 7183 8750", "GB") == 44

    def test_national_number_without_region_is_invalid(self):
        with pytest.raises(InvalidPhoneNumberError) as exc_info:
            extract_calling_code("4155551234")
        assert exc_info.value.destination == "4155551234"

    @pytest.mark.parametrize("number", ["", "   ", "not a number", "+9991234567"])
    def test_unparseable_numbers(self, number):
        with pytest.raises(InvalidPhoneNumberError):
            extract_calling_code(number)

    def test_non_string_input(self):
        with pytest.raises(InvalidPhoneNumberError):
            extract_calling_code(14155551234)


class TestPriceResolver:
    def test_resolves_category_price(self, small_table):
        resolver = PriceResolver(small_table)

        assert resolver.resolve("+14155551234", "marketing") == Decimal("0.0250")
        assert resolver.resolve("+14155551234", "utility") == Decimal("0.0040")
        assert resolver.resolve("+14155551234", "service") == Decimal("0.0088")

    def test_accepts_enum_or_string_category(self, small_table):
        resolver = PriceResolver(small_table)

        by_enum = resolver.resolve("+919876543210", ConversationCategory.AUTHENTICATION)
        by_value = resolver.resolve("+919876543210", "authentication")
        assert by_enum == by_value == Decimal("0.0014")

    def test_international_authentication_rate(self, small_table):
        resolver = PriceResolver(small_table)

        price = resolver.resolve(
            "+919876543210", ConversationCategory.AUTHENTICATION_INTERNATIONAL
        )
        assert price == Decimal("0.0280")
        assert resolver.resolve("+919876543210", "authentication-international") == price

    def test_returns_decimal(self, small_table):
        price = PriceResolver(small_table).resolve("+14155551234", "marketing")
        assert isinstance(price, Decimal)

    def test_referral_conversion_is_free(self, small_table):
        resolver = PriceResolver(small_table)

        assert resolver.resolve("+14155551234", "referral_conversion") == Decimal("0")

    def test_referral_conversion_skips_number_validation(self, small_table):
        resolver = PriceResolver(small_table)

        assert resolver.resolve("garbage", "referral_conversion") == Decimal("0")
        assert resolver.resolve("", ConversationCategory.REFERRAL_CONVERSION) == 0

    @pytest.mark.parametrize(
        "category", [c for c in ConversationCategory if not c.is_free]
    )
    def test_missing_calling_code_raises(self, small_table, category):
        resolver = PriceResolver(small_table)

        with pytest.raises(PriceNotFoundError) as exc_info:
            resolver.resolve("+442071838750", category)
        assert exc_info.value.calling_code == 44
        assert "+44" in str(exc_info.value)

    def test_missing_calling_code_never_defaults_to_zero(self, small_table):
        resolver = PriceResolver(small_table)

        with pytest.raises(LookupError):
            resolver.resolve("+5511987654321", "service")

    def test_invalid_number_raises(self, small_table):
        with pytest.raises(InvalidPhoneNumberError):
            PriceResolver(small_table).resolve("12ab", "marketing")

    def test_unknown_category_raises(self, small_table):
        with pytest.raises(ValueError):
            PriceResolver(small_table).resolve("+14155551234", "promotional")

    def test_national_number_with_default_region(self, small_table):
        resolver = PriceResolver(small_table)

        price = resolver.resolve("(415) 555-1234", "marketing", default_region="US")
        assert price == Decimal("0.0250")

    def test_repeated_calls_are_identical(self, small_table):
        resolver = PriceResolver(small_table)

        results = {resolver.resolve("+919876543210", "utility") for _ in range(5)}
        assert results == {Decimal("0.0014")}

        for _ in range(3):
            with pytest.raises(PriceNotFoundError):
                resolver.resolve("+442071838750", "utility")


class TestBundledTable:
    def test_bundled_table_loads_once(self):
        assert load_bundled_pricing_table() is load_bundled_pricing_table()

    def test_bundled_table_metadata(self):
        table = load_bundled_pricing_table()

        assert table.currency == "USD"
        assert table.version
        assert 1 in table and 44 in table and 91 in table

    @pytest.mark.parametrize(
        "number,category,expected",
        [
            ("+14155551234", "marketing", "0.0250"),
            ("+442071838750", "utility", "0.0220"),
            ("+919876543210", "authentication-international", "0.0280"),
            ("+5511987654321", "authentication", "0.0315"),
            ("+4930123456", "service", "0.0755"),
        ],
    )
    def test_resolve_price_uses_bundled_table(self, number, category, expected):
        assert resolve_price(number, category) == Decimal(expected)

    def test_non_geographic_code_has_no_price(self):
        with pytest.raises(PriceNotFoundError) as exc_info:
            resolve_price("+80012345678", "marketing")
        assert exc_info.value.calling_code == 800

    def test_resolve_price_with_injected_table(self, small_table):
        with pytest.raises(PriceNotFoundError):
            resolve_price("+442071838750", "marketing", table=small_table)

    def test_every_row_prices_every_category(self):
        table = load_bundled_pricing_table()
        priced = [c for c in ConversationCategory if not c.is_free]

        for calling_code, prices in table.items():
            for category in priced:
                assert prices.price_for(category) >= 0, calling_code
