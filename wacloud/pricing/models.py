"""
Pricing data models.

The rate card is a fixed mapping of country calling code to a complete
``CategoryPrices`` record. Tables are validated when built, so a lookup that
finds a calling code can always answer for every priced category.
"""

import json
from collections.abc import Iterator, Mapping
from decimal import Decimal
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wacloud.core.exceptions import PricingTableError


class ConversationCategory(str, Enum):
    """Billing classification of a conversation (its entry point)."""

    MARKETING = "marketing"
    UTILITY = "utility"
    AUTHENTICATION = "authentication"
    AUTHENTICATION_INTERNATIONAL = "authentication-international"
    SERVICE = "service"
    REFERRAL_CONVERSION = "referral_conversion"

    @property
    def is_free(self) -> bool:
        """Free entry point conversations are never looked up."""
        return self is ConversationCategory.REFERRAL_CONVERSION


class CategoryPrices(BaseModel):
    """USD prices for every priced category of a single calling code."""

    model_config = ConfigDict(
        frozen=True, extra="forbid", populate_by_name=True, strict=False
    )

    marketing: Decimal = Field(..., ge=0)
    utility: Decimal = Field(..., ge=0)
    authentication: Decimal = Field(..., ge=0)
    authentication_international: Decimal = Field(
        ..., ge=0, alias="authentication-international"
    )
    service: Decimal = Field(..., ge=0)

    def price_for(self, category: ConversationCategory) -> Decimal:
        """Return the price for a priced category."""
        if category.is_free:
            return Decimal("0")
        return getattr(self, category.name.lower())


class PricingTable(Mapping[int, CategoryPrices]):
    """
    Immutable calling code → ``CategoryPrices`` mapping.

    Build it with ``from_mapping`` or ``from_json_file``; both reject partial
    rows, negative or non-numeric prices and non-positive calling codes.
    """

    def __init__(
        self,
        rates: Mapping[int, CategoryPrices],
        *,
        version: str | None = None,
        currency: str = "USD",
    ):
        self._rates = MappingProxyType(dict(rates))
        self.version = version
        self.currency = currency

    def __getitem__(self, calling_code: int) -> CategoryPrices:
        return self._rates[calling_code]

    def __iter__(self) -> Iterator[int]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return (
            f"PricingTable(codes={len(self)}, version={self.version!r}, "
            f"currency={self.currency!r})"
        )

    @classmethod
    def from_mapping(
        cls,
        raw_rates: Mapping[Any, Mapping[str, Any]],
        *,
        version: str | None = None,
        currency: str = "USD",
    ) -> "PricingTable":
        """
        Build a table from a plain ``{calling_code: {category: price}}`` mapping.

        Calling codes may be ints or digit strings (JSON object keys).
        Prices may be strings, ints or Decimals; floats are converted through
        ``str`` so ``0.025`` stays ``Decimal("0.025")``.

        Raises:
            PricingTableError: If any row is malformed
        """
        rates: dict[int, CategoryPrices] = {}
        for raw_code, raw_row in raw_rates.items():
            calling_code = _parse_calling_code(raw_code)
            if calling_code in rates:
                raise PricingTableError(f"Duplicate calling code +{calling_code}")
            if not isinstance(raw_row, Mapping):
                raise PricingTableError(
                    f"Row for calling code +{calling_code} must be an object"
                )

            row = {
                key: str(value) if isinstance(value, float) else value
                for key, value in raw_row.items()
            }
            try:
                rates[calling_code] = CategoryPrices.model_validate(row)
            except ValidationError as e:
                raise PricingTableError(
                    f"Invalid row for calling code +{calling_code}: "
                    f"{e.error_count()} error(s): {_summarize(e)}"
                ) from e

        return cls(rates, version=version, currency=currency)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "PricingTable":
        """
        Load a table from a JSON rate card.

        Accepts either ``{"version", "currency", "rates": {...}}`` or a bare
        ``{calling_code: {...}}`` object.
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PricingTableError(f"Cannot read pricing table {path}: {e}") from e

        return cls._from_document(data, source=str(path))

    @classmethod
    def _from_document(cls, data: Any, source: str) -> "PricingTable":
        if not isinstance(data, dict):
            raise PricingTableError(f"Pricing table {source} must be a JSON object")

        if "rates" in data:
            rates = data["rates"]
            if not isinstance(rates, dict):
                raise PricingTableError(f"'rates' in {source} must be an object")
            return cls.from_mapping(
                rates,
                version=data.get("version"),
                currency=data.get("currency", "USD"),
            )

        return cls.from_mapping(data)


def _parse_calling_code(raw_code: Any) -> int:
    if isinstance(raw_code, bool):
        raise PricingTableError(f"Invalid calling code: {raw_code!r}")
    if isinstance(raw_code, int):
        calling_code = raw_code
    elif isinstance(raw_code, str) and raw_code.strip().lstrip("+").isdigit():
        calling_code = int(raw_code.strip().lstrip("+"))
    else:
        raise PricingTableError(f"Invalid calling code: {raw_code!r}")

    if calling_code <= 0:
        raise PricingTableError(f"Calling code must be positive: {raw_code!r}")
    return calling_code


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )
