"""
Exception hierarchy for wacloud.

Every error raised by the package derives from ``WacloudError`` so callers
can catch the whole family at once, while the concrete classes also inherit
from the matching builtin (``ValueError``, ``LookupError``) where that reads
naturally.
"""

from typing import Any


class WacloudError(Exception):
    """Base class for all wacloud errors."""


class InvalidPhoneNumberError(WacloudError, ValueError):
    """Destination cannot be parsed into a country calling code."""

    def __init__(self, destination: Any, reason: str | None = None):
        self.destination = destination
        self.reason = reason
        message = f"Invalid phone number: {destination!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PriceNotFoundError(WacloudError, LookupError):
    """The pricing table has no tariff for the destination's calling code."""

    def __init__(self, calling_code: int):
        self.calling_code = calling_code
        super().__init__(f"No pricing data for calling code +{calling_code}")


class PricingTableError(WacloudError, ValueError):
    """A pricing table failed validation while being loaded."""


class TokenMismatchError(WacloudError):
    """Webhook verification token does not match the expected token."""

    def __init__(self, message: str = "Invalid verify token"):
        super().__init__(message)


class WebhookPayloadError(WacloudError, ValueError):
    """An inbound webhook body could not be decoded into the payload model."""


class WhatsAppApiError(WacloudError):
    """
    Error returned by the Graph API.

    Built from the ``{"error": {...}}`` body when one is present; otherwise
    only ``message`` (the raw transport failure text) and ``status`` are set.
    """

    def __init__(
        self,
        message: str,
        *,
        error_type: str | None = None,
        code: int | None = None,
        error_subcode: int | None = None,
        fbtrace_id: str | None = None,
        status: int | None = None,
    ):
        self.message = message
        self.error_type = error_type
        self.code = code
        self.error_subcode = error_subcode
        self.fbtrace_id = fbtrace_id
        self.status = status
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.code is None:
            return self.message

        details = [f"code={self.code}"]
        if self.error_type:
            details.insert(0, self.error_type)
        if self.error_subcode is not None:
            details.append(f"subcode={self.error_subcode}")
        if self.fbtrace_id:
            details.append(f"fbtrace_id={self.fbtrace_id}")
        return f"{self.message} [{', '.join(details)}]"

    @property
    def is_structured(self) -> bool:
        """True when the error came from a Graph API error body."""
        return self.code is not None

    @classmethod
    def from_response_body(
        cls, body: Any, status: int | None = None, fallback_message: str = ""
    ) -> "WhatsAppApiError":
        """
        Unwrap a Graph API error body into a single error.

        Args:
            body: Decoded JSON response body (any type)
            status: HTTP status code of the response
            fallback_message: Raw transport failure text used when the body
                carries no structured error

        Returns:
            WhatsAppApiError describing the failure
        """
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return cls(
                str(error["message"]),
                error_type=error.get("type"),
                code=error.get("code"),
                error_subcode=error.get("error_subcode"),
                fbtrace_id=error.get("fbtrace_id"),
                status=status,
            )

        return cls(fallback_message or f"HTTP {status}", status=status)
