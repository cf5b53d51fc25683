"""
Tests for the webhook verification handshake.
"""

import pytest
from pydantic import ValidationError

from wacloud.core.exceptions import TokenMismatchError
from wacloud.webhooks.whatsapp.verification import (
    WebhookVerificationRequest,
    verify_webhook,
)


def make_request(token: str = "abc", challenge: int = 12345) -> WebhookVerificationRequest:
    return WebhookVerificationRequest(
        mode="subscribe", challenge=challenge, verify_token=token
    )


class TestWebhookVerificationRequest:
    def test_populates_from_hub_query_keys(self):
        request = WebhookVerificationRequest.model_validate(
            {"hub.mode": "subscribe", "hub.challenge": "1158201444", "hub.verify_token": "meatyhamhock"}
        )

        assert request.mode == "subscribe"
        assert request.challenge == 1158201444
        assert request.verify_token == "meatyhamhock"

    def test_rejects_other_modes(self):
        with pytest.raises(ValidationError):
            WebhookVerificationRequest(mode="unsubscribe", challenge=1, verify_token="abc")

    def test_rejects_non_integer_challenge(self):
        with pytest.raises(ValidationError):
            WebhookVerificationRequest(mode="subscribe", challenge="abc", verify_token="abc")

    def test_is_frozen(self):
        request = make_request()

        with pytest.raises(ValidationError):
            request.verify_token = "other"


class TestVerifyWebhook:
    def test_matching_token_returns_challenge(self):
        challenge = verify_webhook(make_request("abc", 12345), "abc")

        assert challenge == 12345
        assert type(challenge) is int

    def test_mismatched_token_raises(self):
        with pytest.raises(TokenMismatchError) as exc_info:
            verify_webhook(make_request("abc", 12345), "xyz")

        assert "12345" not in str(exc_info.value)
        assert "xyz" not in str(exc_info.value)

    def test_comparison_is_exact(self):
        with pytest.raises(TokenMismatchError):
            verify_webhook(make_request("abc"), "abc ")
        with pytest.raises(TokenMismatchError):
            verify_webhook(make_request("abc"), "ABC")

    def test_non_ascii_tokens(self):
        assert verify_webhook(make_request("tökén", 7), "tökén") == 7

    def test_repeated_calls_are_identical(self):
        request = make_request("abc", 42)

        assert {verify_webhook(request, "abc") for _ in range(5)} == {42}
        for _ in range(3):
            with pytest.raises(TokenMismatchError):
                verify_webhook(request, "nope")

    def test_lone_surrogate_token_is_a_mismatch(self):
        with pytest.raises(TokenMismatchError):
            verify_webhook(make_request("\ud800"), "abc")
        with pytest.raises(TokenMismatchError):
            verify_webhook(make_request("abc"), "\udfff")
