"""
Webhook subscription verification handshake.

When a callback URL is registered, the Graph API sends
``GET <callback>?hub.mode=subscribe&hub.challenge=<int>&hub.verify_token=<token>``.
The endpoint proves ownership by echoing the challenge back when the token
matches the one configured for the app.
"""

import hmac
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from wacloud.core.exceptions import TokenMismatchError


class WebhookVerificationRequest(BaseModel):
    """The three ``hub.*`` query parameters of a verification request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mode: Literal["subscribe"] = Field(..., alias="hub.mode")
    challenge: int = Field(..., alias="hub.challenge")
    verify_token: str = Field(..., alias="hub.verify_token")


def verify_webhook(payload: WebhookVerificationRequest, expected_token: str) -> int:
    """
    Check the verify token and return the challenge to echo back.

    Args:
        payload: Parsed verification request
        expected_token: Verify token configured for the app

    Returns:
        ``payload.challenge`` unchanged

    Raises:
        TokenMismatchError: If the tokens differ
    """
    if not hmac.compare_digest(
        payload.verify_token.encode("utf-8", "surrogatepass"),
        expected_token.encode("utf-8", "surrogatepass"),
    ):
        raise TokenMismatchError()
    return payload.challenge
