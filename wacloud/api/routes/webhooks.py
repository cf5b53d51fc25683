"""
WhatsApp webhook routes.

``create_webhook_router`` returns a FastAPI ``APIRouter`` with the two
endpoints a callback URL needs:
- GET: subscription verification handshake (plain-text challenge or 403)
- POST: event notifications, parsed into ``WebhookPayload`` and handed to
  an application callback
"""

import inspect
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from wacloud.core.exceptions import TokenMismatchError, WebhookPayloadError
from wacloud.core.logging.logger import get_logger
from wacloud.webhooks.whatsapp.verification import (
    WebhookVerificationRequest,
    verify_webhook,
)
from wacloud.webhooks.whatsapp.webhook_container import WebhookPayload

PayloadCallback = Callable[[WebhookPayload], Awaitable[None] | None]


def create_webhook_router(
    verify_token: str,
    on_payload: PayloadCallback | None = None,
    prefix: str = "/webhook",
) -> APIRouter:
    """
    Create the webhook router.

    Args:
        verify_token: Verify token configured for the app in the Meta dashboard
        on_payload: Sync or async callable receiving every parsed payload
        prefix: Path the callback URL is served at

    Returns:
        APIRouter configured with webhook endpoints
    """
    if not verify_token:
        raise ValueError("verify_token is required for webhook verification")

    logger = get_logger(__name__)

    router = APIRouter(
        prefix=prefix,
        tags=["Webhooks"],
        responses={
            400: {"description": "Bad Request - Invalid webhook payload"},
            403: {"description": "Forbidden - Webhook verification failed"},
        },
    )

    @router.get("", response_class=PlainTextResponse)
    async def verify(
        hub_mode: str | None = Query(None, alias="hub.mode"),
        hub_verify_token: str | None = Query(None, alias="hub.verify_token"),
        hub_challenge: str | None = Query(None, alias="hub.challenge"),
    ):
        """
        Handle the subscription verification handshake.

        Returns:
            PlainTextResponse with the challenge if the token matches
        """
        try:
            request = WebhookVerificationRequest(
                mode=hub_mode, challenge=hub_challenge, verify_token=hub_verify_token
            )
            challenge = verify_webhook(request, verify_token)
        except ValidationError:
            logger.error("Malformed webhook verification request")
            raise HTTPException(status_code=403, detail="Verification failed") from None
        except TokenMismatchError:
            logger.error("Invalid verification token received")
            raise HTTPException(status_code=403, detail="Verification failed") from None

        logger.info("Webhook verification successful")
        return PlainTextResponse(content=str(challenge))

    @router.post("")
    async def receive(request: Request):
        """Parse an event notification and hand it to the callback."""
        body = await request.body()
        try:
            payload = WebhookPayload.parse(body)
        except WebhookPayloadError as e:
            logger.error(f"Rejected webhook payload: {e}")
            raise HTTPException(status_code=400, detail=str(e)) from e

        logger.debug(f"Webhook payload received with {len(payload.entry)} entries")

        if on_payload is not None:
            result = on_payload(payload)
            if inspect.isawaitable(result):
                await result

        return {"status": "received"}

    return router
