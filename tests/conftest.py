"""
Pytest configuration and common fixtures for wacloud tests.

Provides a fake aiohttp session that records requests and replays canned
responses, plus small pricing tables and webhook bodies.
"""

import json
from collections.abc import Callable
from typing import Any

import pytest

from wacloud.core.logging.context import clear_request_context
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.pricing.models import PricingTable

ACCESS_TOKEN = "EAAtest-token"
PHONE_NUMBER_ID = "106540352242922"
BUSINESS_ID = "102290129340398"
BASE_URL = "https://graph.facebook.com"
API_VERSION = "v20.0"


class FakeResponse:
    """Stand-in for ``aiohttp.ClientResponse`` used inside ``async with``."""

    def __init__(self, status: int = 200, json_body: Any = None, reason: str = "OK"):
        self.status = status
        self.reason = reason
        self._json_body = json_body

    async def json(self, content_type: str | None = "application/json") -> Any:
        if isinstance(self._json_body, str):
            return json.loads(self._json_body)
        return self._json_body

    async def text(self) -> str:
        if isinstance(self._json_body, str):
            return self._json_body
        return json.dumps(self._json_body)

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None


class FakeSession:
    """Records requests and returns queued ``FakeResponse`` objects."""

    def __init__(self):
        self.calls: list[dict[str, Any]] = []
        self.responses: list[FakeResponse | Exception] = []

    def queue(self, response: FakeResponse | Exception) -> None:
        self.responses.append(response)

    def _request(self, method: str, url: str, **kwargs) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0) if self.responses else FakeResponse(
            json_body={"success": True}
        )
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, url: str, **kwargs) -> FakeResponse:
        return self._request("POST", url, **kwargs)

    def get(self, url: str, **kwargs) -> FakeResponse:
        return self._request("GET", url, **kwargs)

    def delete(self, url: str, **kwargs) -> FakeResponse:
        return self._request("DELETE", url, **kwargs)

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture(autouse=True)
def reset_logging_context():
    """Keep context variables from leaking between tests."""
    yield
    clear_request_context()


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def make_response() -> type[FakeResponse]:
    return FakeResponse


@pytest.fixture
def client(fake_session) -> WhatsAppClient:
    return WhatsAppClient(
        session=fake_session,
        access_token=ACCESS_TOKEN,
        phone_number_id=PHONE_NUMBER_ID,
        business_id=BUSINESS_ID,
        api_version=API_VERSION,
        base_url=BASE_URL,
    )


@pytest.fixture
def client_without_business(fake_session) -> WhatsAppClient:
    return WhatsAppClient(
        session=fake_session,
        access_token=ACCESS_TOKEN,
        phone_number_id=PHONE_NUMBER_ID,
        api_version=API_VERSION,
        base_url=BASE_URL,
    )


def price_row(
    marketing: str = "0.0250",
    utility: str = "0.0040",
    authentication: str = "0.0135",
    authentication_international: str = "0.0135",
    service: str = "0.0088",
) -> dict[str, str]:
    return {
        "marketing": marketing,
        "utility": utility,
        "authentication": authentication,
        "authentication-international": authentication_international,
        "service": service,
    }


@pytest.fixture
def small_table() -> PricingTable:
    """Table with North America and India only."""
    return PricingTable.from_mapping(
        {
            1: price_row(),
            91: price_row("0.0107", "0.0014", "0.0014", "0.0280", "0.0040"),
        },
        version="test",
    )


@pytest.fixture
def make_message_webhook() -> Callable[..., dict[str, Any]]:
    def _make(message: dict[str, Any] | None = None) -> dict[str, Any]:
        message = message or {
            "from": "16315551181",
            "id": "wamid.ABGGFlA5Fpa",
            "timestamp": "1504902988",
            "type": "text",
            "text": {"body": "this is a text message"},
        }
        return {
            "object": "whatsapp_business_account",
            "entry": [
                {
                    "id": BUSINESS_ID,
                    "changes": [
                        {
                            "field": "messages",
                            "value": {
                                "messaging_product": "whatsapp",
                                "metadata": {
                                    "display_phone_number": "16505551111",
                                    "phone_number_id": PHONE_NUMBER_ID,
                                },
                                "contacts": [
                                    {
                                        "profile": {"name": "Kerry Fisher"},
                                        "wa_id": "16315551181",
                                    }
                                ],
                                "messages": [message],
                            },
                        }
                    ],
                }
            ],
        }

    return _make


@pytest.fixture
def status_webhook() -> dict[str, Any]:
    return {
        "object": "whatsapp_business_account",
        "entry": [
            {
                "id": BUSINESS_ID,
                "changes": [
                    {
                        "field": "messages",
                        "value": {
                            "messaging_product": "whatsapp",
                            "metadata": {
                                "display_phone_number": "16505551111",
                                "phone_number_id": PHONE_NUMBER_ID,
                            },
                            "statuses": [
                                {
                                    "id": "wamid.HBgLMTY1MDM4Nzk0MzkVAgARGBJDQjZCMzlEQUE4OTJBMTE4RTUA",
                                    "status": "delivered",
                                    "timestamp": "1674601245",
                                    "recipient_id": "16315551181",
                                    "biz_opaque_callback_data": "order-42",
                                    "conversation": {
                                        "id": "f4c5d5a1e1a9",
                                        "origin": {"type": "marketing"},
                                        "expiration_timestamp": "1674687645",
                                    },
                                    "pricing": {
                                        "billable": True,
                                        "pricing_model": "CBP",
                                        "category": "marketing",
                                    },
                                }
                            ],
                        },
                    }
                ],
            }
        ],
    }


@pytest.fixture
def make_price_row() -> Callable[..., dict[str, str]]:
    return price_row
