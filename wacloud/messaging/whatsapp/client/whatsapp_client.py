"""
WhatsApp Cloud API HTTP client.

Key Design Decisions:
- Pure dependency injection: the caller owns the aiohttp session
- Single responsibility for HTTP operations (URLs, headers, error unwrapping)
- No retries; Graph API errors surface as ``WhatsAppApiError``
"""

from typing import Any

import aiohttp

from wacloud.core.config.settings import settings
from wacloud.core.exceptions import WhatsAppApiError
from wacloud.core.logging.logger import get_logger


class WhatsAppUrlBuilder:
    """Builds URLs for WhatsApp Cloud API endpoints."""

    def __init__(
        self,
        base_url: str,
        api_version: str,
        phone_number_id: str,
        business_id: str | None = None,
    ):
        """Initialize URL builder with configuration.

        Args:
            base_url: Graph API base URL
            api_version: Graph API version (e.g. ``v20.0``)
            phone_number_id: WhatsApp Business phone number ID
            business_id: WhatsApp Business Account ID, needed for templates
        """
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.phone_number_id = phone_number_id
        self.business_id = business_id

    def get_messages_url(self) -> str:
        """Build URL for sending messages."""
        return f"{self.base_url}/{self.api_version}/{self.phone_number_id}/messages"

    def get_templates_url(self) -> str:
        """Build URL for the account's message templates.

        Raises:
            ValueError: If no business account ID is configured
        """
        if not self.business_id:
            raise ValueError(
                "business_id is required for message template operations (set WP_BID)"
            )
        return f"{self.base_url}/{self.api_version}/{self.business_id}/message_templates"

    def get_endpoint_url(self, endpoint: str) -> str:
        """Build URL for any endpoint path.

        Args:
            endpoint: API endpoint path, with or without a leading slash

        Returns:
            Complete URL for the endpoint
        """
        return f"{self.base_url}/{self.api_version}/{endpoint.lstrip('/')}"


class WhatsAppClient:
    """
    WhatsApp Cloud API client with dependency injection.

    Every request carries the bearer token and a JSON content type. Non-2xx
    responses are turned into ``WhatsAppApiError``; transport failures
    (connection errors, timeouts) propagate unchanged.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        access_token: str,
        phone_number_id: str,
        business_id: str | None = None,
        logger: Any | None = None,
        api_version: str = settings.api_version,
        base_url: str = settings.base_url,
    ):
        """Initialize WhatsApp client with dependency injection.

        Args:
            session: aiohttp session owned by the caller
            access_token: Graph API access token
            phone_number_id: WhatsApp Business phone number ID
            business_id: WhatsApp Business Account ID (template management)
            logger: Pre-configured logger instance
            api_version: Graph API version to use
            base_url: Graph API base URL
        """
        self.session = session
        self.access_token = access_token
        self.phone_number_id = phone_number_id
        self.business_id = business_id
        self.logger = logger or get_logger(__name__)

        self.url_builder = WhatsAppUrlBuilder(
            base_url, api_version, phone_number_id, business_id
        )

        self.logger.debug(
            f"WhatsApp client initialized for phone_id: {self.phone_number_id}, "
            f"api_version: {api_version}"
        )

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers for Graph API requests."""
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }

    async def _handle_response(
        self, response: aiohttp.ClientResponse, method: str, url: str
    ) -> Any:
        """Decode a response, raising ``WhatsAppApiError`` for non-2xx status.

        Args:
            response: Response inside its ``async with`` block
            method: HTTP method, for logging
            url: Requested URL, for logging

        Returns:
            Decoded JSON body

        Raises:
            WhatsAppApiError: If the response status is 400 or above or the
                body is not JSON
        """
        if response.status >= 400:
            try:
                body = await response.json(content_type=None)
            except ValueError:
                body = await response.text()

            error = WhatsAppApiError.from_response_body(
                body,
                status=response.status,
                fallback_message=f"{response.status} {response.reason}",
            )
            self.logger.error(
                f"HTTP {method} error for phone_id {self.phone_number_id}: {error}"
            )
            self.logger.debug(f"Failed URL: {url} - body: {body}")
            raise error

        try:
            response_data = await response.json(content_type=None)
        except ValueError:
            self.logger.error(
                f"HTTP {method} returned a non-JSON body for phone_id {self.phone_number_id}"
            )
            raise WhatsAppApiError(
                f"{response.status} {response.reason}", status=response.status
            ) from None
        self.logger.debug(f"{method} {url} returned: {response_data}")
        return response_data

    async def post_request(
        self, payload: dict[str, Any], custom_url: str | None = None
    ) -> dict[str, Any]:
        """Send POST request to the Graph API.

        Args:
            payload: JSON payload for the request
            custom_url: Optional custom URL (defaults to messages endpoint)

        Returns:
            JSON response from the Graph API

        Raises:
            WhatsAppApiError: For error responses
            aiohttp.ClientError: For transport failures
        """
        url = custom_url or self.url_builder.get_messages_url()

        self.logger.debug(f"Sending JSON request to {url}")
        self.logger.debug(f"Payload: {payload}")

        async with self.session.post(
            url, headers=self._get_headers(), json=payload
        ) as response:
            return await self._handle_response(response, "POST", url)

    async def get_request(
        self, endpoint: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Send GET request to the Graph API.

        Args:
            endpoint: API endpoint path, or a full URL
            params: Optional query parameters

        Returns:
            JSON response from the Graph API
        """
        url = self._resolve_url(endpoint)
        async with self.session.get(
            url, headers=self._get_headers(), params=params
        ) as response:
            return await self._handle_response(response, "GET", url)

    async def delete_request(
        self, endpoint: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Send DELETE request to the Graph API.

        Args:
            endpoint: API endpoint path, or a full URL
            params: Optional query parameters

        Returns:
            JSON response from the Graph API
        """
        url = self._resolve_url(endpoint)
        async with self.session.delete(
            url, headers=self._get_headers(), params=params
        ) as response:
            return await self._handle_response(response, "DELETE", url)

    def _resolve_url(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return self.url_builder.get_endpoint_url(endpoint)
