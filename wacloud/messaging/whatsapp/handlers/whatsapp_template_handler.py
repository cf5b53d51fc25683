"""
WhatsApp message template management handler.

Provides template CRUD on the WhatsApp Business Account:
- Create a template for review
- Edit a template's category and/or components
- List templates with paging
- Delete by name (all languages) or by ID and name (one language)
"""

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.basic_models import SuccessResponse
from wacloud.messaging.whatsapp.models.template_models import (
    TemplateCreateRequest,
    TemplateCreateResponse,
    TemplateListParams,
    TemplateListResponse,
    TemplateUpdateRequest,
)
from wacloud.messaging.whatsapp.utils.error_helpers import log_whatsapp_error


class WhatsAppTemplateHandler:
    """
    Handler for message template management operations.

    All operations except ``update_template`` need the client to be
    configured with a business account ID; without one they raise
    ``ValueError`` before any request is made.
    """

    def __init__(self, client: WhatsAppClient):
        """Initialize template handler.

        Args:
            client: Configured WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    async def create_template(
        self, request: TemplateCreateRequest
    ) -> TemplateCreateResponse:
        """
        Create a message template and submit it for review.

        Args:
            request: Template definition

        Returns:
            TemplateCreateResponse with the template ID, status and category

        Raises:
            ValueError: If no business account ID is configured
            WhatsAppApiError: If the Graph API rejects the request
        """
        url = self.client.url_builder.get_templates_url()
        payload = request.model_dump(mode="json", exclude_none=True)

        self.logger.debug(f"Creating template '{request.name}' ({request.language})")
        try:
            response = await self.client.post_request(payload, custom_url=url)
        except Exception as e:
            log_whatsapp_error(
                e,
                operation="create template",
                target=request.name,
                phone_number_id=self.client.phone_number_id,
                logger=self.logger,
            )
            raise

        result = TemplateCreateResponse.model_validate(response)
        self.logger.info(
            f"Template '{request.name}' created: id={result.id}, status={result.status.value}"
        )
        return result

    async def update_template(
        self, template_id: str, request: TemplateUpdateRequest
    ) -> SuccessResponse:
        """
        Edit an existing template.

        Args:
            template_id: ID of the template to edit
            request: New category and/or components

        Returns:
            SuccessResponse from the Graph API
        """
        if not template_id:
            raise ValueError("template_id is required")

        url = self.client.url_builder.get_endpoint_url(template_id)
        payload = request.model_dump(mode="json", exclude_none=True)

        try:
            response = await self.client.post_request(payload, custom_url=url)
        except Exception as e:
            log_whatsapp_error(
                e,
                operation="update template",
                target=template_id,
                phone_number_id=self.client.phone_number_id,
                logger=self.logger,
            )
            raise

        self.logger.info(f"Template {template_id} updated")
        return SuccessResponse.model_validate(response)

    async def list_templates(
        self, params: TemplateListParams | None = None
    ) -> TemplateListResponse:
        """
        List the account's templates.

        Args:
            params: Optional fields selection, page size and cursors

        Returns:
            One page of templates with paging cursors
        """
        url = self.client.url_builder.get_templates_url()
        query = params.to_query() if params else None

        try:
            response = await self.client.get_request(url, params=query)
        except Exception as e:
            log_whatsapp_error(
                e,
                operation="list templates",
                target=self.client.business_id or "-",
                phone_number_id=self.client.phone_number_id,
                logger=self.logger,
            )
            raise

        result = TemplateListResponse.model_validate(response)
        self.logger.debug(f"Listed {len(result.data)} templates")
        return result

    async def delete_template_by_name(self, name: str) -> SuccessResponse:
        """
        Delete every language version of a template.

        Args:
            name: Template name
        """
        return await self._delete(name, {"name": name})

    async def delete_template_by_id(self, hsm_id: str, name: str) -> SuccessResponse:
        """
        Delete a single language version of a template.

        Args:
            hsm_id: Template ID
            name: Template name
        """
        return await self._delete(f"{name} ({hsm_id})", {"hsm_id": hsm_id, "name": name})

    async def _delete(self, target: str, params: dict[str, str]) -> SuccessResponse:
        if not all(params.values()):
            raise ValueError(f"Template delete requires {', '.join(params)}")

        url = self.client.url_builder.get_templates_url()
        try:
            response = await self.client.delete_request(url, params=params)
        except Exception as e:
            log_whatsapp_error(
                e,
                operation="delete template",
                target=target,
                phone_number_id=self.client.phone_number_id,
                logger=self.logger,
            )
            raise

        self.logger.info(f"Template {target} deleted")
        return SuccessResponse.model_validate(response)
