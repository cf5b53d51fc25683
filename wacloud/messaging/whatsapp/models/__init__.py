"""WhatsApp models package."""

from .basic_models import (
    MessageContext,
    MessageRequest,
    MessageResponse,
    MessageType,
    ReadReceipt,
    SuccessResponse,
)
from .message_models import (
    ActionObject,
    ButtonParameterObject,
    ComponentObject,
    ContactAddress,
    ContactEmail,
    ContactName,
    ContactObject,
    ContactOrg,
    ContactPhone,
    ContactUrl,
    CurrencyObject,
    DateTimeObject,
    FlowActionPayload,
    HeaderObject,
    InteractiveObject,
    InteractiveText,
    InteractiveType,
    LanguageObject,
    LocationObject,
    MediaObject,
    ParameterObject,
    ReactionObject,
    ReplyButton,
    ReplyButtonPayload,
    SectionObject,
    SectionProduct,
    SectionRow,
    TemplateObject,
    TextObject,
)
from .template_models import (
    MessageTemplate,
    TemplateButton,
    TemplateButtonType,
    TemplateCategory,
    TemplateComponent,
    TemplateComponentType,
    TemplateCreateRequest,
    TemplateCreateResponse,
    TemplateExample,
    TemplateHeaderFormat,
    TemplateLanguage,
    TemplateListParams,
    TemplateListResponse,
    TemplateStatus,
    TemplateUpdateRequest,
)

__all__ = [
    "MessageContext",
    "MessageRequest",
    "MessageResponse",
    "MessageType",
    "ReadReceipt",
    "SuccessResponse",
    "ActionObject",
    "ButtonParameterObject",
    "ComponentObject",
    "ContactAddress",
    "ContactEmail",
    "ContactName",
    "ContactObject",
    "ContactOrg",
    "ContactPhone",
    "ContactUrl",
    "CurrencyObject",
    "DateTimeObject",
    "FlowActionPayload",
    "HeaderObject",
    "InteractiveObject",
    "InteractiveText",
    "InteractiveType",
    "LanguageObject",
    "LocationObject",
    "MediaObject",
    "ParameterObject",
    "ReactionObject",
    "ReplyButton",
    "ReplyButtonPayload",
    "SectionObject",
    "SectionProduct",
    "SectionRow",
    "TemplateObject",
    "TextObject",
    "MessageTemplate",
    "TemplateButton",
    "TemplateButtonType",
    "TemplateCategory",
    "TemplateComponent",
    "TemplateComponentType",
    "TemplateCreateRequest",
    "TemplateCreateResponse",
    "TemplateExample",
    "TemplateHeaderFormat",
    "TemplateLanguage",
    "TemplateListParams",
    "TemplateListResponse",
    "TemplateStatus",
    "TemplateUpdateRequest",
]
